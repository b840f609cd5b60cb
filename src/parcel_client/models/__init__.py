"""Pydantic wire models for the Parcel REST API."""

from parcel_client.models.app import AppCreateParams, AppUpdateParams, ListAppsFilter, PODApp
from parcel_client.models.client import (
    ClientCreateParams,
    ClientUpdateParams,
    ListClientsFilter,
    PODClient,
)
from parcel_client.models.common import (
    AppId,
    ClientId,
    ConsentId,
    DatasetId,
    GrantId,
    IdentityId,
    JobId,
    PODModel,
    ResultsPage,
)
from parcel_client.models.consent import ConsentCreateParams, GrantSpec, ListConsentsFilter, PODConsent
from parcel_client.models.dataset import (
    DatasetUpdateParams,
    DatasetUploadParams,
    ListDatasetsFilter,
    PODDataset,
)
from parcel_client.models.filters import StringListMatcher, filter_to_query, query_to_filter
from parcel_client.models.grant import GrantCreateParams, ListGrantsFilter, PODGrant
from parcel_client.models.identity import (
    IdentityCreateParams,
    IdentityTokenVerifier,
    IdentityUpdateParams,
    ListGrantedConsentsFilter,
    PODIdentity,
)
from parcel_client.models.job import (
    InputDatasetSpec,
    JobPhase,
    JobSpec,
    JobStatus,
    ListJobsFilter,
    OutputDatasetSpec,
    PODJob,
    PODJobSpec,
)

__all__ = [
    "AppCreateParams",
    "AppId",
    "AppUpdateParams",
    "ClientCreateParams",
    "ClientId",
    "ClientUpdateParams",
    "ConsentCreateParams",
    "ConsentId",
    "DatasetId",
    "DatasetUpdateParams",
    "DatasetUploadParams",
    "GrantCreateParams",
    "GrantId",
    "GrantSpec",
    "IdentityCreateParams",
    "IdentityId",
    "IdentityTokenVerifier",
    "IdentityUpdateParams",
    "InputDatasetSpec",
    "JobId",
    "JobPhase",
    "JobSpec",
    "JobStatus",
    "ListAppsFilter",
    "ListClientsFilter",
    "ListConsentsFilter",
    "ListDatasetsFilter",
    "ListGrantedConsentsFilter",
    "ListGrantsFilter",
    "ListJobsFilter",
    "OutputDatasetSpec",
    "PODApp",
    "PODClient",
    "PODConsent",
    "PODDataset",
    "PODGrant",
    "PODIdentity",
    "PODJob",
    "PODJobSpec",
    "PODModel",
    "ResultsPage",
    "StringListMatcher",
    "filter_to_query",
    "query_to_filter",
]
