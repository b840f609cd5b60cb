"""Top-level client: one shared HTTP transport, every collection operation."""

from __future__ import annotations

from typing import Any

from parcel_client.client.http import HttpClient
from parcel_client.config.constants import DEFAULT_API_URL, DEFAULT_TIMEOUT
from parcel_client.config.manager import ConfigManager
from parcel_client.config.models import ApiProfile
from parcel_client.models.app import AppCreateParams, AppUpdateParams, ListAppsFilter
from parcel_client.models.client import ClientCreateParams, ClientUpdateParams, ListClientsFilter
from parcel_client.models.common import (
    AppId,
    ClientId,
    ConsentId,
    DatasetId,
    GrantId,
    IdentityId,
    JobId,
)
from parcel_client.models.consent import ConsentCreateParams, ListConsentsFilter
from parcel_client.models.dataset import DatasetUpdateParams, DatasetUploadParams, ListDatasetsFilter
from parcel_client.models.grant import GrantCreateParams, ListGrantsFilter
from parcel_client.models.identity import IdentityCreateParams, IdentityUpdateParams
from parcel_client.models.job import JobSpec, ListJobsFilter
from parcel_client.resources import app as apps
from parcel_client.resources import client as clients
from parcel_client.resources import consent as consents
from parcel_client.resources import dataset as datasets
from parcel_client.resources import grant as grants
from parcel_client.resources import identity as identities
from parcel_client.resources import job as jobs
from parcel_client.resources.app import App
from parcel_client.resources.base import Page
from parcel_client.resources.client import Client
from parcel_client.resources.consent import Consent
from parcel_client.resources.dataset import Dataset, Download, Upload, UploadData
from parcel_client.resources.grant import Grant
from parcel_client.resources.identity import Identity
from parcel_client.resources.job import Job


class Parcel:
    """Entry point to the Parcel API.

    Every resource object created through this client shares its
    :class:`HttpClient`; close the client (or use it as a context manager)
    when done.

    >>> with Parcel("my-api-token") as parcel:
    ...     me = parcel.get_current_identity()
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        profile: ApiProfile | None = None,
        http_client: HttpClient | None = None,
    ) -> None:
        if http_client is None:
            if profile is None:
                profile = ApiProfile(
                    name="default",
                    api_url=api_url,
                    token=token,
                    timeout=timeout,
                    verify_ssl=verify_ssl,
                )
            http_client = HttpClient(profile)
        self.client = http_client

    @classmethod
    def from_profile(
        cls,
        profile_name: str | None = None,
        *,
        api_url: str | None = None,
        token: str | None = None,
        config: ConfigManager | None = None,
    ) -> Parcel:
        """Build a client from the config file and ``PARCEL_*`` environment variables."""
        mgr = config or ConfigManager()
        return cls(profile=mgr.resolve_profile(profile_name, api_url=api_url, token=token))

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> Parcel:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # Identities

    def create_identity(self, params: IdentityCreateParams | dict[str, Any]) -> Identity:
        return identities.create_identity(self.client, params)

    def get_identity(self, identity_id: IdentityId) -> Identity:
        return identities.get_identity(self.client, identity_id)

    def get_current_identity(self) -> Identity:
        return identities.get_current_identity(self.client)

    def update_identity(
        self, identity_id: IdentityId, params: IdentityUpdateParams | dict[str, Any],
    ) -> Identity:
        return identities.update_identity(self.client, identity_id, params)

    def delete_identity(self, identity_id: IdentityId) -> None:
        identities.delete_identity(self.client, identity_id)

    # Apps

    def create_app(self, params: AppCreateParams | dict[str, Any]) -> App:
        return apps.create_app(self.client, params)

    def get_app(self, app_id: AppId) -> App:
        return apps.get_app(self.client, app_id)

    def list_apps(self, filter: ListAppsFilter | dict[str, Any] | None = None) -> Page[App]:
        return apps.list_apps(self.client, filter)

    def update_app(self, app_id: AppId, params: AppUpdateParams | dict[str, Any]) -> App:
        return apps.update_app(self.client, app_id, params)

    def delete_app(self, app_id: AppId) -> None:
        apps.delete_app(self.client, app_id)

    # Consents

    def create_consent(
        self, app_id: AppId, params: ConsentCreateParams | dict[str, Any],
    ) -> Consent:
        return consents.create_consent(self.client, app_id, params)

    def get_consent(self, app_id: AppId, consent_id: ConsentId) -> Consent:
        return consents.get_consent(self.client, app_id, consent_id)

    def list_consents(
        self, app_id: AppId, filter: ListConsentsFilter | dict[str, Any] | None = None,
    ) -> Page[Consent]:
        return consents.list_consents(self.client, app_id, filter)

    def delete_consent(self, app_id: AppId, consent_id: ConsentId) -> None:
        consents.delete_consent(self.client, app_id, consent_id)

    # Clients

    def create_client(
        self, app_id: AppId, params: ClientCreateParams | dict[str, Any],
    ) -> Client:
        return clients.create_client(self.client, app_id, params)

    def get_client(self, app_id: AppId, client_id: ClientId) -> Client:
        return clients.get_client(self.client, app_id, client_id)

    def list_clients(
        self, app_id: AppId, filter: ListClientsFilter | dict[str, Any] | None = None,
    ) -> Page[Client]:
        return clients.list_clients(self.client, app_id, filter)

    def update_client(
        self,
        app_id: AppId,
        client_id: ClientId,
        params: ClientUpdateParams | dict[str, Any],
    ) -> Client:
        return clients.update_client(self.client, app_id, client_id, params)

    def delete_client(self, app_id: AppId, client_id: ClientId) -> None:
        clients.delete_client(self.client, app_id, client_id)

    # Grants

    def create_grant(self, params: GrantCreateParams | dict[str, Any]) -> Grant:
        return grants.create_grant(self.client, params)

    def get_grant(self, grant_id: GrantId) -> Grant:
        return grants.get_grant(self.client, grant_id)

    def list_grants(
        self, filter: ListGrantsFilter | dict[str, Any] | None = None,
    ) -> Page[Grant]:
        return grants.list_grants(self.client, filter)

    def delete_grant(self, grant_id: GrantId) -> None:
        grants.delete_grant(self.client, grant_id)

    # Datasets

    def upload_dataset(
        self,
        data: UploadData,
        params: DatasetUploadParams | dict[str, Any] | None = None,
    ) -> Upload:
        """Prepare a dataset upload; call ``.finished()`` on the result to send it."""
        return datasets.upload_dataset(self.client, data, params)

    def download_dataset(self, dataset_id: DatasetId) -> Download:
        return datasets.download_dataset(self.client, dataset_id)

    def get_dataset(self, dataset_id: DatasetId) -> Dataset:
        return datasets.get_dataset(self.client, dataset_id)

    def list_datasets(
        self, filter: ListDatasetsFilter | dict[str, Any] | None = None,
    ) -> Page[Dataset]:
        return datasets.list_datasets(self.client, filter)

    def update_dataset(
        self, dataset_id: DatasetId, params: DatasetUpdateParams | dict[str, Any],
    ) -> Dataset:
        return datasets.update_dataset(self.client, dataset_id, params)

    def delete_dataset(self, dataset_id: DatasetId) -> None:
        datasets.delete_dataset(self.client, dataset_id)

    # Compute jobs

    def submit_job(self, spec: JobSpec | dict[str, Any]) -> Job:
        return jobs.submit_job(self.client, spec)

    def get_job(self, job_id: JobId) -> Job:
        return jobs.get_job(self.client, job_id)

    def list_jobs(self, filter: ListJobsFilter | dict[str, Any] | None = None) -> Page[Job]:
        return jobs.list_jobs(self.client, filter)

    def terminate_job(self, job_id: JobId) -> None:
        jobs.terminate_job(self.client, job_id)
