"""Dataset wire models."""

from __future__ import annotations

from typing import Any

from parcel_client.models.common import DatasetId, IdentityId, PODModel, WritableParams
from parcel_client.models.filters import ListFilter, StringListMatcher


class PODDataset(PODModel):
    id: DatasetId
    creator: IdentityId
    owner: IdentityId
    metadata: dict[str, Any] | None = None


class DatasetUploadParams(WritableParams):
    metadata: dict[str, Any] | None = None


class DatasetUpdateParams(WritableParams):
    """``metadata`` keys set to ``None`` are deleted server-side."""

    owner: IdentityId | None = None
    metadata: dict[str, Any] | None = None


class ListDatasetsFilter(ListFilter):
    owner: IdentityId | None = None
    creator: IdentityId | None = None
    tags: StringListMatcher | None = None
