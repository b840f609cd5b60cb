"""Grant wire models."""

from __future__ import annotations

from typing import Any, Union

from parcel_client.models.common import AppId, ConsentId, GrantId, IdentityId, PODModel, WritableParams
from parcel_client.models.filters import ListFilter

# Grants may name an identity or an app as grantee.
GranteeId = Union[IdentityId, AppId]


class PODGrant(PODModel):
    id: GrantId
    granter: IdentityId
    grantee: GranteeId
    consent: ConsentId | None = None
    filter: dict[str, Any] | None = None


class GrantCreateParams(WritableParams):
    grantee: GranteeId
    filter: dict[str, Any] | None = None


class ListGrantsFilter(ListFilter):
    granter: IdentityId | None = None
    grantee: GranteeId | None = None
