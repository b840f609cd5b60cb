"""Consent wire models."""

from __future__ import annotations

from typing import Any

from parcel_client.models.common import AppId, ConsentId, PODModel, WireModel, WritableParams
from parcel_client.models.filters import ListFilter


class GrantSpec(WireModel):
    """A grant created on behalf of a participant when they accept a consent.

    ``granter`` and ``grantee`` are roles (``participant``, ``app``) or
    identity ids; ``filter`` is the grant's access condition.
    """

    granter: str
    grantee: str
    filter: dict[str, Any] | None = None


class PODConsent(PODModel):
    id: ConsentId
    app_id: AppId
    grants: list[GrantSpec]
    required: bool
    name: str
    description: str
    allow_text: str
    deny_text: str


class ConsentCreateParams(WritableParams):
    grants: list[GrantSpec]
    name: str
    description: str
    allow_text: str
    deny_text: str
    required: bool | None = None


class ListConsentsFilter(ListFilter):
    pass
