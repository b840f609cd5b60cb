"""Client (OAuth application client) wire models."""

from __future__ import annotations

from typing import Any

from parcel_client.models.common import AppId, ClientId, IdentityId, PODModel, WritableParams
from parcel_client.models.filters import ListFilter


class PODClient(PODModel):
    id: ClientId
    creator: IdentityId
    app_id: AppId
    name: str
    audience: str | None = None
    redirect_uris: list[str]
    post_logout_redirect_uris: list[str]
    json_web_keys: list[dict[str, Any]]
    can_hold_secrets: bool
    can_act_on_behalf_of_users: bool
    is_script: bool


class ClientUpdateParams(WritableParams):
    name: str | None = None
    redirect_uris: list[str] | None = None
    post_logout_redirect_uris: list[str] | None = None
    json_web_keys: list[dict[str, Any]] | None = None


class ClientCreateParams(ClientUpdateParams):
    """``creator``, ``app_id`` and ``can_act_on_behalf_of_users`` are server-assigned."""

    name: str
    audience: str | None = None
    can_hold_secrets: bool | None = None
    is_script: bool | None = None


class ListClientsFilter(ListFilter):
    creator: IdentityId | None = None
