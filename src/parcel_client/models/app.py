"""App wire models."""

from __future__ import annotations

from typing import Literal

from parcel_client.models.common import AppId, IdentityId, PODModel, WritableParams
from parcel_client.models.filters import ListFilter
from parcel_client.models.identity import IdentityTokenVerifier

AppParticipation = Literal["invited", "joined"]


class PODApp(PODModel):
    id: AppId
    owner: IdentityId
    admins: list[IdentityId]
    collaborators: list[IdentityId]
    participants: list[IdentityId]
    published: bool
    invite_only: bool
    invites: list[IdentityId] | None = None
    name: str
    organization: str
    short_description: str
    homepage: str
    privacy_policy: str
    terms_and_conditions: str
    invitation_text: str | None = None
    acceptance_text: str | None = None
    rejection_text: str | None = None
    extended_description: str | None = None
    branding_color: str | None = None
    category: str | None = None
    logo: str | None = None


class AppUpdateParams(WritableParams):
    """Writable app fields. ``participants`` is system-controlled and excluded."""

    owner: IdentityId | None = None
    admins: list[IdentityId] | None = None
    collaborators: list[IdentityId] | None = None
    published: bool | None = None
    invite_only: bool | None = None
    invites: list[IdentityId] | None = None
    name: str | None = None
    organization: str | None = None
    short_description: str | None = None
    homepage: str | None = None
    privacy_policy: str | None = None
    terms_and_conditions: str | None = None
    invitation_text: str | None = None
    acceptance_text: str | None = None
    rejection_text: str | None = None
    extended_description: str | None = None
    branding_color: str | None = None
    category: str | None = None
    logo: str | None = None


class AppCreateParams(AppUpdateParams):
    name: str
    organization: str
    short_description: str
    homepage: str
    privacy_policy: str
    terms_and_conditions: str
    # Credentials used to authorize clients acting as this app.
    identity_token_verifiers: list[IdentityTokenVerifier] | None = None


class ListAppsFilter(ListFilter):
    owner: IdentityId | None = None
    creator: IdentityId | None = None
    participation: AppParticipation | None = None
