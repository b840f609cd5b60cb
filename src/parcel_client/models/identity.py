"""Identity wire models."""

from __future__ import annotations

from typing import Any

from parcel_client.models.common import AppId, IdentityId, PODModel, WireModel, WritableParams
from parcel_client.models.filters import ListFilter


class IdentityTokenVerifier(WireModel):
    """A credential the gateway accepts as proof of an identity.

    ``public_key`` is a JSON Web Key; tokens whose ``sub``/``iss`` match and
    whose signature verifies against it authenticate as the identity.
    """

    sub: str
    iss: str
    public_key: dict[str, Any]


class PODIdentity(PODModel):
    id: IdentityId
    token_verifiers: list[IdentityTokenVerifier]


class IdentityCreateParams(WritableParams):
    token_verifiers: list[IdentityTokenVerifier]


class IdentityUpdateParams(WritableParams):
    token_verifiers: list[IdentityTokenVerifier] | None = None


class ListGrantedConsentsFilter(ListFilter):
    """Only return consents granted to the given app."""

    app: AppId | None = None
