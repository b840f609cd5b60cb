"""Identities and the consents they have granted."""

from __future__ import annotations

from typing import Any

from parcel_client.client.http import HttpClient
from parcel_client.models.common import ConsentId, IdentityId
from parcel_client.models.identity import (
    IdentityCreateParams,
    IdentityUpdateParams,
    ListGrantedConsentsFilter,
    PODIdentity,
)
from parcel_client.resources.base import Page, Resource, list_page
from parcel_client.resources.consent import Consent

IDENTITIES_EP = "/identities"
IDENTITY_ME_EP = f"{IDENTITIES_EP}/me"


def endpoint_for_id(identity_id: IdentityId) -> str:
    return f"{IDENTITIES_EP}/{identity_id}"


def endpoint_for_consents(identity_id: IdentityId) -> str:
    return f"{endpoint_for_id(identity_id)}/consents"


def endpoint_for_consent(identity_id: IdentityId, consent_id: ConsentId) -> str:
    return f"{endpoint_for_consents(identity_id)}/{consent_id}"


class Identity(Resource[PODIdentity]):
    pod_type = PODIdentity

    @property
    def id(self) -> IdentityId:
        return self._pod.id

    def update(self, params: IdentityUpdateParams | dict[str, Any]) -> Identity:
        self._replace_snapshot(update_identity(self._client, self.id, params))
        return self

    def delete(self) -> None:
        delete_identity(self._client, self.id)

    def grant_consent(self, consent_id: ConsentId) -> None:
        """Grant a consent, creating the grants it describes on this identity's behalf."""
        grant_consent(self._client, self.id, consent_id)

    def get_granted_consent(self, consent_id: ConsentId) -> Consent:
        """Fetch a consent this identity has granted; 404 if it has not."""
        return get_granted_consent(self._client, self.id, consent_id)

    def list_granted_consents(
        self, filter: ListGrantedConsentsFilter | dict[str, Any] | None = None,
    ) -> Page[Consent]:
        return list_granted_consents(self._client, self.id, filter)

    def revoke_consent(self, consent_id: ConsentId) -> None:
        """Revoke a granted consent, deleting the grants it created."""
        revoke_consent(self._client, self.id, consent_id)


def create_identity(
    client: HttpClient, params: IdentityCreateParams | dict[str, Any],
) -> Identity:
    body = IdentityCreateParams.coerce(params).to_wire()
    return Identity(client, client.create(IDENTITIES_EP, body))


def get_identity(client: HttpClient, identity_id: IdentityId) -> Identity:
    return Identity(client, client.get(endpoint_for_id(identity_id)))


def get_current_identity(client: HttpClient) -> Identity:
    return Identity(client, client.get(IDENTITY_ME_EP))


def update_identity(
    client: HttpClient,
    identity_id: IdentityId,
    params: IdentityUpdateParams | dict[str, Any],
) -> Identity:
    body = IdentityUpdateParams.coerce(params).to_wire()
    return Identity(client, client.update(endpoint_for_id(identity_id), body))


def delete_identity(client: HttpClient, identity_id: IdentityId) -> None:
    client.delete(endpoint_for_id(identity_id))


def grant_consent(client: HttpClient, identity_id: IdentityId, consent_id: ConsentId) -> None:
    client.request("POST", endpoint_for_consent(identity_id, consent_id), expected=204)


def get_granted_consent(
    client: HttpClient, identity_id: IdentityId, consent_id: ConsentId,
) -> Consent:
    return Consent(client, client.get(endpoint_for_consent(identity_id, consent_id)))


def list_granted_consents(
    client: HttpClient,
    identity_id: IdentityId,
    filter: ListGrantedConsentsFilter | dict[str, Any] | None = None,
) -> Page[Consent]:
    return list_page(
        client,
        endpoint_for_consents(identity_id),
        Consent,
        ListGrantedConsentsFilter.coerce(filter),
    )


def revoke_consent(client: HttpClient, identity_id: IdentityId, consent_id: ConsentId) -> None:
    client.delete(endpoint_for_consent(identity_id, consent_id))
