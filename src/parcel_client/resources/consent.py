"""Consents an app requests from its participants."""

from __future__ import annotations

from typing import Any

from parcel_client.client.http import HttpClient
from parcel_client.models.common import AppId, ConsentId
from parcel_client.models.consent import ConsentCreateParams, ListConsentsFilter, PODConsent
from parcel_client.resources.base import Page, Resource, list_page


def endpoint_for_consents(app_id: AppId) -> str:
    return f"/apps/{app_id}/consents"


def endpoint_for_id(app_id: AppId, consent_id: ConsentId) -> str:
    return f"{endpoint_for_consents(app_id)}/{consent_id}"


class Consent(Resource[PODConsent]):
    pod_type = PODConsent

    @property
    def id(self) -> ConsentId:
        return self._pod.id

    @property
    def app_id(self) -> AppId:
        return self._pod.app_id

    def delete(self) -> None:
        delete_consent(self._client, self.app_id, self.id)


def create_consent(
    client: HttpClient, app_id: AppId, params: ConsentCreateParams | dict[str, Any],
) -> Consent:
    body = ConsentCreateParams.coerce(params).to_wire()
    return Consent(client, client.create(endpoint_for_consents(app_id), body))


def get_consent(client: HttpClient, app_id: AppId, consent_id: ConsentId) -> Consent:
    return Consent(client, client.get(endpoint_for_id(app_id, consent_id)))


def list_consents(
    client: HttpClient,
    app_id: AppId,
    filter: ListConsentsFilter | dict[str, Any] | None = None,
) -> Page[Consent]:
    return list_page(
        client, endpoint_for_consents(app_id), Consent, ListConsentsFilter.coerce(filter),
    )


def delete_consent(client: HttpClient, app_id: AppId, consent_id: ConsentId) -> None:
    """Delete a consent, revoking any access granted through it."""
    client.delete(endpoint_for_id(app_id, consent_id))
