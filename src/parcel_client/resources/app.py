"""Apps: the unit participants join and grant consents to."""

from __future__ import annotations

from typing import Any

from parcel_client.client.http import HttpClient
from parcel_client.models.app import AppCreateParams, AppUpdateParams, ListAppsFilter, PODApp
from parcel_client.models.client import ClientCreateParams, ListClientsFilter
from parcel_client.models.common import AppId, ConsentId
from parcel_client.models.consent import ConsentCreateParams, ListConsentsFilter
from parcel_client.resources import client as clients
from parcel_client.resources import consent as consents
from parcel_client.resources.base import Page, Resource, list_page
from parcel_client.resources.client import Client
from parcel_client.resources.consent import Consent

APPS_EP = "/apps"


def endpoint_for_id(app_id: AppId) -> str:
    return f"{APPS_EP}/{app_id}"


class App(Resource[PODApp]):
    pod_type = PODApp

    @property
    def id(self) -> AppId:
        return self._pod.id

    def update(self, params: AppUpdateParams | dict[str, Any]) -> App:
        self._replace_snapshot(update_app(self._client, self.id, params))
        return self

    def delete(self) -> None:
        delete_app(self._client, self.id)

    def create_consent(self, params: ConsentCreateParams | dict[str, Any]) -> Consent:
        """Create a consent that this app will request from its participants."""
        return consents.create_consent(self._client, self.id, params)

    def get_consent(self, consent_id: ConsentId) -> Consent:
        return consents.get_consent(self._client, self.id, consent_id)

    def list_consents(
        self, filter: ListConsentsFilter | dict[str, Any] | None = None,
    ) -> Page[Consent]:
        return consents.list_consents(self._client, self.id, filter)

    def delete_consent(self, consent_id: ConsentId) -> None:
        """Delete a consent, revoking any access granted through it."""
        consents.delete_consent(self._client, self.id, consent_id)

    def create_client(self, params: ClientCreateParams | dict[str, Any]) -> Client:
        return clients.create_client(self._client, self.id, params)

    def list_clients(
        self, filter: ListClientsFilter | dict[str, Any] | None = None,
    ) -> Page[Client]:
        return clients.list_clients(self._client, self.id, filter)


def create_app(client: HttpClient, params: AppCreateParams | dict[str, Any]) -> App:
    body = AppCreateParams.coerce(params).to_wire()
    return App(client, client.create(APPS_EP, body))


def get_app(client: HttpClient, app_id: AppId) -> App:
    return App(client, client.get(endpoint_for_id(app_id)))


def list_apps(
    client: HttpClient, filter: ListAppsFilter | dict[str, Any] | None = None,
) -> Page[App]:
    return list_page(client, APPS_EP, App, ListAppsFilter.coerce(filter))


def update_app(
    client: HttpClient, app_id: AppId, params: AppUpdateParams | dict[str, Any],
) -> App:
    body = AppUpdateParams.coerce(params).to_wire()
    return App(client, client.update(endpoint_for_id(app_id), body))


def delete_app(client: HttpClient, app_id: AppId) -> None:
    client.delete(endpoint_for_id(app_id))
