"""OAuth clients registered under an app."""

from __future__ import annotations

from typing import Any

from parcel_client.client.http import HttpClient
from parcel_client.models.client import (
    ClientCreateParams,
    ClientUpdateParams,
    ListClientsFilter,
    PODClient,
)
from parcel_client.models.common import AppId, ClientId
from parcel_client.resources.base import Page, Resource, list_page


def endpoint_for_clients(app_id: AppId) -> str:
    return f"/apps/{app_id}/clients"


def endpoint_for_id(app_id: AppId, client_id: ClientId) -> str:
    return f"{endpoint_for_clients(app_id)}/{client_id}"


class Client(Resource[PODClient]):
    pod_type = PODClient

    @property
    def id(self) -> ClientId:
        return self._pod.id

    @property
    def app_id(self) -> AppId:
        return self._pod.app_id

    def update(self, params: ClientUpdateParams | dict[str, Any]) -> Client:
        self._replace_snapshot(update_client(self._client, self.app_id, self.id, params))
        return self

    def delete(self) -> None:
        delete_client(self._client, self.app_id, self.id)


def create_client(
    client: HttpClient, app_id: AppId, params: ClientCreateParams | dict[str, Any],
) -> Client:
    body = ClientCreateParams.coerce(params).to_wire()
    return Client(client, client.create(endpoint_for_clients(app_id), body))


def get_client(client: HttpClient, app_id: AppId, client_id: ClientId) -> Client:
    return Client(client, client.get(endpoint_for_id(app_id, client_id)))


def list_clients(
    client: HttpClient,
    app_id: AppId,
    filter: ListClientsFilter | dict[str, Any] | None = None,
) -> Page[Client]:
    return list_page(
        client, endpoint_for_clients(app_id), Client, ListClientsFilter.coerce(filter),
    )


def update_client(
    client: HttpClient,
    app_id: AppId,
    client_id: ClientId,
    params: ClientUpdateParams | dict[str, Any],
) -> Client:
    body = ClientUpdateParams.coerce(params).to_wire()
    return Client(client, client.update(endpoint_for_id(app_id, client_id), body))


def delete_client(client: HttpClient, app_id: AppId, client_id: ClientId) -> None:
    client.delete(endpoint_for_id(app_id, client_id))
