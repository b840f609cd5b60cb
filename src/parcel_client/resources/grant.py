"""Grants: access conditions one identity extends to another."""

from __future__ import annotations

from typing import Any

from parcel_client.client.http import HttpClient
from parcel_client.models.common import GrantId
from parcel_client.models.grant import GrantCreateParams, ListGrantsFilter, PODGrant
from parcel_client.resources.base import Page, Resource, list_page

GRANTS_EP = "/grants"


def endpoint_for_id(grant_id: GrantId) -> str:
    return f"{GRANTS_EP}/{grant_id}"


class Grant(Resource[PODGrant]):
    pod_type = PODGrant

    @property
    def id(self) -> GrantId:
        return self._pod.id

    def delete(self) -> None:
        delete_grant(self._client, self.id)


def create_grant(client: HttpClient, params: GrantCreateParams | dict[str, Any]) -> Grant:
    body = GrantCreateParams.coerce(params).to_wire()
    return Grant(client, client.create(GRANTS_EP, body))


def get_grant(client: HttpClient, grant_id: GrantId) -> Grant:
    return Grant(client, client.get(endpoint_for_id(grant_id)))


def list_grants(
    client: HttpClient, filter: ListGrantsFilter | dict[str, Any] | None = None,
) -> Page[Grant]:
    return list_page(client, GRANTS_EP, Grant, ListGrantsFilter.coerce(filter))


def delete_grant(client: HttpClient, grant_id: GrantId) -> None:
    client.delete(endpoint_for_id(grant_id))
