"""Tests for apps and the consents and clients nested under them."""

from __future__ import annotations

import json

import httpx
import pydantic
import pytest
import respx

from parcel_client.resources.app import App
from parcel_client.resources.client import Client
from parcel_client.resources.consent import Consent

API = "https://api.test/parcel/v1"

CREATE_FIELDS = (
    "name",
    "organization",
    "shortDescription",
    "homepage",
    "privacyPolicy",
    "termsAndConditions",
    "inviteOnly",
    "published",
)


@pytest.fixture
def app(parcel, make_pod_app):
    return App(parcel.client, make_pod_app())


class TestApps:
    @respx.mock
    def test_create(self, parcel, make_pod_app, assert_matches_pod):
        pod = make_pod_app()
        route = respx.post(f"{API}/apps").mock(return_value=httpx.Response(201, json=pod))
        created = parcel.create_app({key: pod[key] for key in CREATE_FIELDS})
        assert_matches_pod(created, pod)
        body = json.loads(route.calls.last.request.read())
        assert body == {key: pod[key] for key in CREATE_FIELDS}

    def test_create_rejects_participants(self, parcel, make_pod_app):
        pod = make_pod_app()
        params = {key: pod[key] for key in CREATE_FIELDS}
        with pytest.raises(pydantic.ValidationError):
            parcel.create_app({**params, "participants": []})

    @respx.mock
    def test_get(self, parcel, make_pod_app, assert_matches_pod):
        pod = make_pod_app()
        respx.get(f"{API}/apps/{pod['id']}").mock(return_value=httpx.Response(200, json=pod))
        assert_matches_pod(parcel.get_app(pod["id"]), pod)

    @respx.mock
    def test_list_with_filter(self, parcel, make_pod_app, results_page):
        page = results_page(3, make_pod_app)
        route = respx.get(f"{API}/apps").mock(return_value=httpx.Response(200, json=page))
        listed = parcel.list_apps({"owner": "me", "participation": "joined"})
        assert len(listed) == 3
        assert all(isinstance(a, App) for a in listed)
        assert listed.has_more
        params = route.calls.last.request.url.params
        assert params["owner"] == "me"
        assert params["participation"] == "joined"

    @respx.mock
    def test_list_last_page(self, parcel, make_pod_app, results_page):
        page = results_page(1, make_pod_app, token=False)
        route = respx.get(f"{API}/apps").mock(return_value=httpx.Response(200, json=page))
        listed = parcel.list_apps({"nextPageToken": "cursor"})
        assert not listed.has_more
        assert listed.next_page_token is None
        assert route.calls.last.request.url.params["next-page-token"] == "cursor"

    @respx.mock
    def test_update_sends_only_given_fields(self, app):
        updated = {**app.to_pod(), "published": True}
        route = respx.put(f"{API}/apps/{app.id}").mock(
            return_value=httpx.Response(200, json=updated)
        )
        app.update({"published": True})
        assert app.published is True
        assert json.loads(route.calls.last.request.read()) == {"published": True}

    @respx.mock
    def test_delete(self, app):
        route = respx.delete(f"{API}/apps/{app.id}").mock(return_value=httpx.Response(204))
        app.delete()
        assert route.called

    def test_unknown_attribute(self, app):
        with pytest.raises(AttributeError, match="no attribute 'colour'"):
            app.colour

    def test_model_api_not_exposed(self, app):
        for name in ("model_dump", "model_copy", "model_fields"):
            with pytest.raises(AttributeError):
                getattr(app, name)

    def test_extra_wire_field_readable(self, parcel, make_pod_app):
        app = App(parcel.client, {**make_pod_app(), "brandColor": "teal"})
        assert app.brandColor == "teal"


class TestConsents:
    @respx.mock
    def test_create(self, app, make_pod_consent, assert_matches_pod):
        pod = make_pod_consent(app_id=app.id)
        route = respx.post(f"{API}/apps/{app.id}/consents").mock(
            return_value=httpx.Response(201, json=pod)
        )
        params = {
            key: pod[key]
            for key in ("grants", "name", "description", "allowText", "denyText", "required")
        }
        consent = app.create_consent(params)
        assert isinstance(consent, Consent)
        assert consent.app_id == app.id
        assert_matches_pod(consent, pod)
        assert json.loads(route.calls.last.request.read()) == params

    @respx.mock
    def test_get(self, app, make_pod_consent, assert_matches_pod):
        pod = make_pod_consent(app_id=app.id)
        respx.get(f"{API}/apps/{app.id}/consents/{pod['id']}").mock(
            return_value=httpx.Response(200, json=pod)
        )
        assert_matches_pod(app.get_consent(pod["id"]), pod)

    @respx.mock
    def test_list(self, app, make_pod_consent, results_page):
        page = results_page(2, lambda: make_pod_consent(app_id=app.id))
        respx.get(f"{API}/apps/{app.id}/consents").mock(
            return_value=httpx.Response(200, json=page)
        )
        listed = app.list_consents()
        assert [c.id for c in listed] == [c["id"] for c in page["results"]]

    @respx.mock
    def test_delete_via_consent(self, app, make_pod_consent):
        consent = Consent(app._client, make_pod_consent(app_id=app.id))
        route = respx.delete(f"{API}/apps/{app.id}/consents/{consent.id}").mock(
            return_value=httpx.Response(204)
        )
        consent.delete()
        assert route.called


class TestClients:
    @respx.mock
    def test_create_script_client(self, app, make_pod_client, assert_matches_pod):
        pod = make_pod_client(app_id=app.id, is_script=True)
        route = respx.post(f"{API}/apps/{app.id}/clients").mock(
            return_value=httpx.Response(201, json=pod)
        )
        client = app.create_client({
            "name": pod["name"],
            "jsonWebKeys": pod["jsonWebKeys"],
            "canHoldSecrets": True,
            "isScript": True,
        })
        assert isinstance(client, Client)
        assert_matches_pod(client, pod)
        body = json.loads(route.calls.last.request.read())
        assert body["isScript"] is True
        assert "canActOnBehalfOfUsers" not in body

    @respx.mock
    def test_get(self, parcel, app, make_pod_client, assert_matches_pod):
        pod = make_pod_client(app_id=app.id)
        respx.get(f"{API}/apps/{app.id}/clients/{pod['id']}").mock(
            return_value=httpx.Response(200, json=pod)
        )
        assert_matches_pod(parcel.get_client(app.id, pod["id"]), pod)

    @respx.mock
    def test_list_by_creator(self, app, make_pod_client, results_page):
        page = results_page(2, lambda: make_pod_client(app_id=app.id))
        route = respx.get(f"{API}/apps/{app.id}/clients").mock(
            return_value=httpx.Response(200, json=page)
        )
        listed = app.list_clients({"creator": "someone"})
        assert len(listed) == 2
        assert route.calls.last.request.url.params["creator"] == "someone"

    @respx.mock
    def test_update(self, app, make_pod_client):
        pod = make_pod_client(app_id=app.id)
        client = Client(app._client, pod)
        respx.put(f"{API}/apps/{app.id}/clients/{client.id}").mock(
            return_value=httpx.Response(200, json={**pod, "name": "renamed"})
        )
        client.update({"name": "renamed"})
        assert client.name == "renamed"

    def test_update_rejects_audience(self, app, make_pod_client):
        client = Client(app._client, make_pod_client(app_id=app.id))
        with pytest.raises(pydantic.ValidationError):
            client.update({"audience": "elsewhere"})

    @respx.mock
    def test_delete(self, parcel, app):
        route = respx.delete(f"{API}/apps/{app.id}/clients/c1").mock(
            return_value=httpx.Response(204)
        )
        parcel.delete_client(app.id, "c1")
        assert route.called
