"""Authentication strategies for the Parcel gateway."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from parcel_client.config.models import ApiProfile


class BearerTokenAuth(httpx.Auth):
    """Authenticate with a Parcel API token (``Authorization: Bearer <token>``)."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


def resolve_auth(profile: ApiProfile) -> httpx.Auth | None:
    """Resolve authentication from an API profile."""
    if profile.token:
        return BearerTokenAuth(profile.token)
    return None
