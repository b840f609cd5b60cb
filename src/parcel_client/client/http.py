"""Gateway HTTP client.

Every resource module talks to the gateway exclusively through
:class:`HttpClient`. Each method issues exactly one request and checks the
status code the REST contract mandates for it:

* ``create`` expects ``201``
* ``get`` and ``update`` expect ``200``
* ``delete`` expects ``204``; a ``200`` with a body is a contract violation
* ``stream_upload`` accepts any 2xx
* ``stream_download`` expects ``200`` and raises before yielding any bytes
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

import httpx

from parcel_client.client.auth import resolve_auth
from parcel_client.client.errors import (
    ContractViolationError,
    GatewayConnectionError,
    error_for_status,
)
from parcel_client.config.constants import DOWNLOAD_CHUNK_SIZE
from parcel_client.config.models import ApiProfile

logger = logging.getLogger(__name__)

# (part name, (filename, content, content type))
MultipartPart = tuple[str, tuple[str | None, Any, str]]


class HttpClient:
    """Synchronous HTTP client for the Parcel REST API."""

    def __init__(
        self,
        profile: ApiProfile,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.profile = profile
        self.base_url = profile.api_url
        if not profile.verify_ssl:
            logger.warning("TLS certificate verification is disabled")
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=resolve_auth(profile),
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @contextmanager
    def _transport_errors(self) -> Iterator[None]:
        try:
            yield
        except httpx.TimeoutException as exc:
            raise GatewayConnectionError(
                f"Request to {self.base_url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise GatewayConnectionError(
                f"Invalid URL for gateway at {self.base_url}: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise GatewayConnectionError(
                f"Cannot connect to gateway at {self.base_url}: {exc}"
            ) from exc

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        logger.debug(
            "%s %s -> %s",
            response.request.method, response.request.url.path, response.status_code,
        )
        if response.is_success:
            return response
        detail = response.text
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = None
        if isinstance(body, dict):
            detail = str(body.get("message") or body.get("error") or detail)
        raise error_for_status(response.status_code, detail)

    @staticmethod
    def _expect(response: httpx.Response, expected: int) -> httpx.Response:
        if response.status_code != expected:
            raise ContractViolationError(
                f"Expected {expected} from {response.request.method} "
                f"{response.request.url.path}, got {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ContractViolationError(
                f"Invalid JSON in response to {response.request.method} "
                f"{response.request.url.path}: {exc}",
                status_code=response.status_code,
            ) from exc

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        expected: int | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send one request; raise on non-2xx or on a mismatched ``expected`` status."""
        with self._transport_errors():
            response = self._client.request(method, endpoint, **kwargs)
        self._handle_response(response)
        if expected is not None:
            self._expect(response, expected)
        return response

    def create(self, endpoint: str, body: Any = None) -> Any:
        return self._json(self.request("POST", endpoint, expected=201, json=body))

    def get(self, endpoint: str, params: dict[str, str] | None = None) -> Any:
        return self._json(self.request("GET", endpoint, expected=200, params=params))

    def update(self, endpoint: str, body: Any) -> Any:
        return self._json(self.request("PUT", endpoint, expected=200, json=body))

    def delete(self, endpoint: str) -> None:
        self.request("DELETE", endpoint, expected=204)

    def stream_upload(self, endpoint: str, parts: Sequence[MultipartPart]) -> Any:
        """POST a ``multipart/form-data`` body built from ``parts``.

        Part content may be ``bytes`` or a binary file object; file objects
        are streamed rather than read into memory.
        """
        response = self.request("POST", endpoint, files=list(parts))
        return self._json(response)

    @contextmanager
    def stream_download(self, endpoint: str) -> Iterator[Iterator[bytes]]:
        """Open a streaming GET and yield an iterator over body chunks.

        The status is checked before the iterator is handed out, so an error
        response never produces a chunk. Exceptions raised by the caller while
        consuming the iterator pass through untouched unless they come from
        ``httpx``.
        """
        with self._transport_errors():
            with self._client.stream("GET", endpoint) as response:
                if not response.is_success:
                    response.read()
                self._handle_response(response)
                self._expect(response, 200)
                yield response.iter_bytes(chunk_size=DOWNLOAD_CHUNK_SIZE)
