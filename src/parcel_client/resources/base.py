"""Resource model objects and the shared list/page plumbing."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

from parcel_client.client.http import HttpClient
from parcel_client.models.common import PODModel, ResultsPage, parse_wire
from parcel_client.models.filters import ListFilter, filter_to_query

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=PODModel)
R = TypeVar("R", bound="Resource[Any]")


@dataclass
class Page(Generic[R]):
    """One listing: resource objects in server order plus the continuation cursor.

    ``next_page_token`` is ``None`` once the listing is exhausted. It is opaque
    and only ever passed back as the ``next_page_token`` filter field.
    """

    results: list[R] = field(default_factory=list)
    next_page_token: str | None = None

    @property
    def has_more(self) -> bool:
        return self.next_page_token is not None

    def __iter__(self):
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)


class Resource(Generic[P]):
    """Client-side projection of the latest snapshot of one resource.

    Field reads are delegated to the immutable POD snapshot. A successful
    ``update()`` swaps in the snapshot from the server's response in a single
    assignment, so callers holding this object see the new state.
    """

    pod_type: ClassVar[type[PODModel]]

    def __init__(self, client: HttpClient, pod: P | dict[str, Any]) -> None:
        self._client = client
        if not isinstance(pod, self.pod_type):
            pod = parse_wire(self.pod_type, pod)
        self._pod: P = pod  # type: ignore[assignment]

    @property
    def pod(self) -> P:
        return self._pod

    @property
    def created_at(self) -> datetime:
        return self._pod.created_at

    def to_pod(self) -> dict[str, Any]:
        return self._pod.to_wire()

    def _replace_snapshot(self, other: Resource[P]) -> None:
        self._pod = other._pod

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found on the object itself.
        # Only wire fields are forwarded, never the pydantic model API.
        pod = self.__dict__.get("_pod")
        if pod is None or name.startswith("_"):
            raise AttributeError(name)
        if name in type(pod).model_fields or name in (pod.model_extra or {}):
            return getattr(pod, name)
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._pod.id!r})"


def list_page(
    client: HttpClient,
    endpoint: str,
    factory: Callable[[HttpClient, dict[str, Any]], R],
    filter: ListFilter | None = None,
) -> Page[R]:
    """GET a collection endpoint and wrap each result with ``factory``."""
    params = filter_to_query(filter)
    page = parse_wire(ResultsPage, client.get(endpoint, params=params or None))
    logger.debug(
        "Listed %d item(s) from %s (more=%s)",
        len(page.results), endpoint, page.next_page_token is not None,
    )
    return Page(
        results=[factory(client, pod) for pod in page.results],
        next_page_token=page.next_page_token,
    )
