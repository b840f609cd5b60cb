"""Shared wire models: base classes, identifiers and the results page."""

from __future__ import annotations

from datetime import datetime
from typing import Any, NewType, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from parcel_client.client.errors import ContractViolationError

# One identifier type per resource kind. NewType keeps them plain strings at
# runtime while type checkers refuse to mix them up.
IdentityId = NewType("IdentityId", str)
AppId = NewType("AppId", str)
ClientId = NewType("ClientId", str)
ConsentId = NewType("ConsentId", str)
GrantId = NewType("GrantId", str)
DatasetId = NewType("DatasetId", str)
JobId = NewType("JobId", str)

M = TypeVar("M", bound="WireModel")


class WireModel(BaseModel):
    """A JSON object exchanged with the gateway.

    Attributes are snake_case; the wire names are their camelCase aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Render as the gateway's JSON shape, leaving unset fields out."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class PODModel(WireModel):
    """Plain-old-data snapshot of a resource, exactly as the gateway returned it."""

    id: str
    created_at: datetime


class WritableParams(WireModel):
    """Request body for a create/update call.

    Unknown fields are rejected, so identifiers, audit fields and
    system-controlled fields cannot be sent by accident.
    """

    model_config = ConfigDict(frozen=False, extra="forbid")

    @classmethod
    def coerce(cls: type[M], params: Any) -> M:
        if isinstance(params, cls):
            return params
        return cls.model_validate(params)


class ResultsPage(WireModel):
    """Wire envelope of a listing: ``{"results": [...], "nextPageToken": ...}``."""

    results: list[dict[str, Any]] = Field(default_factory=list)
    next_page_token: str | None = None


def parse_wire(model: type[M], data: Any) -> M:
    """Validate a response body, reporting a malformed one as a contract violation."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ContractViolationError(
            f"Response does not match the {model.__name__} schema: {exc}"
        ) from exc
