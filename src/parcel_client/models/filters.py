"""List filters and their query-string encoding.

Filter attributes map one-to-one onto query parameters whose names are the
attribute names in lowercase-hyphenated form (``next_page_token`` becomes
``next-page-token``). Scalars are sent as strings; string-list matchers use
the gateway's ``<op>:<item>,<item>`` encoding, e.g. ``all:tag1,tag2``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

F = TypeVar("F", bound="ListFilter")

MatcherOp = Literal["all", "any"]


class StringListMatcher(BaseModel):
    """Match an array field against a list of strings.

    ``all`` requires every listed string to be present, ``any`` at least one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    all: list[str] | None = None
    any: list[str] | None = None

    @model_validator(mode="before")
    @classmethod
    def _parse_encoded(cls, data: Any) -> Any:
        if isinstance(data, str):
            op, sep, items = data.partition(":")
            if not sep or op not in ("all", "any"):
                raise ValueError(f"Expected 'all:...' or 'any:...', got {data!r}")
            return {op: items.split(",") if items else []}
        return data

    @model_validator(mode="after")
    def _exactly_one(self) -> StringListMatcher:
        if (self.all is None) == (self.any is None):
            raise ValueError("Exactly one of 'all' or 'any' must be given")
        return self

    @property
    def op(self) -> MatcherOp:
        return "all" if self.all is not None else "any"

    def encode(self) -> str:
        values = self.all if self.all is not None else self.any
        return f"{self.op}:{','.join(values or [])}"


class ListFilter(BaseModel):
    """Base for listing filters; carries the pagination controls."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    page_size: int | None = Field(default=None, gt=0)
    next_page_token: str | None = None

    @classmethod
    def coerce(cls: type[F], value: Any) -> F:
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, ListFilter):
            value = value.model_dump(exclude_unset=True)
        return cls.model_validate(_snake_keys(value))

    def with_page_token(self: F, token: str | None) -> F:
        return self.model_copy(update={"next_page_token": token})


def _snake_keys(data: Any) -> Any:
    """Accept ``pageSize`` / ``page-size`` style keys as well as ``page_size``."""
    if not isinstance(data, dict):
        return data
    out: dict[str, Any] = {}
    for key, value in data.items():
        key = key.replace("-", "_")
        key = "".join(f"_{c.lower()}" if c.isupper() else c for c in key)
        out[key] = value
    return out


def param_name(field_name: str) -> str:
    return field_name.replace("_", "-")


def encode_value(value: Any) -> str:
    if isinstance(value, StringListMatcher):
        return value.encode()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def filter_to_query(filter: ListFilter | None) -> dict[str, str]:
    """Render a filter as query parameters, skipping unset fields."""
    if filter is None:
        return {}
    query: dict[str, str] = {}
    for name in type(filter).model_fields:
        value = getattr(filter, name)
        if value is None:
            continue
        query[param_name(name)] = encode_value(value)
    return query


def query_to_filter(query: dict[str, str], filter_type: type[F]) -> F:
    """Parse query parameters produced by :func:`filter_to_query` back into a filter."""
    return filter_type.model_validate({k.replace("-", "_"): v for k, v in query.items()})
