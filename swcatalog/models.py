"""Typed views over catalog records returned by the API.

The client hands back plain JSON values; these dataclasses are only built at
the display boundary. Keys are camelCase on the wire, required fields must be
present with the right type, optional ones may be missing or null, and any
other keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import DecodeError

_MISSING = object()


def _field(record: dict[str, Any], key: str, kind: type, kind_name: str, optional: bool = False):
    value = record.get(key, _MISSING)
    if value is _MISSING or value is None:
        if optional:
            return None
        raise DecodeError(f"missing field `{key}`")
    if not isinstance(value, kind):
        raise DecodeError(f"field `{key}`: expected {kind_name}, got {type(value).__name__}")
    return value


def _require_object(value: Any, record_type: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{record_type}: expected a JSON object, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Publisher:
    id: str
    description: str
    active: bool
    alternative_id: str | None = None
    email: str | None = None

    @classmethod
    def from_json(cls, value: Any) -> Publisher:
        record = _require_object(value, "Publisher")
        try:
            return cls(
                id=_field(record, "id", str, "a string"),
                description=_field(record, "description", str, "a string"),
                active=_field(record, "active", bool, "a boolean"),
                alternative_id=_field(record, "alternativeId", str, "a string", optional=True),
                email=_field(record, "email", str, "a string", optional=True),
            )
        except DecodeError as e:
            raise DecodeError(f"Publisher: {e}") from e


@dataclass(frozen=True)
class Software:
    id: str
    url: str
    publiccode_yml: str
    active: bool

    @classmethod
    def from_json(cls, value: Any) -> Software:
        record = _require_object(value, "Software")
        try:
            return cls(
                id=_field(record, "id", str, "a string"),
                url=_field(record, "url", str, "a string"),
                publiccode_yml=_field(record, "publiccodeYml", str, "a string"),
                active=_field(record, "active", bool, "a boolean"),
            )
        except DecodeError as e:
            raise DecodeError(f"Software: {e}") from e
