"""
Record base — validation and dict/JSON mapping shared by every payload.

Decoding is lenient: from_dict() never raises, it keeps the default for any
field that is missing or has the wrong type. Encoding is strict: callers
validate() a record before it goes on the wire.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, TypeVar

from sauron.core.errors import ValidationError

R = TypeVar("R", bound="Record")


class Record:
    """Mixin for the dataclass payloads exchanged with the gateway."""

    def validate(self) -> None:
        """Raise ValidationError if a required field is missing."""

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    @classmethod
    def from_dict(cls: type[R], data: Any) -> R:
        raise NotImplementedError

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @staticmethod
    def _require(value: str, field_name: str) -> None:
        if not value:
            raise ValidationError(field_name)

    @staticmethod
    def _require_one_of(value: Any, allowed: Iterable[Any], field_name: str) -> None:
        if value not in allowed:
            raise ValidationError(field_name, f"{field_name} has an invalid value")


def get_str(data: dict, key: str, default: str) -> str:
    """String field from a decoded object, or ``default`` if absent/not a string."""
    value = data.get(key)
    return value if isinstance(value, str) else default


def get_obj(data: dict, key: str) -> dict:
    value = data.get(key)
    return value if isinstance(value, dict) else {}
