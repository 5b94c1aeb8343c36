"""TypeUrl — the identifier of a message schema type."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..primitives.exceptions import ConstructionError

_SEPARATOR = "/"


def check_type_url(value: Any) -> str:
    """Return *value* if it is a well-formed type URL, raise otherwise."""
    if not isinstance(value, str) or not value.strip():
        raise ConstructionError("Type URL must be a non-empty string")
    prefix, sep, type_name = value.rpartition(_SEPARATOR)
    if not sep or not prefix or not type_name:
        raise ConstructionError(
            f"Type URL {value!r} must have the form '<prefix>/<type.Name>'"
        )
    return value


class TypeUrl(BaseModel):
    """A type URL such as ``type.spine.io/spine.client.Query``.

    Immutable and compared by value. Accepts the raw string positionally:
    ``TypeUrl("type.spine.io/x.Y")``.
    """

    model_config = ConfigDict(frozen=True)

    value: str

    def __init__(self, value: str | None = None, /, **data: Any) -> None:
        if value is not None:
            data["value"] = check_type_url(value)
        elif "value" in data:
            data["value"] = check_type_url(data["value"])
        else:
            raise ConstructionError("Type URL is required")
        super().__init__(**data)

    @field_validator("value")
    @classmethod
    def _validate(cls, v: str) -> str:
        return check_type_url(v)

    @classmethod
    def parse(cls, value: TypeUrl | str | None) -> TypeUrl:
        """Coerce a string (or an existing ``TypeUrl``) to a ``TypeUrl``."""
        if isinstance(value, TypeUrl):
            return value
        return cls(value)

    @property
    def prefix(self) -> str:
        return self.value.rpartition(_SEPARATOR)[0]

    @property
    def type_name(self) -> str:
        return self.value.rpartition(_SEPARATOR)[2]

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeUrl):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
