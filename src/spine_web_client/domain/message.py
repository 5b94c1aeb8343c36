"""Typed messages — payloads tagged with the URL of their schema type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..primitives.exceptions import ConstructionError
from .type_url import TypeUrl, check_type_url

M = TypeVar("M", bound="Message")


class Message(BaseModel):
    """Base class for every record exchanged with the backend.

    Subclasses declare their schema type through ``TYPE_URL``. Field names
    are snake_case in Python and lowerCamelCase on the wire.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    TYPE_URL: ClassVar[str | None] = None

    @classmethod
    def type_url(cls) -> TypeUrl:
        """Return the declared schema type of this message class."""
        if not cls.TYPE_URL:
            raise ConstructionError(f"{cls.__name__} does not declare a TYPE_URL")
        return TypeUrl(cls.TYPE_URL)

    def to_wire(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PackedAny(Message):
    """A message packed together with its type URL.

    Used wherever a record embeds a payload of arbitrary type, e.g. the
    command message or the id of a queried entity.
    """

    TYPE_URL: ClassVar[str | None] = "type.googleapis.com/google.protobuf.Any"

    type_url_value: str = Field(alias="typeUrl")
    value: dict[str, Any] = Field(default_factory=dict)

    def unpack(self, cls: type[M]) -> M:
        """Restore the packed payload as an instance of *cls*."""
        if cls.type_url().value != self.type_url_value:
            raise ConstructionError(
                f"Cannot unpack {self.type_url_value!r} as {cls.__name__}"
            )
        return cls.model_validate(self.value)


T = TypeVar("T", bound=Message)


@dataclass(frozen=True)
class TypedMessage(Generic[T]):
    """A message paired with the type URL it is declared to have.

    Construction fails with :class:`ConstructionError` when the tag does not
    match ``type(message).TYPE_URL``.
    """

    message: T
    type_url: TypeUrl

    def __post_init__(self) -> None:
        if not isinstance(self.message, Message):
            raise ConstructionError(
                f"Expected a Message, got {type(self.message).__name__}"
            )
        tag = self.type_url
        if not isinstance(tag, TypeUrl):
            tag = TypeUrl(check_type_url(tag))
            object.__setattr__(self, "type_url", tag)
        declared = type(self.message).type_url()
        if declared != tag:
            raise ConstructionError(
                f"Type URL {tag.value!r} does not match the declared type "
                f"{declared.value!r} of {type(self.message).__name__}"
            )

    @classmethod
    def of(cls, message: T) -> TypedMessage[T]:
        """Tag *message* with its own declared type URL."""
        if not isinstance(message, Message):
            raise ConstructionError(
                f"Expected a Message, got {type(message).__name__}"
            )
        return cls(message, type(message).type_url())

    def to_any(self) -> PackedAny:
        """Pack the message for embedding into another record."""
        return PackedAny(
            type_url_value=self.type_url.value, value=self.message.to_wire()
        )

    def to_wire(self) -> dict[str, Any]:
        """Wire form of the envelope sent to the backend."""
        return self.to_any().to_wire()
