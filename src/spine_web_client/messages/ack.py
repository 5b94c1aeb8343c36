"""Acknowledgement of a command and its three possible outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from pydantic import Field

from ..domain.message import Message
from ..primitives.exceptions import ProtocolViolationError

OUTCOME_FIELDS = ("ok", "error", "rejection")


@dataclass(frozen=True)
class Ok:
    """The command was accepted."""


@dataclass(frozen=True)
class Error:
    """The backend failed to process the command."""

    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Rejection:
    """The command was refused by a business rule."""

    details: dict[str, Any] = field(default_factory=dict)


Outcome = Ok | Error | Rejection


class Status(Message):
    """Wire status of an acknowledgement.

    Presence is tracked per field, so ``{"ok": null}`` still counts as an
    ``ok`` outcome.
    """

    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.core.Status"

    ok: dict[str, Any] | None = None
    error: dict[str, Any] | None = None
    rejection: dict[str, Any] | None = None

    def present_outcomes(self) -> list[str]:
        """Names of the outcome fields set on the wire, in declaration order."""
        return [name for name in OUTCOME_FIELDS if name in self.model_fields_set]

    def outcome(self) -> Outcome:
        """Return the single outcome, failing closed on anything else."""
        present = self.present_outcomes()
        if len(present) != 1:
            raise ProtocolViolationError(present)
        name = present[0]
        if name == "ok":
            return Ok()
        details = dict(getattr(self, name) or {})
        if name == "error":
            return Error(details)
        return Rejection(details)


class Ack(Message):
    """Reply of the backend to a single command."""

    TYPE_URL: ClassVar[str | None] = "type.spine.io/spine.core.Ack"

    message_id: dict[str, Any] | None = None
    status: Status = Field(default_factory=Status)

    def outcome(self) -> Outcome:
        return self.status.outcome()
