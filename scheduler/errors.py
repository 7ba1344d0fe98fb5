"""Validation errors raised while parsing cron fields and expressions."""

from __future__ import annotations

from scheduler.fields import FieldKind


class InvalidFieldSyntax(ValueError):
    """A single cron field could not be parsed.

    ``text`` is the whole field as given, ``token`` the clause or value
    that failed.
    """

    def __init__(self, kind: FieldKind, text: str, reason: str, token: str | None = None) -> None:
        self.kind = kind
        self.text = text
        self.token = text if token is None else token
        self.reason = reason
        if self.token != text:
            message = f"Invalid {kind.label} field {text!r}: {reason} ({self.token!r})"
        else:
            message = f"Invalid {kind.label} field {text!r}: {reason}"
        super().__init__(message)


class InvalidCronExpression(ValueError):
    """A cron expression has the wrong shape (field count, unknown macro)."""

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid cron expression {expression!r}: {reason}")
