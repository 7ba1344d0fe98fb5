"""Cron field parser -- turns one field of a cron expression into a bit-vector.

Supported clause shapes, joined with commas:

    *  ?        every value of the field
    N           a single value (or a name: JAN, MON, ...)
    N-M         an inclusive range, N <= M
    N/S         N, N+S, ... up to the field maximum
    */S         min, min+S, ... up to the field maximum
    N-M/S       N, N+S, ... up to M

Examples:
    parse_seconds("0-4,8-12")   -> bits 0..4 and 8..12
    parse_hours("0-23/2")       -> even hours
    parse_days_of_week("0")     -> bit 7 (Sunday)
    parse_month("JAN-MAR")      -> bits 1..3
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from scheduler.bits import BitVector
from scheduler.errors import InvalidFieldSyntax
from scheduler.fields import FieldKind
from scheduler.names import accepts_names, resolve_name

_NUMBER_RE = re.compile(r"[0-9]+")
_WILDCARDS = ("*", "?")
_MAX_DIGITS = 9


@dataclass(frozen=True)
class CronField:
    """A parsed cron field: its kind plus the set of values it allows."""

    kind: FieldKind
    bits: BitVector
    source: str = field(default="", compare=False)

    def test(self, value: int) -> bool:
        """True if the field allows ``value``."""
        return self.bits.test(value)

    def next_set_bit(self, index: int) -> int | None:
        """Next allowed value ``>= index``, or None when none remain."""
        return self.bits.next_set_bit(index)

    def values(self) -> list[int]:
        return self.bits.to_list()

    def __str__(self) -> str:
        return self.source


def parse_field(kind: FieldKind, text: str) -> CronField:
    """Parse one cron field of the given kind.

    Raises:
        InvalidFieldSyntax: on the first clause that fails. No partial
            result is returned.
    """
    if not text:
        raise InvalidFieldSyntax(kind, text or "", "empty field")

    values: set[int] = set()
    for clause in text.split(","):
        values.update(_parse_clause(kind, text, clause))

    if kind.zero_alias and 0 in values:
        values.discard(0)
        values.add(kind.max)

    return CronField(kind=kind, bits=BitVector.from_values(kind.size, values), source=text)


def parse_seconds(text: str) -> CronField:
    return parse_field(FieldKind.SECOND, text)


def parse_minutes(text: str) -> CronField:
    return parse_field(FieldKind.MINUTE, text)


def parse_hours(text: str) -> CronField:
    return parse_field(FieldKind.HOUR, text)


def parse_days_of_month(text: str) -> CronField:
    return parse_field(FieldKind.DAY_OF_MONTH, text)


def parse_month(text: str) -> CronField:
    return parse_field(FieldKind.MONTH, text)


def parse_days_of_week(text: str) -> CronField:
    return parse_field(FieldKind.DAY_OF_WEEK, text)


def test(cron_field: CronField, value: int) -> bool:
    """Membership check for schedule calculators."""
    return cron_field.test(value)


def next_set_bit_from(cron_field: CronField, index: int) -> int | None:
    """Forward scan for schedule calculators. Wrapping is the caller's job."""
    return cron_field.next_set_bit(index)


def _parse_clause(kind: FieldKind, text: str, clause: str) -> Iterable[int]:
    """Resolve one comma-separated clause into raw values."""
    if not clause:
        raise InvalidFieldSyntax(kind, text, "empty clause", clause)

    # Wildcard
    if clause in _WILDCARDS:
        # Seconds and minutes also get the sentinel bit past max
        end = kind.max + 1 if kind.sentinel else kind.max
        return range(kind.min, end + 1)

    # Step: */S, N/S, N-M/S
    if "/" in clause:
        base, _, step_text = clause.partition("/")
        step = _parse_step(kind, text, step_text)
        if base in _WILDCARDS:
            start, end = kind.min, kind.max
        elif "-" in base:
            start, end = _parse_range(kind, text, base)
        else:
            start, end = _parse_value(kind, text, base), kind.max
        return range(start, end + 1, step)

    # Range: N-M
    if "-" in clause:
        start, end = _parse_range(kind, text, clause)
        return range(start, end + 1)

    # Exact value
    return (_parse_value(kind, text, clause),)


def _parse_range(kind: FieldKind, text: str, token: str) -> tuple[int, int]:
    start_text, _, end_text = token.partition("-")
    start = _parse_value(kind, text, start_text)
    end = _parse_value(kind, text, end_text)
    if start > end:
        raise InvalidFieldSyntax(kind, text, f"range start {start} is after end {end}", token)
    return start, end


def _parse_step(kind: FieldKind, text: str, token: str) -> int:
    if not _NUMBER_RE.fullmatch(token):
        raise InvalidFieldSyntax(kind, text, "step is not a number", token)
    step = _to_int(kind, text, token)
    if step <= 0:
        raise InvalidFieldSyntax(kind, text, "step must be positive", token)
    return step


def _parse_value(kind: FieldKind, text: str, token: str) -> int:
    """Resolve a number or name and check it against the field bounds."""
    if _NUMBER_RE.fullmatch(token):
        value = _to_int(kind, text, token)
    else:
        value = resolve_name(kind, token)
        if value is None:
            reason = "unknown name" if accepts_names(kind) and token.isalpha() else "not a number"
            raise InvalidFieldSyntax(kind, text, reason, token)

    if not kind.min <= value <= kind.max:
        raise InvalidFieldSyntax(
            kind, text, f"value {value} outside [{kind.min}, {kind.max}]", token,
        )
    return value


def _to_int(kind: FieldKind, text: str, token: str) -> int:
    """Convert a digit-only token, rejecting lengths int() may refuse."""
    digits = token.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise InvalidFieldSyntax(kind, text, "number too large", token)
    return int(digits)
