"""Three-letter month and weekday names accepted in place of numbers."""

from __future__ import annotations

from types import MappingProxyType

from scheduler.fields import FieldKind

MONTH_NAMES = MappingProxyType({
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
})

# SUN is 0 here; the day-of-week zero alias moves it to bit 7 later.
DAY_NAMES = MappingProxyType({
    "SUN": 0,
    "MON": 1,
    "TUE": 2,
    "WED": 3,
    "THU": 4,
    "FRI": 5,
    "SAT": 6,
})

_TABLES = MappingProxyType({
    FieldKind.MONTH: MONTH_NAMES,
    FieldKind.DAY_OF_WEEK: DAY_NAMES,
})


def resolve_name(kind: FieldKind, token: str) -> int | None:
    """Resolve a name like 'jan' or 'MON' for the given kind, or None."""
    table = _TABLES.get(kind)
    if table is None or not token.isascii():
        return None
    return table.get(token.upper())


def accepts_names(kind: FieldKind) -> bool:
    return kind in _TABLES
