"""Field kinds -- the six positions of a cron expression and their bounds.

Each kind carries its bounds as data so the parser dispatches on the
member instead of on a class hierarchy:

    SECOND        0-59   (wildcard also sets sentinel bit 60)
    MINUTE        0-59   (wildcard also sets sentinel bit 60)
    HOUR          0-23
    DAY_OF_MONTH  1-31
    MONTH         1-12
    DAY_OF_WEEK   0-7    (0 is an alias for 7, Sunday)
"""

from __future__ import annotations

from enum import Enum

_ALIASES = {
    "sec": "SECOND",
    "seconds": "SECOND",
    "min": "MINUTE",
    "minutes": "MINUTE",
    "hours": "HOUR",
    "dom": "DAY_OF_MONTH",
    "day": "DAY_OF_MONTH",
    "months": "MONTH",
    "dow": "DAY_OF_WEEK",
    "weekday": "DAY_OF_WEEK",
}


class FieldKind(Enum):
    """A cron field position with its inclusive numeric bounds."""

    SECOND = ("second", 0, 59, False, True)
    MINUTE = ("minute", 0, 59, False, True)
    HOUR = ("hour", 0, 23, False, False)
    DAY_OF_MONTH = ("day-of-month", 1, 31, False, False)
    MONTH = ("month", 1, 12, False, False)
    DAY_OF_WEEK = ("day-of-week", 0, 7, True, False)

    def __init__(self, label: str, min_val: int, max_val: int, zero_alias: bool, sentinel: bool) -> None:
        self.label = label
        self.min = min_val
        self.max = max_val
        self.zero_alias = zero_alias
        self.sentinel = sentinel

    @property
    def size(self) -> int:
        """Length of the bit-vector backing a field of this kind."""
        return self.max + 2 if self.sentinel else self.max + 1

    @classmethod
    def parse_kind(cls, name: str) -> FieldKind:
        """Look up a kind by label, member name or short alias."""
        key = str(name or "").strip().lower().replace("-", "_")
        for kind in cls:
            if key in (kind.name.lower(), kind.label.replace("-", "_")):
                return kind
        if key in _ALIASES:
            return cls[_ALIASES[key]]
        raise ValueError(
            f"Unknown field kind: {name!r}. Expected one of "
            f"{', '.join(k.name.lower() for k in cls)}."
        )

    def __str__(self) -> str:
        return self.label


def bounds_of(kind: FieldKind) -> tuple[int, int, bool]:
    """Return ``(min, max, zero_alias)`` for a field kind."""
    return kind.min, kind.max, kind.zero_alias
