"""Cron expressions -- six parsed fields and a datetime membership check.

Accepted shapes:

    "0 */5 * * * *"      second minute hour day-of-month month day-of-week
    "*/5 * * * *"        classic 5-field crontab, seconds fixed at 0
    "@daily"             macro, see MACROS

Matching checks that a datetime falls on an allowed value in every field.
Computing the next fire time is left to the schedule calculator that
consumes CronField.next_set_bit().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from scheduler.cron import CronField, parse_field
from scheduler.errors import InvalidCronExpression
from scheduler.fields import FieldKind

FIELD_ORDER = (
    FieldKind.SECOND,
    FieldKind.MINUTE,
    FieldKind.HOUR,
    FieldKind.DAY_OF_MONTH,
    FieldKind.MONTH,
    FieldKind.DAY_OF_WEEK,
)

MACROS = MappingProxyType({
    "@yearly": "0 0 0 1 1 *",
    "@annually": "0 0 0 1 1 *",
    "@monthly": "0 0 0 1 * *",
    "@weekly": "0 0 0 * * 0",
    "@daily": "0 0 0 * * *",
    "@midnight": "0 0 0 * * *",
    "@hourly": "0 0 * * * *",
})


@dataclass(frozen=True)
class CronExpression:
    """A fully parsed cron expression.

    Usage:
        expr = CronExpression.parse("0 16 * * 1-5")   # weekdays at 4pm
        expr.matches(datetime(2026, 10, 19, 16, 0))   # True (a Monday)
    """

    second: CronField
    minute: CronField
    hour: CronField
    day_of_month: CronField
    month: CronField
    day_of_week: CronField
    source: str = field(default="", compare=False)

    @classmethod
    def parse(cls, expression: str) -> CronExpression:
        """Parse a 6-field, 5-field or macro expression.

        Raises:
            InvalidCronExpression: wrong field count or unknown macro.
            InvalidFieldSyntax: a field failed to parse.
        """
        text = str(expression or "").strip()
        if text.startswith("@"):
            macro = MACROS.get(text.lower())
            if macro is None:
                raise InvalidCronExpression(expression, f"unknown macro {text!r}")
            parts = macro.split()
        else:
            parts = text.split()
            if len(parts) == 5:
                parts = ["0", *parts]
            elif len(parts) != 6:
                raise InvalidCronExpression(
                    expression, f"need 5 or 6 fields, got {len(parts)}",
                )

        fields = [parse_field(kind, part) for kind, part in zip(FIELD_ORDER, parts)]
        return cls(*fields, source=text)

    @property
    def fields(self) -> tuple[CronField, ...]:
        return (
            self.second,
            self.minute,
            self.hour,
            self.day_of_month,
            self.month,
            self.day_of_week,
        )

    def matches(self, dt: datetime) -> bool:
        """Check if a datetime falls on this expression.

        Day-of-week uses Monday=1 .. Sunday=7, the same layout the parser
        produces after folding 0 onto 7.
        """
        return (
            self.second.test(dt.second)
            and self.minute.test(dt.minute)
            and self.hour.test(dt.hour)
            and self.day_of_month.test(dt.day)
            and self.month.test(dt.month)
            and self.day_of_week.test(dt.isoweekday())
        )

    def __str__(self) -> str:
        return self.source


def cron_matches(expression: str, dt: datetime) -> bool:
    """Parse ``expression`` and check it against ``dt``."""
    return CronExpression.parse(expression).matches(dt)
