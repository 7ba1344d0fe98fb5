"""Schedule model -- named cron schedules declared in config.yaml."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from scheduler.expression import CronExpression


class ScheduleDefinition(BaseModel):
    """A named cron schedule.

    The expression is compiled during validation, so a config file with a
    malformed schedule fails to load with the parser's message.
    """

    name: str
    cron_expression: str
    enabled: bool = True
    description: str = ""

    @field_validator("cron_expression")
    @classmethod
    def validate_expression(cls, value: str) -> str:
        CronExpression.parse(value)
        return value.strip()

    def compile(self) -> CronExpression:
        return CronExpression.parse(self.cron_expression)
