"""Pydantic data models shared across all components."""

from core.models.schedules import ScheduleDefinition

__all__ = [
    "ScheduleDefinition",
]
