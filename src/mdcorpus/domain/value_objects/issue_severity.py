"""Severity of a corpus check issue."""

from enum import StrEnum


class IssueSeverity(StrEnum):
    """Errors fail the check, warnings are reported only."""

    ERROR = "error"
    WARNING = "warning"
