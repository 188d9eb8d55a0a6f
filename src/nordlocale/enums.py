"""Enumerations for nordlocale type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TextDirection(StrEnum):
    """Writing direction of a locale.

    StrEnum provides automatic string conversion: str(TextDirection.LTR) == "ltr"
    """

    LTR = "ltr"
    """Left-to-right scripts (Latin, Cyrillic, ...)"""

    RTL = "rtl"
    """Right-to-left scripts (Arabic, Hebrew, ...)"""


class NumberStyle(StrEnum):
    """Number formatting style for a locale's default number format."""

    DECIMAL = "decimal"
    PERCENT = "percent"


class PluralCategory(StrEnum):
    """Plural form suffix appended to a message key.

    StrEnum provides automatic string conversion: f"items.{PluralCategory.ONE}" == "items.one"
    """

    ONE = "one"
    """Exactly one item"""

    OTHER = "other"
    """Zero, negative, fractional, and two or more items"""


class LoadStatus(StrEnum):
    """Outcome of a catalog load through a MessageLoader."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


class Severity(StrEnum):
    """Severity of a Diagnostic.

    WARNING diagnostics are logged at WARNING level, INFO at DEBUG level.
    """

    WARNING = "warning"
    INFO = "info"


__all__ = [
    "LoadStatus",
    "NumberStyle",
    "PluralCategory",
    "Severity",
    "TextDirection",
]
