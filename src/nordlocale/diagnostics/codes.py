"""Diagnostic codes and data structures.

Defines the codes and the immutable record emitted whenever the engine
absorbs a miss instead of raising.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from nordlocale.enums import Severity

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticSink",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration misses (unregistered locales)
        2000-2999: Content misses (missing or fallback-resolved messages)
        3000-3999: Catalog loading failures
        4000-4999: Formatting failures
    """

    # Configuration misses (1000-1999)
    LOCALE_NOT_REGISTERED = 1001

    # Content misses (2000-2999)
    MESSAGE_NOT_FOUND = 2001
    MESSAGE_FALLBACK = 2002

    # Catalog loading (3000-3999)
    CATALOG_LOAD_FAILED = 3001

    # Formatting (4000-4999)
    FORMATTING_FAILED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        severity: WARNING for misses, INFO for successful fallbacks
        locale: Locale code the diagnostic concerns (None if not applicable)
        key: Message key the diagnostic concerns (None if not applicable)
    """

    code: DiagnosticCode
    message: str
    severity: Severity = Severity.WARNING
    locale: str | None = None
    key: str | None = None

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message


type DiagnosticSink = Callable[[Diagnostic], None]
"""Callback receiving every diagnostic emitted by an I18nManager."""
