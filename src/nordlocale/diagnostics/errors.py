"""Exception hierarchy for nordlocale.

Misses (unregistered locale, missing message, malformed identifier) never
raise. These exceptions are reserved for programming errors detected while
constructing an engine or loading a catalog, plus FormattingError, which
LocaleContext raises and I18nManager always absorbs.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "FormattingError",
    "NordLocaleError",
]


class NordLocaleError(Exception):
    """Base exception for all nordlocale errors."""


class ConfigurationError(NordLocaleError, ValueError):
    """Invalid locale config or engine options."""


class CatalogError(NordLocaleError, TypeError):
    """Message catalog is not a string-keyed mapping."""


class FormattingError(NordLocaleError):
    """Raised by LocaleContext when Babel cannot format a value.

    Carries a fallback_value that the engine returns instead, after
    reporting a FORMATTING_FAILED diagnostic. Never escapes I18nManager.

    Attributes:
        fallback_value: String to return when formatting fails
    """

    def __init__(self, message: str, fallback_value: str) -> None:
        super().__init__(message)
        self.fallback_value = fallback_value
