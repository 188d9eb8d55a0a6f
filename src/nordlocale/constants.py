"""Shared constants for nordlocale.

Centralizes defaults used across the registry, runtime, and localization
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "FALLBACK_LOCALE",
    "BABEL_FALLBACK_LOCALE",
    # Formatting defaults
    "DEFAULT_CURRENCY",
    "DEFAULT_MIN_FRACTION_DIGITS",
    "DEFAULT_MAX_FRACTION_DIGITS",
    "UNCONFIGURED_MAX_FRACTION_DIGITS",
    # Message keys
    "KEY_SEPARATOR",
    "COUNT_PARAM",
    # National identifiers
    "PERSON_NUMBER_LENGTH",
    "ORGANIZATION_NUMBER_LENGTH",
    # Environment
    "ENV_PREFIX",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LOCALE = "nb-NO"
FALLBACK_LOCALE = "en"

# CLDR data used when a locale code is unknown to Babel.
BABEL_FALLBACK_LOCALE = "en_US"

# ============================================================================
# FORMATTING DEFAULTS
# ============================================================================

DEFAULT_CURRENCY = "NOK"
DEFAULT_MIN_FRACTION_DIGITS = 0
DEFAULT_MAX_FRACTION_DIGITS = 2

# Fraction digits applied when the target locale has no registered config.
UNCONFIGURED_MAX_FRACTION_DIGITS = 3

# ============================================================================
# MESSAGE KEYS
# ============================================================================

KEY_SEPARATOR = "."
COUNT_PARAM = "count"

# ============================================================================
# NATIONAL IDENTIFIERS
# ============================================================================

# fødselsnummer: 6 digit birth date + 5 digit individual number
PERSON_NUMBER_LENGTH = 11

# organisasjonsnummer from Enhetsregisteret
ORGANIZATION_NUMBER_LENGTH = 9

# ============================================================================
# ENVIRONMENT
# ============================================================================

ENV_PREFIX = "NORDLOCALE_"
