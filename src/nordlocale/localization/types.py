"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating I18nManager call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

__all__ = [
    "DateInput",
    "LocaleCode",
    "MessageKey",
    "MessageParams",
    "NumberInput",
]

type LocaleCode = str
"""BCP-47 locale code (e.g., 'nb-NO', 'nn-NO', 'en')."""

type MessageKey = str
"""Dotted message key (e.g., 'booking.create.title')."""

type MessageParams = Mapping[str, Any]
"""Interpolation parameters keyed by {{name}} token."""

type NumberInput = int | float | Decimal
"""Numeric value accepted by the number and currency formatters."""

type DateInput = date | datetime | str
"""Date value accepted by format_date (strings must be ISO 8601)."""
