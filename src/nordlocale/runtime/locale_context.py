"""Locale context for Babel-backed formatting.

This module provides locale-aware date, number, and currency formatting
without global state mutation. Uses Babel for CLDR-compliant output.

Architecture:
    - LocaleContext: Immutable pairing of a locale code and its Babel Locale
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module for formatting (avoids global state)
    - Failures raise FormattingError carrying a fallback value; I18nManager
      reports it as a diagnostic and returns the fallback

Python 3.13+. Uses Babel for i18n.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Literal

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from nordlocale.constants import BABEL_FALLBACK_LOCALE, DEFAULT_CURRENCY
from nordlocale.diagnostics.errors import FormattingError
from nordlocale.enums import NumberStyle
from nordlocale.locale_utils import get_babel_locale
from nordlocale.registry import NumberFormatOptions

__all__ = ["LocaleContext", "build_number_pattern"]

logger = logging.getLogger(__name__)


def build_number_pattern(options: NumberFormatOptions) -> str:
    """Build a CLDR number pattern from fraction digit bounds.

    Examples:
        >>> build_number_pattern(NumberFormatOptions(maximum_fraction_digits=2))
        '#,##0.##'
        >>> build_number_pattern(NumberFormatOptions(
        ...     minimum_fraction_digits=2, maximum_fraction_digits=2, use_grouping=False
        ... ))
        '0.00'
    """
    # '#,##0' = integer with grouping
    # '#,##0.0##' = 1-3 decimal places with grouping
    integer_part = "#,##0" if options.use_grouping else "0"

    minimum = options.minimum_fraction_digits
    maximum = options.maximum_fraction_digits
    if maximum == 0:
        pattern = integer_part
    else:
        pattern = f"{integer_part}.{'0' * minimum}{'#' * (maximum - minimum)}"

    if options.style == NumberStyle.PERCENT:
        return f"{pattern}%"
    return pattern


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() to construct instances; it resolves the Babel
    Locale through the shared cache and falls back to en_US CLDR data for
    codes Babel does not know.

    Examples:
        >>> ctx = LocaleContext.create('nb-NO')
        >>> ctx.format_number(1234.5, NumberFormatOptions())
        '1\\xa0234,5'

        >>> ctx = LocaleContext.create('xx-UNKNOWN')
        >>> ctx.is_fallback
        True
    """

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for unknown locales.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'nb-NO', 'en')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US
            CLDR data while preserving the original locale_code.
        """
        try:
            return cls(locale_code=locale_code, _babel_locale=get_babel_locale(locale_code))
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s",
                locale_code,
                e,
                BABEL_FALLBACK_LOCALE,
            )
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                BABEL_FALLBACK_LOCALE,
            )
        return cls(
            locale_code=locale_code,
            _babel_locale=get_babel_locale(BABEL_FALLBACK_LOCALE),
            is_fallback=True,
        )

    @property
    def babel_locale(self) -> Locale:
        """Get the Babel Locale used for formatting."""
        return self._babel_locale

    def format_date(
        self,
        value: date | datetime | str,
        *,
        pattern: str | None = None,
        style: Literal["short", "medium", "long", "full"] = "medium",
    ) -> str:
        """Format a date with a CLDR pattern or style.

        Args:
            value: date, datetime, or ISO 8601 string ("2025-01-15")
            pattern: LDML date pattern (e.g., "dd.MM.yyyy"); overrides style
            style: CLDR date style used when pattern is None

        Returns:
            Formatted date string

        Raises:
            FormattingError: If value is not a valid ISO 8601 string or
                Babel rejects the pattern

        Examples:
            >>> ctx = LocaleContext.create('nb-NO')
            >>> ctx.format_date(date(2025, 1, 15), pattern="dd.MM.yyyy")
            '15.01.2025'
        """
        date_value: date
        if isinstance(value, str):
            try:
                date_value = datetime.fromisoformat(value)
            except ValueError as e:
                msg = f"Invalid date string '{value}': not ISO 8601 format"
                raise FormattingError(msg, fallback_value=value) from e
        else:
            date_value = value

        try:
            return str(
                babel_dates.format_date(
                    date_value,
                    format=pattern if pattern is not None else style,
                    locale=self.babel_locale,
                )
            )
        except (ValueError, TypeError, OverflowError, AttributeError, KeyError) as e:
            msg = f"Date formatting failed for '{date_value}': {e}"
            fallback = date_value.isoformat() if isinstance(date_value, date) else str(date_value)
            raise FormattingError(msg, fallback_value=fallback) from e

    def format_number(
        self,
        value: int | float | Decimal,
        options: NumberFormatOptions,
    ) -> str:
        """Format number with locale-specific separators.

        Args:
            value: Number to format
            options: Fraction digit bounds, grouping, and style

        Returns:
            Formatted number string according to locale rules

        Examples:
            >>> ctx = LocaleContext.create('en')
            >>> ctx.format_number(1234.56, NumberFormatOptions())
            '1,234.56'
            >>> ctx.format_number(0.25, NumberFormatOptions(style=NumberStyle.PERCENT))
            '25%'
        """
        pattern = build_number_pattern(options)
        try:
            if options.style == NumberStyle.PERCENT:
                return str(
                    babel_numbers.format_percent(value, format=pattern, locale=self.babel_locale)
                )
            return str(
                babel_numbers.format_decimal(value, format=pattern, locale=self.babel_locale)
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            msg = f"Number formatting failed for '{value}': {e}"
            raise FormattingError(msg, fallback_value=str(value)) from e

    def format_currency(
        self,
        value: int | float | Decimal,
        *,
        currency: str = DEFAULT_CURRENCY,
    ) -> str:
        """Format currency with locale-specific rules.

        Args:
            value: Monetary amount
            currency: ISO 4217 currency code (default: NOK)

        Returns:
            Formatted currency string according to locale rules

        Examples:
            >>> ctx = LocaleContext.create('en')
            >>> ctx.format_currency(250, currency='NOK')
            'NOK\\xa0250.00'
        """
        try:
            return str(
                babel_numbers.format_currency(value, currency, locale=self.babel_locale)
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            msg = f"Currency formatting failed for '{value}' ({currency}): {e}"
            raise FormattingError(msg, fallback_value=f"{value} {currency}") from e
