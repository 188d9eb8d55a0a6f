"""Process-wide default I18nManager and convenience functions.

The default instance is created lazily on first use and shared by every
free function in this module. Applications that need isolation (tests,
multi-tenant services) should construct their own I18nManager and ignore
this module entirely.

Python 3.13+.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from nordlocale.catalog.loading import LoadResult
from nordlocale.config import I18nOptions
from nordlocale.constants import DEFAULT_CURRENCY
from nordlocale.localization.orchestrator import I18nManager, I18nStats
from nordlocale.localization.types import (
    DateInput,
    LocaleCode,
    MessageKey,
    MessageParams,
    NumberInput,
)
from nordlocale.registry import LocaleConfig

__all__ = [
    "create_i18n_manager",
    "format_currency",
    "format_date",
    "format_norwegian_organization_number",
    "format_norwegian_person_number",
    "format_number",
    "get_available_locales",
    "get_current_locale",
    "get_fallback_locale",
    "get_i18n_manager",
    "get_locale_config",
    "get_message_keys",
    "get_norwegian_locales",
    "get_stats",
    "has_message",
    "is_norwegian_locale",
    "load_locale",
    "load_messages",
    "register_locale",
    "reset_i18n_manager",
    "set_locale",
    "t",
    "tp",
]

_default_manager: I18nManager | None = None
_default_lock = threading.Lock()


def get_i18n_manager() -> I18nManager:
    """Get the default engine, creating it with I18nOptions() on first call."""
    global _default_manager  # noqa: PLW0603
    # Double-checked: lock only while the instance does not exist yet
    if _default_manager is None:
        with _default_lock:
            if _default_manager is None:
                _default_manager = I18nManager()
    return _default_manager


def create_i18n_manager(options: I18nOptions | None = None, **kwargs: Any) -> I18nManager:
    """Create an independent engine (never the default instance).

    Keyword arguments are forwarded to I18nManager (locales, on_diagnostic,
    message_loader).
    """
    return I18nManager(options, **kwargs)


def reset_i18n_manager(manager: I18nManager | None = None) -> None:
    """Replace the default engine, or drop it so the next call recreates it."""
    global _default_manager  # noqa: PLW0603
    with _default_lock:
        _default_manager = manager


def register_locale(config: LocaleConfig) -> None:
    """Register a locale config on the default engine."""
    get_i18n_manager().register_locale(config)


def set_locale(locale: LocaleCode) -> None:
    """Select the current locale of the default engine."""
    get_i18n_manager().set_locale(locale)


def get_current_locale() -> LocaleCode:
    """Get the current locale of the default engine."""
    return get_i18n_manager().get_current_locale()


def get_fallback_locale() -> LocaleCode:
    """Get the fallback locale of the default engine."""
    return get_i18n_manager().get_fallback_locale()


def get_locale_config(locale: LocaleCode | None = None) -> LocaleConfig | None:
    """Get a registered locale config from the default engine."""
    return get_i18n_manager().get_locale_config(locale)


def get_available_locales() -> list[LocaleConfig]:
    """Get all locale configs registered on the default engine."""
    return get_i18n_manager().get_available_locales()


def get_norwegian_locales() -> list[LocaleConfig]:
    """Get compliant locale configs registered on the default engine."""
    return get_i18n_manager().get_norwegian_locales()


def is_norwegian_locale(locale: LocaleCode | None = None) -> bool:
    """Check whether locale (default: current) is compliant on the default engine."""
    return get_i18n_manager().is_norwegian_locale(locale)


async def load_messages(locale: LocaleCode, messages: Mapping[str, Any]) -> None:
    """Replace the message tree for locale on the default engine."""
    await get_i18n_manager().load_messages(locale, messages)


async def load_locale(locale: LocaleCode) -> LoadResult:
    """Load locale through the default engine's message loader."""
    return await get_i18n_manager().load_locale(locale)


def get_message_keys(locale: LocaleCode | None = None) -> list[MessageKey]:
    """Get message keys loaded on the default engine."""
    return get_i18n_manager().get_message_keys(locale)


def has_message(key: MessageKey, locale: LocaleCode | None = None) -> bool:
    """Check whether the default engine can resolve key."""
    return get_i18n_manager().has_message(key, locale)


def t(
    key: MessageKey,
    params: MessageParams | None = None,
    locale: LocaleCode | None = None,
) -> str:
    """Translate key with the default engine."""
    return get_i18n_manager().t(key, params, locale)


def tp(
    key: MessageKey,
    count: NumberInput,
    params: MessageParams | None = None,
    locale: LocaleCode | None = None,
) -> str:
    """Translate the plural form of key with the default engine."""
    return get_i18n_manager().tp(key, count, params, locale)


def format_date(value: DateInput, locale: LocaleCode | None = None) -> str:
    """Format a date with the default engine."""
    return get_i18n_manager().format_date(value, locale)


def format_number(value: NumberInput, locale: LocaleCode | None = None) -> str:
    """Format a number with the default engine."""
    return get_i18n_manager().format_number(value, locale)


def format_currency(
    amount: NumberInput,
    currency: str = DEFAULT_CURRENCY,
    locale: LocaleCode | None = None,
) -> str:
    """Format a monetary amount with the default engine."""
    return get_i18n_manager().format_currency(amount, currency, locale)


def format_norwegian_person_number(person_number: str) -> str:
    """Format a fødselsnummer for display."""
    return get_i18n_manager().format_norwegian_person_number(person_number)


def format_norwegian_organization_number(organization_number: str) -> str:
    """Format an organisasjonsnummer for display."""
    return get_i18n_manager().format_norwegian_organization_number(organization_number)


def get_stats() -> I18nStats:
    """Get a state snapshot of the default engine."""
    return get_i18n_manager().get_stats()
