"""Localization engine package.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, MessageKey, MessageParams, ...)
    orchestrator - I18nManager (registry, catalogs, resolution, formatting), I18nStats
    default      - Lazily created default I18nManager and convenience functions

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from nordlocale.localization.default import (
    create_i18n_manager,
    get_i18n_manager,
    reset_i18n_manager,
)
from nordlocale.localization.orchestrator import I18nManager, I18nStats
from nordlocale.localization.types import (
    DateInput,
    LocaleCode,
    MessageKey,
    MessageParams,
    NumberInput,
)

__all__ = [
    # Engine
    "I18nManager",
    "I18nStats",
    # Default instance
    "create_i18n_manager",
    "get_i18n_manager",
    "reset_i18n_manager",
    # Type aliases for user code type annotations
    "DateInput",
    "LocaleCode",
    "MessageKey",
    "MessageParams",
    "NumberInput",
]
