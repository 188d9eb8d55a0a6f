"""nordlocale - Localization engine with Norwegian formatting support.

Stores per-locale message trees, resolves dotted keys through a single-hop
fallback, interpolates {{name}} parameters, selects one/other plural forms,
and formats dates, numbers, currency, and Norwegian national identifiers
with Babel's CLDR data.

Public API:
    I18nManager - Engine instance (construct one per application/test context)
    I18nOptions - Engine options (default/fallback locale, feature switches)
    LocaleConfig, NumberFormatOptions - Locale metadata
    Diagnostic, DiagnosticCode - Structured miss reports for on_diagnostic sinks
    t, tp, set_locale, ... - Convenience functions bound to a default instance

Exceptions:
    NordLocaleError - Base exception class
    ConfigurationError - Invalid locale config or options
    CatalogError - Message catalog is not a mapping

Submodules:
    nordlocale.catalog - Message trees, catalog store, loader protocol
    nordlocale.runtime - Plural rules, interpolation, Babel formatting
    nordlocale.localization - Engine and default instance
"""

from .config import I18nOptions
from .diagnostics import (
    CatalogError,
    ConfigurationError,
    Diagnostic,
    DiagnosticCode,
    NordLocaleError,
)
from .enums import LoadStatus, NumberStyle, PluralCategory, Severity, TextDirection
from .localization import I18nManager, I18nStats
from .localization.default import (
    create_i18n_manager,
    format_currency,
    format_date,
    format_norwegian_organization_number,
    format_norwegian_person_number,
    format_number,
    get_available_locales,
    get_current_locale,
    get_fallback_locale,
    get_i18n_manager,
    get_locale_config,
    get_message_keys,
    get_norwegian_locales,
    get_stats,
    has_message,
    is_norwegian_locale,
    load_locale,
    load_messages,
    register_locale,
    reset_i18n_manager,
    set_locale,
    t,
    tp,
)
from .registry import LocaleConfig, NumberFormatOptions

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("nordlocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "I18nManager",
    "I18nOptions",
    "I18nStats",
    "LoadStatus",
    "LocaleConfig",
    "NordLocaleError",
    "NumberFormatOptions",
    "NumberStyle",
    "PluralCategory",
    "Severity",
    "TextDirection",
    "__version__",
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
