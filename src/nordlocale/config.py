"""Engine options for I18nManager.

Provides a single frozen dataclass that encapsulates the engine's
construction-time settings, plus loading from NORDLOCALE_* environment
variables through pydantic-settings.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from nordlocale.constants import DEFAULT_LOCALE, ENV_PREFIX, FALLBACK_LOCALE
from nordlocale.diagnostics.errors import ConfigurationError

__all__ = ["I18nOptions"]


class _EnvSettings(BaseSettings):
    """NORDLOCALE_* environment variables (names are case-insensitive)."""

    default_locale: str = DEFAULT_LOCALE
    fallback_locale: str = FALLBACK_LOCALE
    interpolation: bool = True
    plural_rules: bool = True

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")


@dataclass(frozen=True, slots=True)
class I18nOptions:
    """Immutable configuration for an I18nManager.

    All fields have sensible defaults; constructing ``I18nOptions()`` with
    no arguments produces Norwegian Bokmål with English fallback.

    Attributes:
        default_locale: Locale selected at construction (default: "nb-NO").
            An unregistered default degrades to fallback_locale.
        fallback_locale: Locale consulted when a key misses in the target
            locale (default: "en"). Fixed for the engine's lifetime.
        enable_interpolation: Substitute {{name}} tokens when params are
            passed to t() (default: True).
        enable_plural_rules: Append one/other suffixes in tp() (default: True).
            When False, tp() resolves the bare key with count as a param.

    Example:
        >>> options = I18nOptions(default_locale="nn-NO")
        >>> i18n = I18nManager(options)
        >>> i18n.get_current_locale()
        'nn-NO'
    """

    default_locale: str = DEFAULT_LOCALE
    fallback_locale: str = FALLBACK_LOCALE
    enable_interpolation: bool = True
    enable_plural_rules: bool = True

    def __post_init__(self) -> None:
        """Validate locale codes at construction time.

        Raises:
            ConfigurationError: If default_locale or fallback_locale is empty.
        """
        if not self.default_locale:
            msg = "default_locale must be a non-empty locale code"
            raise ConfigurationError(msg)
        if not self.fallback_locale:
            msg = "fallback_locale must be a non-empty locale code"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls) -> I18nOptions:
        """Build options from NORDLOCALE_* environment variables.

        Variables:
            NORDLOCALE_DEFAULT_LOCALE, NORDLOCALE_FALLBACK_LOCALE: locale codes
            NORDLOCALE_INTERPOLATION, NORDLOCALE_PLURAL_RULES: booleans
                (1/0, true/false, yes/no, on/off, ... as parsed by pydantic)

        Unset variables keep the field defaults.

        Raises:
            ConfigurationError: If a variable fails validation.

        Example:
            >>> os.environ["NORDLOCALE_PLURAL_RULES"] = "off"
            >>> I18nOptions.from_env().enable_plural_rules
            False
        """
        try:
            settings = _EnvSettings()
        except ValidationError as e:
            names = ", ".join(
                f"{ENV_PREFIX}{str(error['loc'][0]).upper()}" for error in e.errors()
            )
            msg = f"Invalid environment configuration: {names}"
            raise ConfigurationError(msg) from e

        return cls(
            default_locale=settings.default_locale,
            fallback_locale=settings.fallback_locale,
            enable_interpolation=settings.interpolation,
            enable_plural_rules=settings.plural_rules,
        )
