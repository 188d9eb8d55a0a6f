"""Localization engine: registry, catalogs, resolution, and formatting.

I18nManager owns one locale registry, one message catalog, and the session
state (current and fallback locale). Construct one per application or test
context and pass it by reference; the module-level default instance in
nordlocale.localization.default is an optional convenience wrapper.

Resolution Behavior:
    t() looks a dotted key up in the target locale, then exactly once in
    the fallback locale. A key missing from both is returned unchanged.
    Misses never raise: each one is reported as a Diagnostic through the
    module logger and the optional on_diagnostic sink.

        seen = []
        i18n = I18nManager(on_diagnostic=seen.append)
        i18n.t("missing.key")             # -> "missing.key"
        seen[0].code                      # -> DiagnosticCode.MESSAGE_NOT_FOUND

Concurrency:
    Single-threaded, cooperative. Only catalog loading is async, and its
    store mutation is one assignment of a fully built tree, so the last
    completed load for a locale wins.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from typing import Any

from nordlocale.catalog.loading import LoadResult, MessageLoader
from nordlocale.catalog.store import MessageCatalog
from nordlocale.catalog.tree import build_tree, iter_keys
from nordlocale.config import I18nOptions
from nordlocale.constants import (
    COUNT_PARAM,
    DEFAULT_CURRENCY,
    UNCONFIGURED_MAX_FRACTION_DIGITS,
)
from nordlocale.diagnostics.codes import Diagnostic, DiagnosticCode, DiagnosticSink
from nordlocale.diagnostics.errors import ConfigurationError, FormattingError
from nordlocale.diagnostics.reporter import DiagnosticReporter
from nordlocale.enums import LoadStatus, Severity
from nordlocale.locale_utils import get_system_locale
from nordlocale.localization.types import (
    DateInput,
    LocaleCode,
    MessageKey,
    MessageParams,
    NumberInput,
)
from nordlocale.registry import LocaleConfig, LocaleRegistry, NumberFormatOptions
from nordlocale.runtime.identifiers import (
    format_norwegian_organization_number,
    format_norwegian_person_number,
)
from nordlocale.runtime.interpolation import interpolate
from nordlocale.runtime.locale_context import LocaleContext
from nordlocale.runtime.plural_rules import plural_key, select_plural_form

__all__ = ["I18nManager", "I18nStats"]

_UNCONFIGURED_NUMBER_FORMAT = NumberFormatOptions(
    maximum_fraction_digits=UNCONFIGURED_MAX_FRACTION_DIGITS
)


@dataclass(frozen=True, slots=True)
class I18nStats:
    """Snapshot of engine state returned by I18nManager.get_stats().

    Attributes:
        current_locale: Locale used when no explicit locale is passed
        fallback_locale: Locale consulted after a miss
        total_locales: Number of registered locale configs
        loaded_catalogs: Number of locales with a loaded message tree
        norwegian_locales: Number of registered compliant locales
        is_norwegian: Whether the current locale is compliant
    """

    current_locale: LocaleCode
    fallback_locale: LocaleCode
    total_locales: int
    loaded_catalogs: int
    norwegian_locales: int
    is_norwegian: bool

    def as_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (e.g., for JSON health endpoints)."""
        return asdict(self)


class I18nManager:
    """Per-locale message resolution with single-hop fallback.

    Example - Norwegian UI with English fallback:
        >>> i18n = I18nManager()
        >>> asyncio.run(i18n.load_messages("nb-NO", {"a": {"b": "X"}}))
        >>> asyncio.run(i18n.load_messages("en", {"a": {"b": "Y", "c": "Z"}}))
        >>> i18n.t("a.b"), i18n.t("a.c"), i18n.t("a.d")
        ('X', 'Z', 'a.d')

    Example - Plural forms:
        >>> asyncio.run(i18n.load_messages("nb-NO", {
        ...     "booking": {"count": {
        ...         "one": "{{count}} reservasjon",
        ...         "other": "{{count}} reservasjoner",
        ...     }},
        ... }))
        >>> i18n.tp("booking.count", 1), i18n.tp("booking.count", 25)
        ('1 reservasjon', '25 reservasjoner')
    """

    __slots__ = (
        "_catalog",
        "_current_locale",
        "_fallback_locale",
        "_message_loader",
        "_options",
        "_registry",
        "_reporter",
    )

    def __init__(
        self,
        options: I18nOptions | None = None,
        *,
        locales: Iterable[LocaleConfig] = (),
        on_diagnostic: DiagnosticSink | None = None,
        message_loader: MessageLoader | None = None,
    ) -> None:
        """Initialize the engine.

        Built-in locales (nb-NO, nn-NO, en) are registered first, then any
        caller-supplied configs, which may overwrite them. The default locale
        is applied through set_locale(), so an unregistered default degrades
        to the fallback locale with a warning diagnostic.

        Args:
            options: Engine options (default: I18nOptions())
            locales: Extra locale configs registered after the built-ins
            on_diagnostic: Callback receiving every miss and fallback diagnostic
            message_loader: Async loader used by load_locale()

        Raises:
            ConfigurationError: If the fallback locale is not registered
        """
        self._options = options if options is not None else I18nOptions()
        self._reporter = DiagnosticReporter(on_diagnostic)
        self._registry = LocaleRegistry(locales)
        self._catalog = MessageCatalog()
        self._message_loader = message_loader

        self._fallback_locale: LocaleCode = self._options.fallback_locale
        if self._fallback_locale not in self._registry:
            msg = f"Fallback locale '{self._fallback_locale}' is not registered"
            raise ConfigurationError(msg)

        self._current_locale: LocaleCode = self._fallback_locale
        self.set_locale(self._options.default_locale)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"I18nManager(current_locale={self._current_locale!r}, "
            f"fallback_locale={self._fallback_locale!r}, "
            f"locales={len(self._registry)}, catalogs={len(self._catalog)})"
        )

    @property
    def options(self) -> I18nOptions:
        """Get the options this engine was constructed with."""
        return self._options

    def _report(
        self,
        code: DiagnosticCode,
        message: str,
        *,
        severity: Severity = Severity.WARNING,
        locale: LocaleCode | None = None,
        key: MessageKey | None = None,
    ) -> None:
        self._reporter.emit(
            Diagnostic(code=code, message=message, severity=severity, locale=locale, key=key)
        )

    # ------------------------------------------------------------------
    # Locale registry
    # ------------------------------------------------------------------

    def register_locale(self, config: LocaleConfig) -> None:
        """Insert or overwrite a locale config by its code."""
        self._registry.register(config)

    def set_locale(self, locale: LocaleCode) -> None:
        """Select the current locale.

        An unregistered code is never held as current: a LOCALE_NOT_REGISTERED
        warning is reported and the fallback locale is selected instead.
        """
        if locale not in self._registry:
            self._report(
                DiagnosticCode.LOCALE_NOT_REGISTERED,
                f"Locale {locale} not registered, falling back to {self._fallback_locale}",
                locale=locale,
            )
            locale = self._fallback_locale
        self._current_locale = locale

    def get_current_locale(self) -> LocaleCode:
        """Get the current locale code."""
        return self._current_locale

    def get_fallback_locale(self) -> LocaleCode:
        """Get the fallback locale code fixed at construction."""
        return self._fallback_locale

    def get_locale_config(self, locale: LocaleCode | None = None) -> LocaleConfig | None:
        """Get the registered config for locale (default: current locale)."""
        return self._registry.get(locale or self._current_locale)

    def get_available_locales(self) -> list[LocaleConfig]:
        """Get all registered locale configs in registration order."""
        return self._registry.all()

    def get_norwegian_locales(self) -> list[LocaleConfig]:
        """Get registered locale configs marked compliant."""
        return self._registry.compliant()

    def is_norwegian_locale(self, locale: LocaleCode | None = None) -> bool:
        """Check whether locale (default: current) is registered as compliant."""
        return self._registry.is_compliant(locale or self._current_locale)

    # ------------------------------------------------------------------
    # Catalogs
    # ------------------------------------------------------------------

    async def load_messages(self, locale: LocaleCode, messages: Mapping[str, Any]) -> None:
        """Replace the message tree for locale.

        The previous tree for locale, if any, is discarded entirely.

        Raises:
            CatalogError: If messages is not a mapping
        """
        await self._catalog.load(locale, messages)

    async def load_locale(self, locale: LocaleCode) -> LoadResult:
        """Fetch the catalog for locale through the configured message loader.

        Loader failures are captured in the returned LoadResult rather than
        raised, and reported as a CATALOG_LOAD_FAILED diagnostic. On failure
        the previously loaded tree for locale, if any, is kept.

        Returns:
            LoadResult indicating success, not_found, or error

        Raises:
            ConfigurationError: If no message_loader was configured

        Example:
            >>> result = asyncio.run(i18n.load_locale("nn-NO"))
            >>> if not result.is_success:
            ...     print(f"Missing catalog for {result.locale}: {result.error}")
        """
        if self._message_loader is None:
            msg = "load_locale() requires a message_loader"
            raise ConfigurationError(msg)

        try:
            messages = await self._message_loader.load(locale)
            tree = build_tree(messages)
        except (FileNotFoundError, LookupError) as e:
            result = LoadResult(locale=locale, status=LoadStatus.NOT_FOUND, error=e)
        except (OSError, ValueError, TypeError) as e:
            result = LoadResult(locale=locale, status=LoadStatus.ERROR, error=e)
        else:
            self._catalog.replace(locale, tree)
            return LoadResult(
                locale=locale,
                status=LoadStatus.SUCCESS,
                message_count=sum(1 for _ in iter_keys(tree)),
            )

        self._report(
            DiagnosticCode.CATALOG_LOAD_FAILED,
            f"Catalog for {locale} could not be loaded ({result.status}): {result.error}",
            locale=locale,
        )
        return result

    def get_message_keys(self, locale: LocaleCode | None = None) -> list[MessageKey]:
        """Get sorted dotted keys loaded for locale (default: current locale)."""
        return self._catalog.keys(locale or self._current_locale)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _resolve(self, key: MessageKey, target: LocaleCode) -> tuple[str | None, bool]:
        value = self._catalog.lookup(target, key)
        if value is not None or target == self._fallback_locale:
            return value, False
        value = self._catalog.lookup(self._fallback_locale, key)
        return value, value is not None

    def has_message(self, key: MessageKey, locale: LocaleCode | None = None) -> bool:
        """Check whether t() would find key in locale or the fallback locale."""
        value, _ = self._resolve(key, locale or self._current_locale)
        return value is not None

    def t(
        self,
        key: MessageKey,
        params: MessageParams | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Translate a dotted key.

        Args:
            key: Dotted message key (e.g., "booking.create.title")
            params: Values for {{name}} tokens
            locale: Target locale (default: current locale)

        Returns:
            Resolved (and interpolated) message, or key itself if neither the
            target nor the fallback catalog has it
        """
        target = locale or self._current_locale
        value, used_fallback = self._resolve(key, target)

        if value is None:
            self._report(
                DiagnosticCode.MESSAGE_NOT_FOUND,
                f"Translation missing for key: {key}",
                locale=target,
                key=key,
            )
            return key

        if used_fallback:
            self._report(
                DiagnosticCode.MESSAGE_FALLBACK,
                f"Key {key} resolved from {self._fallback_locale} instead of {target}",
                severity=Severity.INFO,
                locale=target,
                key=key,
            )

        if params is not None and self._options.enable_interpolation:
            return interpolate(value, params)
        return value

    def tp(
        self,
        key: MessageKey,
        count: NumberInput,
        params: MessageParams | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Translate the plural form of key for count.

        Resolves "<key>.one" or "<key>.other" through t(), with count added to
        the interpolation params. With plural rules disabled the bare key is
        resolved instead.

        Example:
            >>> i18n.tp("user.count", 15)
            '15 brukere'
        """
        merged = {**(params or {}), COUNT_PARAM: count}
        if not self._options.enable_plural_rules:
            return self.t(key, merged, locale)

        category = select_plural_form(count, locale or self._current_locale)
        return self.t(plural_key(key, category), merged, locale)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_date(self, value: DateInput, locale: LocaleCode | None = None) -> str:
        """Format a date numerically with the locale's date pattern.

        Registered locales without a date_format use their CLDR short date
        format. Unregistered locales render the system locale's medium style.
        """
        target = locale or self._current_locale
        config = self._registry.get(target)
        try:
            if config is None:
                return LocaleContext.create(get_system_locale()).format_date(value)
            return LocaleContext.create(target).format_date(
                value, pattern=config.date_format, style="short"
            )
        except FormattingError as e:
            self._report(DiagnosticCode.FORMATTING_FAILED, str(e), locale=target)
            return e.fallback_value

    def format_number(self, value: NumberInput, locale: LocaleCode | None = None) -> str:
        """Format a number with the locale's configured fraction digits."""
        target = locale or self._current_locale
        config = self._registry.get(target)
        options = config.number_format if config is not None else _UNCONFIGURED_NUMBER_FORMAT
        try:
            return LocaleContext.create(target).format_number(value, options)
        except FormattingError as e:
            self._report(DiagnosticCode.FORMATTING_FAILED, str(e), locale=target)
            return e.fallback_value

    def format_currency(
        self,
        amount: NumberInput,
        currency: str = DEFAULT_CURRENCY,
        locale: LocaleCode | None = None,
    ) -> str:
        """Format a monetary amount (default currency: NOK)."""
        target = locale or self._current_locale
        try:
            return LocaleContext.create(target).format_currency(amount, currency=currency)
        except FormattingError as e:
            self._report(DiagnosticCode.FORMATTING_FAILED, str(e), locale=target)
            return e.fallback_value

    def format_norwegian_person_number(self, person_number: str) -> str:
        """Format an 11-character fødselsnummer as "DDMMYY NNNNN"."""
        return format_norwegian_person_number(person_number)

    def format_norwegian_organization_number(self, organization_number: str) -> str:
        """Format a 9-character organisasjonsnummer as "NNN NNN NNN"."""
        return format_norwegian_organization_number(organization_number)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_stats(self) -> I18nStats:
        """Get a snapshot of engine state (no side effects)."""
        return I18nStats(
            current_locale=self._current_locale,
            fallback_locale=self._fallback_locale,
            total_locales=len(self._registry),
            loaded_catalogs=len(self._catalog),
            norwegian_locales=len(self._registry.compliant()),
            is_norwegian=self.is_norwegian_locale(),
        )
