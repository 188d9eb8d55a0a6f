"""Locale registry: locale metadata keyed by locale code.

LocaleConfig describes how one locale is displayed and formatted.
LocaleRegistry stores configs by code with insert-or-overwrite semantics
and answers the compliance queries used by the engine.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from nordlocale.constants import DEFAULT_MAX_FRACTION_DIGITS, DEFAULT_MIN_FRACTION_DIGITS
from nordlocale.diagnostics.errors import ConfigurationError
from nordlocale.enums import NumberStyle, TextDirection

__all__ = [
    "BUILTIN_LOCALES",
    "LocaleConfig",
    "LocaleRegistry",
    "NumberFormatOptions",
]


@dataclass(frozen=True, slots=True)
class NumberFormatOptions:
    """Default number formatting options for a locale.

    Attributes:
        style: DECIMAL or PERCENT
        minimum_fraction_digits: Minimum decimal places (default: 0)
        maximum_fraction_digits: Maximum decimal places (default: 2)
        use_grouping: Use thousands separator (default: True)
    """

    style: NumberStyle = NumberStyle.DECIMAL
    minimum_fraction_digits: int = DEFAULT_MIN_FRACTION_DIGITS
    maximum_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS
    use_grouping: bool = True

    def __post_init__(self) -> None:
        """Validate fraction digit bounds.

        Raises:
            ConfigurationError: If a bound is negative or minimum exceeds maximum.
        """
        if self.minimum_fraction_digits < 0 or self.maximum_fraction_digits < 0:
            msg = "fraction digits must be non-negative"
            raise ConfigurationError(msg)
        if self.minimum_fraction_digits > self.maximum_fraction_digits:
            msg = (
                f"minimum_fraction_digits ({self.minimum_fraction_digits}) exceeds "
                f"maximum_fraction_digits ({self.maximum_fraction_digits})"
            )
            raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> NumberFormatOptions:
        """Build options from snake_case or camelCase keys."""
        return cls(
            style=NumberStyle(_pick(data, "style", "style", NumberStyle.DECIMAL)),
            minimum_fraction_digits=int(
                _pick(
                    data,
                    "minimum_fraction_digits",
                    "minimumFractionDigits",
                    DEFAULT_MIN_FRACTION_DIGITS,
                )
            ),
            maximum_fraction_digits=int(
                _pick(
                    data,
                    "maximum_fraction_digits",
                    "maximumFractionDigits",
                    DEFAULT_MAX_FRACTION_DIGITS,
                )
            ),
            use_grouping=bool(_pick(data, "use_grouping", "useGrouping", True)),
        )


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Display and formatting metadata for one locale.

    Attributes:
        code: Unique registry key (e.g., "nb-NO")
        name: Display label (e.g., "Norsk (Bokmål)")
        direction: Text direction (default: LTR)
        date_format: Babel/LDML date pattern (e.g., "dd.MM.yyyy"); None uses
            the locale's CLDR short date format
        number_format: Default number formatting options
        compliant: Subject to Norwegian national formatting rules

    Example:
        >>> config = LocaleConfig(code="sv-SE", name="Svenska", date_format="yyyy-MM-dd")
        >>> config.compliant
        False
    """

    code: str
    name: str
    direction: TextDirection = TextDirection.LTR
    date_format: str | None = None
    number_format: NumberFormatOptions = field(default_factory=NumberFormatOptions)
    compliant: bool = False

    def __post_init__(self) -> None:
        """Validate that the registry key is present.

        Raises:
            ConfigurationError: If code is empty or not a string.
        """
        if not isinstance(self.code, str) or not self.code:
            msg = "LocaleConfig.code must be a non-empty string"
            raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LocaleConfig:
        """Build a config from a plain mapping (e.g., parsed JSON).

        Accepts snake_case keys and the camelCase keys used by JavaScript
        configuration objects (dateFormat, numberFormat, norwegianCompliant).

        Raises:
            ConfigurationError: If code is missing or a value is invalid.

        Example:
            >>> LocaleConfig.from_mapping({
            ...     "code": "da-DK",
            ...     "name": "Dansk",
            ...     "dateFormat": "dd-MM-yyyy",
            ...     "numberFormat": {"maximumFractionDigits": 3},
            ... }).number_format.maximum_fraction_digits
            3
        """
        code = data.get("code")
        if code is None:
            msg = "LocaleConfig mapping requires a 'code' entry"
            raise ConfigurationError(msg)

        number_format = _pick(data, "number_format", "numberFormat", None)
        date_format = _pick(data, "date_format", "dateFormat", None)
        try:
            return cls(
                code=code,
                name=str(data.get("name", code)),
                direction=TextDirection(data.get("direction", TextDirection.LTR)),
                date_format=None if date_format is None else str(date_format),
                number_format=(
                    NumberFormatOptions()
                    if number_format is None
                    else NumberFormatOptions.from_mapping(number_format)
                ),
                compliant=bool(_pick(data, "compliant", "norwegianCompliant", False)),
            )
        except (TypeError, ValueError) as e:
            if isinstance(e, ConfigurationError):
                raise
            msg = f"Invalid locale config for '{code}': {e}"
            raise ConfigurationError(msg) from e


def _pick(data: Mapping[str, Any], snake: str, camel: str, default: Any) -> Any:
    if snake in data:
        return data[snake]
    return data.get(camel, default)


_NORWEGIAN_NUMBER_FORMAT = NumberFormatOptions(
    style=NumberStyle.DECIMAL,
    minimum_fraction_digits=0,
    maximum_fraction_digits=2,
)

BUILTIN_LOCALES: tuple[LocaleConfig, ...] = (
    LocaleConfig(
        code="nb-NO",
        name="Norsk (Bokmål)",
        date_format="dd.MM.yyyy",
        number_format=_NORWEGIAN_NUMBER_FORMAT,
        compliant=True,
    ),
    LocaleConfig(
        code="nn-NO",
        name="Norsk (Nynorsk)",
        date_format="dd.MM.yyyy",
        number_format=_NORWEGIAN_NUMBER_FORMAT,
        compliant=True,
    ),
    LocaleConfig(
        code="en",
        name="English",
        date_format="MM/dd/yyyy",
        number_format=NumberFormatOptions(minimum_fraction_digits=0, maximum_fraction_digits=2),
    ),
)
"""Seed configs inserted into every registry before caller registrations."""


class LocaleRegistry:
    """Locale configs keyed by code, in registration order.

    Re-registering a code replaces the previous config in place (no merge),
    keeping its original position in iteration order.

    Example:
        >>> registry = LocaleRegistry()
        >>> [c.code for c in registry.compliant()]
        ['nb-NO', 'nn-NO']
        >>> registry.register(LocaleConfig(code="en", name="English (custom)"))
        >>> registry.get("en").name
        'English (custom)'
    """

    __slots__ = ("_configs",)

    def __init__(
        self,
        locales: Iterable[LocaleConfig] = (),
        *,
        seed: bool = True,
    ) -> None:
        """Initialize registry.

        Args:
            locales: Configs registered after the built-in seeds
            seed: Insert BUILTIN_LOCALES first (default: True)
        """
        self._configs: dict[str, LocaleConfig] = {}
        if seed:
            for config in BUILTIN_LOCALES:
                self.register(config)
        for config in locales:
            self.register(config)

    def register(self, config: LocaleConfig) -> None:
        """Insert or overwrite config by its code."""
        self._configs[config.code] = config

    def get(self, code: str) -> LocaleConfig | None:
        """Get config for code (None if not registered)."""
        return self._configs.get(code)

    def all(self) -> list[LocaleConfig]:
        """Get all registered configs in registration order."""
        return list(self._configs.values())

    def compliant(self) -> list[LocaleConfig]:
        """Get configs marked compliant."""
        return [config for config in self._configs.values() if config.compliant]

    def is_compliant(self, code: str) -> bool:
        """Check whether code is registered and marked compliant."""
        config = self._configs.get(code)
        return config is not None and config.compliant

    def __contains__(self, code: object) -> bool:
        return code in self._configs

    def __iter__(self) -> Iterator[LocaleConfig]:
        return iter(self._configs.values())

    def __len__(self) -> int:
        return len(self._configs)
