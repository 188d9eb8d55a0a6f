"""One/other plural form selection.

Norwegian Bokmål, Norwegian Nynorsk, and English share the same two-way
cardinal rule: exactly 1 selects "one", everything else (zero, negatives,
fractions, two or more) selects "other". Locales outside these language
families always select "other".

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

from nordlocale.constants import KEY_SEPARATOR
from nordlocale.enums import PluralCategory
from nordlocale.locale_utils import get_language

__all__ = [
    "PLURAL_LANGUAGES",
    "plural_key",
    "select_plural_form",
]

PLURAL_LANGUAGES: frozenset[str] = frozenset({"nb", "nn", "en"})
"""Language subtags with a one/other rule."""


def select_plural_form(count: int | float | Decimal, locale: str) -> PluralCategory:
    """Select plural form suffix for count in locale.

    Args:
        count: Number being pluralized
        locale: Locale code (e.g., "nb-NO", "nn_NO", "en-GB")

    Returns:
        PluralCategory.ONE or PluralCategory.OTHER

    Examples:
        >>> select_plural_form(1, "nb-NO")
        <PluralCategory.ONE: 'one'>
        >>> select_plural_form(0, "en")
        <PluralCategory.OTHER: 'other'>
        >>> select_plural_form(1, "de-DE")  # unrecognized family
        <PluralCategory.OTHER: 'other'>
    """
    if get_language(locale) not in PLURAL_LANGUAGES:
        return PluralCategory.OTHER
    return PluralCategory.ONE if count == 1 else PluralCategory.OTHER


def plural_key(key: str, category: PluralCategory) -> str:
    """Compose the lookup key for a plural form.

    Example:
        >>> plural_key("booking.count", PluralCategory.OTHER)
        'booking.count.other'
    """
    return f"{key}{KEY_SEPARATOR}{category}"
