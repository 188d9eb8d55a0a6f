"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale code handling shared by plural selection and formatting:
normalization for Babel, language-family extraction, cached Babel locale
parsing, and system locale detection.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_language",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (nb-NO), while Babel/POSIX uses underscores (nb_NO).

    Args:
        locale_code: BCP-47 locale code (e.g., "nb-NO", "en-GB")

    Returns:
        POSIX-formatted locale code (e.g., "nb_NO", "en_GB")

    Example:
        >>> normalize_locale("nn-NO")
        'nn_NO'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def get_language(locale_code: str) -> str:
    """Return the lowercase language subtag of a locale code.

    Example:
        >>> get_language("nb-NO")
        'nb'
        >>> get_language("EN_gb")
        'en'
    """
    return normalize_locale(locale_code).split("_", 1)[0].lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result, so repeated
    formatting calls for the same locale skip Locale.parse().

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("nb-NO")
        >>> locale.language
        'nb'
        >>> locale.territory
        'NO'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale() -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_TIME environment variable (date formatting category)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Returns:
        Detected locale code in POSIX format, or "en_US" if none is set.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'nb_NO.UTF-8'
        >>> get_system_locale()
        'nb_NO'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale:
            code = system_locale.split(".")[0]
            if code not in ("C", "POSIX"):
                return normalize_locale(code)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_TIME", "LANG"):
        code = os.environ.get(var, "").split(".")[0]
        if code and code not in ("C", "POSIX"):
            return normalize_locale(code)

    return "en_US"
