"""Catalog loading infrastructure for I18nManager.

Provides the protocol for caller-supplied message loaders and the result
record of a single load attempt. The engine never fetches or persists
catalogs itself; a loader is how callers hand it one asynchronously.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from nordlocale.enums import LoadStatus

__all__ = [
    "LoadResult",
    "MessageLoader",
]


class MessageLoader(Protocol):
    """Protocol for fetching the message mapping of one locale.

    This is a Protocol (structural typing) rather than ABC so any object
    with a matching async load() method qualifies.

    Example:
        >>> class BundledLoader:
        ...     def __init__(self, catalogs):
        ...         self._catalogs = catalogs
        ...     async def load(self, locale: str):
        ...         return self._catalogs[locale]
        ...
        >>> i18n = I18nManager(message_loader=BundledLoader({"nb-NO": {"hei": "Hei"}}))
        >>> result = asyncio.run(i18n.load_locale("nb-NO"))
    """

    async def load(self, locale: str) -> Mapping[str, Any]:
        """Load the nested message mapping for locale.

        Raises:
            FileNotFoundError, KeyError: If no catalog exists for locale
            OSError, ValueError: If the catalog cannot be read or decoded
        """
        ...


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Immutable result of a single catalog load attempt.

    Attributes:
        locale: Locale code that was loaded
        status: SUCCESS, NOT_FOUND, or ERROR
        message_count: Number of leaf messages stored (0 unless SUCCESS)
        error: Exception raised by the loader (None unless ERROR or NOT_FOUND)
    """

    locale: str
    status: LoadStatus
    message_count: int = 0
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the catalog was stored."""
        return self.status == LoadStatus.SUCCESS
