"""Catalog store: one replace-on-write message tree per locale.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nordlocale.catalog.tree import Node, build_tree, iter_keys, lookup, split_key

__all__ = ["MessageCatalog"]


class MessageCatalog:
    """Message trees keyed by locale code.

    Loading a tree for a locale replaces the previous tree entirely; there
    is no deep merge. The tree is fully built before the single assignment
    that stores it, so no partially loaded tree is ever observable.

    Locale codes here are independent of the locale registry: a catalog
    may be loaded for a locale that was never registered.

    Example:
        >>> catalog = MessageCatalog()
        >>> asyncio.run(catalog.load("nb-NO", {"common": {"save": "Lagre"}}))
        >>> catalog.lookup("nb-NO", "common.save")
        'Lagre'
        >>> catalog.lookup("nb-NO", "common.cancel") is None
        True
    """

    __slots__ = ("_trees",)

    def __init__(self) -> None:
        self._trees: dict[str, Node] = {}

    async def load(self, locale: str, messages: Mapping[str, Any]) -> None:
        """Replace the tree for locale.

        Raises:
            CatalogError: If messages is not a mapping
        """
        self.replace(locale, build_tree(messages))

    def replace(self, locale: str, tree: Node) -> None:
        """Store an already built tree for locale, discarding any previous one."""
        self._trees[locale] = tree

    def lookup(self, locale: str, key: str) -> str | None:
        """Resolve dotted key in the tree for locale only (no fallback)."""
        return lookup(self._trees.get(locale), split_key(key))

    def keys(self, locale: str) -> list[str]:
        """Get sorted dotted keys of every message loaded for locale."""
        tree = self._trees.get(locale)
        if tree is None:
            return []
        return sorted(iter_keys(tree))

    def __len__(self) -> int:
        return len(self._trees)
