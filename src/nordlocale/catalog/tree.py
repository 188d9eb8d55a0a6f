"""Message tree: a tagged union of leaves and nodes.

A message tree holds all translatable text for one locale. Leaves carry
strings; nodes map key segments to subtrees. Dotted keys ("booking.create.title")
are split into segments by a pure function and resolved by structural
pattern matching, so a traversal failure is an explicit case rather than
an implicit None check.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from nordlocale.constants import KEY_SEPARATOR
from nordlocale.diagnostics.errors import CatalogError

__all__ = [
    "Leaf",
    "MessageTree",
    "Node",
    "build_tree",
    "iter_keys",
    "lookup",
    "split_key",
]


@dataclass(frozen=True, slots=True)
class Leaf:
    """Terminal message string."""

    value: str


@dataclass(frozen=True, slots=True)
class Node:
    """Branch mapping key segments to subtrees.

    Attributes:
        children: Read-only mapping of segment to Leaf or Node
    """

    children: Mapping[str, MessageTree]


type MessageTree = Leaf | Node


def build_tree(messages: Mapping[str, Any]) -> Node:
    """Convert a nested plain mapping into a message tree.

    String values become leaves and mappings become nodes. Other values
    (numbers, None, lists) and non-string keys are dropped: a lookup through
    them misses, exactly as if they were absent.

    Args:
        messages: Nested string-keyed mapping (e.g., parsed JSON)

    Returns:
        Root Node of the converted tree

    Raises:
        CatalogError: If messages is not a mapping

    Example:
        >>> root = build_tree({"common": {"save": "Lagre"}, "version": 2})
        >>> sorted(root.children)
        ['common']
    """
    if not isinstance(messages, Mapping):
        msg = f"Message catalog must be a mapping, got {type(messages).__name__}"
        raise CatalogError(msg)
    return _build_node(messages)


def _build_node(messages: Mapping[Any, Any]) -> Node:
    children: dict[str, MessageTree] = {}
    for segment, value in messages.items():
        if not isinstance(segment, str):
            continue
        match value:
            case str():
                children[segment] = Leaf(value)
            case Mapping():
                children[segment] = _build_node(value)
            case _:
                pass
    return Node(MappingProxyType(children))


def split_key(key: str) -> tuple[str, ...]:
    """Split a dotted message key into its segments.

    Example:
        >>> split_key("booking.create.title")
        ('booking', 'create', 'title')
        >>> split_key("title")
        ('title',)
    """
    return tuple(key.split(KEY_SEPARATOR))


def lookup(tree: MessageTree | None, segments: Sequence[str]) -> str | None:
    """Resolve key segments against a tree.

    Every intermediate segment must resolve to a Node and the final segment
    to a Leaf. Case-sensitive. Never raises.

    Args:
        tree: Root of the tree (None behaves as an empty tree)
        segments: Key segments from split_key()

    Returns:
        Leaf string, or None if the key does not resolve to a leaf

    Example:
        >>> root = build_tree({"a": {"b": "X"}})
        >>> lookup(root, ("a", "b"))
        'X'
        >>> lookup(root, ("a",)) is None  # resolves to a node, not a leaf
        True
    """
    current = tree
    for segment in segments:
        match current:
            case Node(children=children) if segment in children:
                current = children[segment]
            case _:
                return None
    match current:
        case Leaf(value=value):
            return value
        case _:
            return None


def iter_keys(tree: MessageTree, prefix: str | None = None) -> Iterator[str]:
    """Yield the dotted key of every leaf in the tree, depth-first.

    Example:
        >>> list(iter_keys(build_tree({"a": {"b": "X", "c": "Y"}, "d": "Z"})))
        ['a.b', 'a.c', 'd']
    """
    match tree:
        case Leaf():
            yield prefix or ""
        case Node(children=children):
            for segment, child in children.items():
                key = segment if prefix is None else f"{prefix}{KEY_SEPARATOR}{segment}"
                yield from iter_keys(child, key)
