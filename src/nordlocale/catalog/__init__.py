"""Message catalog package.

Submodules:
    tree    - Leaf/Node tagged-union message tree and dotted-key lookup
    store   - MessageCatalog (replace-on-write tree per locale)
    loading - MessageLoader protocol, LoadResult

Python 3.13+. Zero external dependencies.
"""

from .loading import LoadResult, MessageLoader
from .store import MessageCatalog
from .tree import Leaf, MessageTree, Node, build_tree, iter_keys, lookup, split_key

__all__ = [
    "Leaf",
    "LoadResult",
    "MessageCatalog",
    "MessageLoader",
    "MessageTree",
    "Node",
    "build_tree",
    "iter_keys",
    "lookup",
    "split_key",
]
