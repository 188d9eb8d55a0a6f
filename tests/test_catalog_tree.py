"""Tests for catalog/tree.py - Leaf/Node message trees and dotted-key lookup."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from nordlocale.catalog.tree import Leaf, Node, build_tree, iter_keys, lookup, split_key
from nordlocale.diagnostics import CatalogError

SEGMENTS = st.text(
    alphabet=st.characters(exclude_characters=".", exclude_categories=("Cs",)),
    min_size=1,
    max_size=8,
)


class TestSplitKey:
    """Test split_key pure segmentation."""

    def test_nested_key(self) -> None:
        """Dotted key splits into ordered segments."""
        assert split_key("booking.create.title") == ("booking", "create", "title")

    def test_single_segment(self) -> None:
        """Key without separator is one segment."""
        assert split_key("title") == ("title",)

    def test_empty_segments_preserved(self) -> None:
        """Consecutive separators produce empty segments, which never match."""
        assert split_key("a..b") == ("a", "", "b")

    @given(st.lists(SEGMENTS, min_size=1, max_size=5))
    def test_split_inverts_join(self, segments: list[str]) -> None:
        """split_key is the inverse of joining segments with '.'."""
        assert split_key(".".join(segments)) == tuple(segments)


class TestBuildTree:
    """Test conversion of plain mappings into Leaf/Node trees."""

    def test_strings_become_leaves(self) -> None:
        """String values become Leaf instances."""
        root = build_tree({"save": "Lagre"})
        assert root.children["save"] == Leaf("Lagre")

    def test_mappings_become_nodes(self) -> None:
        """Nested mappings become Node instances."""
        root = build_tree({"common": {"save": "Lagre"}})
        assert isinstance(root.children["common"], Node)

    def test_non_string_values_dropped(self) -> None:
        """Numbers, None, and lists are not representable and are dropped."""
        root = build_tree({"version": 2, "nothing": None, "list": ["a"], "ok": "yes"})
        assert set(root.children) == {"ok"}

    def test_non_string_keys_dropped(self) -> None:
        """Only string keys are kept."""
        root = build_tree({1: "one", "two": "to"})
        assert set(root.children) == {"two"}

    def test_non_mapping_root_raises(self) -> None:
        """A root that is not a mapping is a catalog error."""
        with pytest.raises(CatalogError, match="must be a mapping"):
            build_tree(["not", "a", "mapping"])  # type: ignore[arg-type]

    def test_catalog_error_is_type_error(self) -> None:
        """CatalogError can be caught as TypeError."""
        with pytest.raises(TypeError):
            build_tree("text")  # type: ignore[arg-type]

    def test_children_read_only(self) -> None:
        """Built nodes cannot be mutated through their children mapping."""
        root = build_tree({"a": "A"})
        with pytest.raises(TypeError):
            root.children["b"] = Leaf("B")  # type: ignore[index]

    def test_source_mutation_not_observed(self) -> None:
        """Mutating the source mapping after building does not affect the tree."""
        source = {"a": {"b": "X"}}
        root = build_tree(source)
        source["a"]["b"] = "changed"
        assert lookup(root, ("a", "b")) == "X"


class TestLookup:
    """Test segment-by-segment resolution."""

    @pytest.fixture
    def root(self) -> Node:
        return build_tree({
            "booking": {"create": {"title": "Opprett ny reservasjon"}},
            "empty": "",
        })

    def test_leaf_found(self, root: Node) -> None:
        """Full path to a leaf returns its string."""
        assert lookup(root, ("booking", "create", "title")) == "Opprett ny reservasjon"

    def test_node_is_not_a_value(self, root: Node) -> None:
        """A path ending on a node misses."""
        assert lookup(root, ("booking", "create")) is None

    def test_descending_through_leaf_misses(self, root: Node) -> None:
        """A path continuing past a leaf misses."""
        assert lookup(root, ("booking", "create", "title", "extra")) is None

    def test_missing_segment(self, root: Node) -> None:
        """Unknown segment misses without raising."""
        assert lookup(root, ("booking", "delete")) is None

    def test_case_sensitive(self, root: Node) -> None:
        """Segments match case-sensitively."""
        assert lookup(root, ("Booking", "create", "title")) is None

    def test_empty_string_leaf_found(self, root: Node) -> None:
        """An empty string is a value, not a miss."""
        assert lookup(root, ("empty",)) == ""

    def test_none_tree(self) -> None:
        """None behaves as an empty tree."""
        assert lookup(None, ("a",)) is None

    @given(st.lists(SEGMENTS, min_size=1, max_size=5), st.text(max_size=20))
    def test_built_path_always_resolves(self, segments: list[str], value: str) -> None:
        """A leaf placed at any path resolves through that path."""
        messages: dict[str, object] = {segments[-1]: value}
        for segment in reversed(segments[:-1]):
            messages = {segment: messages}
        assert lookup(build_tree(messages), tuple(segments)) == value


class TestIterKeys:
    """Test dotted key enumeration."""

    def test_depth_first_order(self) -> None:
        """Keys are yielded depth-first in insertion order."""
        root = build_tree({"a": {"b": "X", "c": {"d": "Y"}}, "e": "Z"})
        assert list(iter_keys(root)) == ["a.b", "a.c.d", "e"]

    def test_empty_tree(self) -> None:
        """Empty tree has no keys."""
        assert list(iter_keys(build_tree({}))) == []

    def test_empty_segment_parent_kept(self) -> None:
        """An empty-string parent segment keeps its separator."""
        root = build_tree({"": {"b": "x"}, "a": {"": "y"}})
        assert list(iter_keys(root)) == [".b", "a."]

    @given(st.lists(st.sampled_from(["", "a", "b"]), min_size=1, max_size=4))
    def test_yielded_keys_resolve(self, segments: list[str]) -> None:
        """Every yielded key resolves back to its leaf through split_key."""
        messages: dict[str, object] = {segments[-1]: "leaf"}
        for segment in reversed(segments[:-1]):
            messages = {segment: messages}
        root = build_tree(messages)
        for key in iter_keys(root):
            assert lookup(root, split_key(key)) == "leaf"
