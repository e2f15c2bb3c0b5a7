"""
Contract properties that every mutable container must satisfy.
"""

from collections import Counter

import pytest


class TestContainerContract:
    """Properties checked against each reference container."""

    @pytest.mark.parametrize("element", ["a", "zz", ""])
    def test_inserted_element_is_contained(self, container_cls, element):
        """Test contains() after a changing insert()."""
        container = container_cls(["m", "n"])

        if container.insert(element):
            assert container.contains(element)

    @pytest.mark.parametrize("elements", [[], ["a"], ["a", "b", "c"]])
    def test_emptiness_agrees(self, container_cls, elements):
        """Test is_empty(), size() and materialize() agree."""
        container = container_cls(elements)

        assert container.is_empty() == (container.size() == 0)
        assert container.is_empty() == (len(container.materialize()) == 0)

    def test_clear_is_idempotent(self, abc_container):
        """Test a second clear() removes nothing and leaves it empty."""
        abc_container.clear()
        assert abc_container.size() == 0

        assert not abc_container.remove_if(lambda _: True)
        abc_container.clear()
        assert abc_container.size() == 0

    def test_materialize_round_trip(self, container_cls):
        """Test re-inserting a copy reproduces the same multiset."""
        original = container_cls(["q", "b", "x", "a"])

        copy = container_cls()
        copy.insert_all(original.materialize())

        assert Counter(copy.materialize()) == Counter(original.materialize())

    def test_remove_all_then_contains_all(self, abc_container):
        """Test removed elements are no longer all contained."""
        targets = ["b", "z"]

        abc_container.remove_all(targets)

        assert not abc_container.contains_all(targets)
        assert not abc_container.contains("b")

    def test_retain_all_matches_remove_all_of_complement(self, container_cls):
        """Test retain_all(X) equals remove_all(C - X) on a copy."""
        elements = ["a", "b", "c", "d", "e"]
        keep = {"b", "d", "q"}
        retained = container_cls(elements)
        removed = container_cls(elements)

        retained.retain_all(keep)
        removed.remove_all([e for e in elements if e not in keep])

        assert retained.materialize() == removed.materialize()
        assert sorted(retained.materialize()) == ["b", "d"]

    def test_remove_all_scenario(self, abc_container):
        """Test {a, b, c} minus {b, d} leaves {a, c}."""
        assert abc_container.remove_all({"b", "d"})
        assert Counter(abc_container.materialize()) == Counter(["a", "c"])

    def test_clear_empty_scenario(self, container_cls):
        """Test clear() on an empty container."""
        container = container_cls()
        container.clear()
        assert container.size() == 0

    def test_size_matches_traversal(self, abc_container):
        """Test size() equals the length of a fresh traversal."""
        assert abc_container.size() == sum(1 for _ in abc_container.traverse())
