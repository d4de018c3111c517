"""Unit tests for id-based predicates."""

import pytest

from hierarchy_filter.predicates.base_predicates import BaseNodePredicate
from hierarchy_filter.predicates.id_predicates import DivisibleByPredicate, NodeIdSetPredicate


class TestNodeIdSetPredicate:
    def test_allow_list(self):
        predicate = NodeIdSetPredicate([1, 3, 5])

        assert predicate.accepts(3)
        assert not predicate.accepts(4)
        assert predicate(5)

    def test_deny_list(self):
        predicate = NodeIdSetPredicate([1, 3, 5], include=False)

        assert not predicate.accepts(3)
        assert predicate.accepts(4)

    def test_empty_allow_list_rejects_everything(self):
        assert not NodeIdSetPredicate([]).accepts(0)

    def test_empty_deny_list_accepts_everything(self):
        assert NodeIdSetPredicate([], include=False).accepts(0)

    def test_ids_are_copied(self):
        ids = [1]
        predicate = NodeIdSetPredicate(ids)
        ids.append(2)

        assert predicate.node_ids == frozenset({1})

    def test_accepts_generators(self):
        predicate = NodeIdSetPredicate(n * n for n in range(4))
        assert predicate.node_ids == frozenset({0, 1, 4, 9})

    def test_repr(self):
        assert repr(NodeIdSetPredicate([3, 1])) == "NodeIdSetPredicate([1, 3], include=True)"


class TestDivisibleByPredicate:
    def test_multiples(self):
        predicate = DivisibleByPredicate(4)

        assert [n for n in range(1, 13) if predicate(n)] == [4, 8, 12]

    def test_zero_and_negative_ids(self):
        predicate = DivisibleByPredicate(3)

        assert predicate.accepts(0)
        assert predicate.accepts(-6)
        assert not predicate.accepts(-7)

    def test_negative_divisor(self):
        assert DivisibleByPredicate(-2).accepts(4)

    def test_zero_divisor_is_rejected(self):
        with pytest.raises(ValueError, match="Divisor cannot be zero"):
            DivisibleByPredicate(0)

    def test_repr(self):
        assert repr(DivisibleByPredicate(5)) == "DivisibleByPredicate(5)"


def test_base_predicate_is_abstract():
    with pytest.raises(TypeError):
        BaseNodePredicate()


def test_subclass_is_callable():
    class Positive(BaseNodePredicate):
        def accepts(self, node_id):
            return node_id > 0

    positive = Positive()
    assert positive(1) is True
    assert positive(-1) is False
