"""
Chain Structure Tests

Verifies the persistent list: splice position, structural sharing,
shallow negation and the operator surface.
"""

import pytest
from dataclasses import FrozenInstanceError

from subtext import Chain, Fragment, Sign, add, negate, prepend, sub

from .fixtures import chain_of, singleton


# =============================================================================
# PREPEND
# =============================================================================

class TestPrepend:

    def test_singleton_receiver_links_other_directly(self):
        a = singleton("aa")
        b = singleton("bb", negated=True)

        result = prepend(a, b)

        expected = Chain(
            head=Fragment.plain("aa"),
            tail=Chain(head=Fragment.negated("bb")),
        )
        assert result == expected
        assert result.tail is b

    def test_prepend_onto_combined_chain(self):
        ab = prepend(singleton("aa"), singleton("bb", negated=True))
        c = singleton("cc")

        result = prepend(c, ab)

        expected = Chain(
            head=Fragment.plain("cc"),
            tail=Chain(
                head=Fragment.plain("aa"),
                tail=Chain(head=Fragment.negated("bb")),
            ),
        )
        assert result == expected

    def test_receiver_spine_rebuilt_other_shared(self):
        receiver = chain_of("x", "y", "z")
        other = chain_of("p", "q")

        result = prepend(receiver, other)
        nodes = list(result.nodes())

        assert len(nodes) == 5
        assert nodes[3] is other
        # receiver nodes are new objects
        assert all(n is not r for n, r in zip(nodes[:3], receiver.nodes()))

    def test_logical_order_other_then_receiver(self):
        result = prepend(chain_of("c", "d"), chain_of("a", "b"))
        assert [f.text for f in result.fragments()] == ["a", "b", "c", "d"]


# =============================================================================
# ADD / SUB / NEGATE
# =============================================================================

class TestAlgebra:

    def test_add_orders_left_then_right(self):
        result = add(chain_of("a", "b"), chain_of("c"))
        assert [f.text for f in result.fragments()] == ["a", "b", "c"]

    def test_add_shares_left_operand(self):
        left = chain_of("a", "b")
        result = add(left, singleton("c"))
        assert result.tail is left

    def test_sub_appends_negated_operand(self):
        result = sub(singleton("abc"), singleton("c"))
        assert result.fragments() == (Fragment.plain("abc"), Fragment.negated("c"))

    def test_negate_flips_only_head(self):
        chain = chain_of("a", "b")
        negated = negate(chain)

        assert negated.head == Fragment.negated("b")
        assert negated.tail is chain.tail
        assert negated.tail.head.sign is Sign.PLAIN

    def test_double_negation_is_structural_identity(self):
        chain = chain_of("a", "b", "c")
        assert negate(negate(chain)) == chain

    def test_operands_untouched(self):
        a = chain_of("a", "b")
        b = chain_of("c")
        snapshot_a = a.fragments()
        snapshot_b = b.fragments()

        sub(add(a, b), a)

        assert a.fragments() == snapshot_a
        assert b.fragments() == snapshot_b


# =============================================================================
# STRUCTURE
# =============================================================================

class TestChainStructure:

    def test_is_frozen(self):
        chain = singleton("a")
        with pytest.raises(FrozenInstanceError):
            chain.tail = singleton("b")

    def test_from_fragments_requires_one(self):
        with pytest.raises(ValueError):
            Chain.from_fragments()

    def test_rejects_bad_head(self):
        with pytest.raises(TypeError):
            Chain(head="not a fragment")

    def test_rejects_bad_tail(self):
        with pytest.raises(TypeError):
            Chain(head=Fragment.plain("a"), tail="b")

    def test_len_counts_fragments(self):
        assert len(singleton("a")) == 1
        assert len(chain_of("a", "b", "c")) == 3

    def test_equality_is_structural_not_semantic(self):
        # both evaluate to "ab"
        left = chain_of("a", "b")
        right = singleton("ab")
        assert str(left) == str(right)
        assert left != right

    def test_equal_chains_hash_equal(self):
        assert hash(chain_of("a", "b")) == hash(chain_of("a", "b"))
        assert len({chain_of("a", "b"), chain_of("a", "b")}) == 1

    def test_repr_in_logical_order(self):
        chain = singleton("a") - "b"
        assert repr(chain) == "Chain(+'a', -'b')"

    def test_long_chain_has_no_recursion_limit(self):
        chain = singleton("a")
        for _ in range(5000):
            chain = chain + "a"
        other = singleton("a")
        for _ in range(5000):
            other = other + "a"

        assert len(chain) == 5001
        assert chain == other
        assert hash(chain) == hash(other)
        assert len(str(prepend(chain, other))) == 10002


# =============================================================================
# OPERATOR SURFACE
# =============================================================================

class TestOperators:

    def test_add_str(self):
        assert str(singleton("a") + "b") == "ab"

    def test_radd_str(self):
        assert str("a" + singleton("b")) == "ab"

    def test_sub_str(self):
        assert str(singleton("ab") - "b") == "a"

    def test_rsub_str(self):
        assert str("ab" - singleton("b")) == "a"

    def test_neg(self):
        assert (-singleton("a")).head == Fragment.negated("a")

    def test_operators_match_functions(self):
        a, b = singleton("ab"), singleton("b")
        assert a + b == add(a, b)
        assert a - b == sub(a, b)
        assert -a == negate(a)

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            singleton("a") + 3
        with pytest.raises(TypeError):
            3 - singleton("a")
