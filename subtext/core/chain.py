"""
Persistent Fragment Chain
=========================

A chain is an immutable, singly-linked list of signed fragments.

STORAGE ORDER:
- `head` is the newest fragment
- `tail` points at the older state the head was built on
- the oldest fragment sits at the end of the list

GUARANTEES:
- A chain is never mutated after construction
- A chain always holds at least one fragment
- Combining rebuilds only the receiver's spine; the other operand is
  shared by reference, never copied
- Negation is shallow: only the head fragment's sign flips, the tail is
  shared unchanged
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from ..contracts.base import Fragment, Sign


Operand = Union["Chain", str]


@dataclass(frozen=True, eq=False)
class Chain:
    """
    One node of a persistent chain.

    Structural equality compares fragments node by node in storage
    order. Two chains that are unequal here may still evaluate to the
    same text.
    """
    head: Fragment
    tail: Optional[Chain] = None

    def __post_init__(self):
        if not isinstance(self.head, Fragment):
            raise TypeError(
                f"Chain head must be a Fragment, got {type(self.head).__name__}"
            )
        if self.tail is not None and not isinstance(self.tail, Chain):
            raise TypeError(
                f"Chain tail must be a Chain or None, got {type(self.tail).__name__}"
            )

    @staticmethod
    def from_text(text: str) -> Chain:
        """Create a singleton chain holding one plain fragment."""
        return Chain(head=Fragment.plain(text))

    @staticmethod
    def from_fragments(*fragments: Fragment) -> Chain:
        """
        Build a chain from fragments given oldest-first.

        Raises ValueError when called with no fragments, since an empty
        chain is not representable.
        """
        if not fragments:
            raise ValueError("A chain needs at least one fragment")
        node: Optional[Chain] = None
        for fragment in fragments:
            node = Chain(head=fragment, tail=node)
        return node

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def nodes(self) -> Iterator[Chain]:
        """Yield nodes in storage order, head first."""
        node: Optional[Chain] = self
        while node is not None:
            yield node
            node = node.tail

    def fragments(self) -> Tuple[Fragment, ...]:
        """Fragments in logical order, oldest first."""
        return tuple(reversed([node.head for node in self.nodes()]))

    @property
    def sign(self) -> Sign:
        return self.head.sign

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    # -------------------------------------------------------------------------
    # Structural equality
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chain):
            return NotImplemented
        left: Optional[Chain] = self
        right: Optional[Chain] = other
        while left is not None and right is not None:
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail
        return left is None and right is None

    def __hash__(self) -> int:
        return hash(tuple(node.head for node in self.nodes()))

    def __repr__(self) -> str:
        inner = ", ".join(repr(f) for f in self.fragments())
        return f"Chain({inner})"

    # -------------------------------------------------------------------------
    # Operator sugar
    # -------------------------------------------------------------------------

    def __neg__(self) -> Chain:
        return negate(self)

    def __add__(self, other: Operand) -> Chain:
        rhs = _lift(other)
        if rhs is None:
            return NotImplemented
        return add(self, rhs)

    def __radd__(self, other: Operand) -> Chain:
        lhs = _lift(other)
        if lhs is None:
            return NotImplemented
        return add(lhs, self)

    def __sub__(self, other: Operand) -> Chain:
        rhs = _lift(other)
        if rhs is None:
            return NotImplemented
        return sub(self, rhs)

    def __rsub__(self, other: Operand) -> Chain:
        lhs = _lift(other)
        if lhs is None:
            return NotImplemented
        return sub(lhs, self)

    def __str__(self) -> str:
        from .materializer import to_text
        return to_text(self)


def _lift(value: object) -> Optional[Chain]:
    if isinstance(value, Chain):
        return value
    if isinstance(value, str):
        return Chain.from_text(value)
    return None


# =============================================================================
# CHAIN ALGEBRA
# =============================================================================

def prepend(chain: Chain, other: Chain) -> Chain:
    """
    Splice `other` in at the end of `chain`.

    Only the spine of `chain` is rebuilt; `other` becomes the new
    innermost tail by reference. The logical order of the result is
    `other`'s fragments followed by `chain`'s.
    """
    spine = [node.head for node in chain.nodes()]
    result = other
    for head in reversed(spine):
        result = Chain(head=head, tail=result)
    return result


def negate(chain: Chain) -> Chain:
    """Flip the head fragment's sign. The tail is shared, not copied."""
    return Chain(head=chain.head.flipped(), tail=chain.tail)


def add(a: Chain, b: Chain) -> Chain:
    """`a` happened, then `b`."""
    return prepend(b, a)


def sub(a: Chain, b: Chain) -> Chain:
    return add(a, negate(b))
