"""
Base Contracts and Shared Types

These are the leaf types of the algebra: the sign tag and the signed
text fragment. Everything else is built out of them.

BOUNDARY ENFORCEMENT:
=====================
- This module imports nothing from the rest of the package
- All types are frozen for immutability guarantee
- Validation happens once, at construction
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


# =============================================================================
# SIGN
# =============================================================================

class Sign(Enum):
    """
    Two-valued tag on a fragment.

    PLAIN fragments are added; NEGATED fragments are removal-operands.
    Flipping twice is identity.
    """
    PLAIN = "plain"
    NEGATED = "negated"

    def flipped(self) -> Sign:
        if self is Sign.PLAIN:
            return Sign.NEGATED
        return Sign.PLAIN

    def __neg__(self) -> Sign:
        return self.flipped()

    @property
    def is_negated(self) -> bool:
        return self is Sign.NEGATED


# =============================================================================
# FRAGMENT
# =============================================================================

@dataclass(frozen=True)
class Fragment:
    """
    Immutable, signed piece of text.

    Equality is structural: same text, same sign.
    """
    text: str
    sign: Sign = Sign.PLAIN

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(
                f"Fragment text must be a str, got {type(self.text).__name__}"
            )
        if not isinstance(self.sign, Sign):
            raise TypeError(
                f"Fragment sign must be a Sign, got {type(self.sign).__name__}"
            )

    @staticmethod
    def plain(text: str) -> Fragment:
        return Fragment(text=text, sign=Sign.PLAIN)

    @staticmethod
    def negated(text: str) -> Fragment:
        return Fragment(text=text, sign=Sign.NEGATED)

    @property
    def is_negated(self) -> bool:
        return self.sign.is_negated

    def flipped(self) -> Fragment:
        """Return the same text with the opposite sign."""
        return Fragment(text=self.text, sign=self.sign.flipped())

    def __repr__(self) -> str:
        marker = "-" if self.is_negated else "+"
        return f"{marker}{self.text!r}"
