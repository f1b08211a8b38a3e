"""
Materializer

Turns an evaluated fragment into plain output text. A negated result
was never matched against anything additive, so it collapses to "".
"""

from __future__ import annotations
from typing import Optional

from ..contracts.base import Fragment
from .chain import Chain
from .evaluator import Evaluator, evaluate


def materialize(fragment: Fragment) -> str:
    if fragment.is_negated:
        return ""
    return fragment.text


def to_text(chain: Chain, evaluator: Optional[Evaluator] = None) -> str:
    """Evaluate `chain` and materialize the result."""
    if evaluator is None:
        return materialize(evaluate(chain))
    return materialize(evaluator.evaluate(chain))
