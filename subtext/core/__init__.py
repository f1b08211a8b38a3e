"""
Core Algebra

Chain construction and combination, evaluation, materialization.

DEPENDENCY ORDER:
=================
chain -> evaluator -> materializer
"""

from .chain import Chain, add, negate, prepend, sub
from .evaluator import (
    EvaluationStep,
    EvaluationTrace,
    Evaluator,
    EvaluatorConfig,
    StepRule,
    apply_step,
    combine_step,
    evaluate,
)
from .materializer import materialize, to_text

__all__ = [
    "Chain",
    "add",
    "negate",
    "prepend",
    "sub",
    "EvaluationStep",
    "EvaluationTrace",
    "Evaluator",
    "EvaluatorConfig",
    "StepRule",
    "apply_step",
    "combine_step",
    "evaluate",
    "materialize",
    "to_text",
]
