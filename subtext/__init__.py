"""
subtext: strings you can subtract

Values are persistent chains of signed text fragments. `+` appends,
`-` appends a negated fragment, and nothing is computed until the chain
is evaluated:

    >>> from subtext import Chain
    >>> d = Chain.from_text("I promise ")
    >>> str(-d + "I promise I love maths" - "maths" + "cute rustaceans such as ferris")
    'I love cute rustaceans such as ferris'

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Sign and Fragment, the immutable leaf values

2. CORE (core/)
   - Chain: persistent linked list, combine and negate
   - Evaluator: folds a chain into one fragment
   - Materializer: fragment to output text

3. DOMAIN (domain/)
   - Serialization of chain structure to dicts and JSON

CONSTRAINTS ENFORCED:
=====================
- Immutability-first: chains and fragments are frozen
- Structural sharing: combining never copies the other operand
- Deterministic: identical chains always evaluate identically
- Total: no input makes combine, negate or evaluate fail
"""

from .contracts import Fragment, Sign
from .core import (
    Chain,
    EvaluationStep,
    EvaluationTrace,
    Evaluator,
    EvaluatorConfig,
    StepRule,
    add,
    combine_step,
    evaluate,
    materialize,
    negate,
    prepend,
    sub,
    to_text,
)
from .domain import SerializationError, chain_from_dict, chain_to_dict, dumps, loads

__version__ = "0.1.0"

__all__ = [
    "Fragment",
    "Sign",
    "Chain",
    "EvaluationStep",
    "EvaluationTrace",
    "Evaluator",
    "EvaluatorConfig",
    "StepRule",
    "add",
    "combine_step",
    "evaluate",
    "materialize",
    "negate",
    "prepend",
    "sub",
    "to_text",
    "SerializationError",
    "chain_from_dict",
    "chain_to_dict",
    "dumps",
    "loads",
]
