"""
Chain Evaluator
===============

Reduces a chain to a single fragment by folding sign-pair rules over
its fragments, oldest first.

RULES (prefix = running result, suffix = next fragment):
=======================================================
    PLAIN   + PLAIN    -> concatenation, PLAIN
    PLAIN   + NEGATED  -> prefix minus suffix at its end if it ends with
                          exactly that text, else prefix, PLAIN
    NEGATED + PLAIN    -> suffix minus prefix at its start if it starts
                          with exactly that text, else suffix, PLAIN
    NEGATED + NEGATED  -> concatenation, NEGATED

GUARANTEES:
- Pure and deterministic: identical chains evaluate identically
- Total: a strip that does not match is a no-op, never an error
- Iterative: chain length is not bounded by the recursion limit
- Every decision is traceable on request
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import logging
import os

from ..contracts.base import Fragment, Sign
from .chain import Chain


logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class EvaluatorConfig:
    """
    Evaluator options.

    Frozen: changing options means building a new config.
    """
    log_steps: bool = False
    record_trace: bool = False

    @classmethod
    def from_env(cls) -> EvaluatorConfig:
        """Read SUBTEXT_LOG_STEPS and SUBTEXT_RECORD_TRACE."""
        return cls(
            log_steps=_env_flag("SUBTEXT_LOG_STEPS"),
            record_trace=_env_flag("SUBTEXT_RECORD_TRACE"),
        )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


# =============================================================================
# TRACE TYPES
# =============================================================================

class StepRule(Enum):
    """Which row of the sign-pair table a step applied."""
    CONCAT = "concat"
    STRIP_SUFFIX = "strip_suffix"
    STRIP_PREFIX = "strip_prefix"
    NEGATED_CONCAT = "negated_concat"


@dataclass(frozen=True)
class EvaluationStep:
    """
    One fold step.

    `matched` is only meaningful for the two strip rules; it is None
    for concatenations.
    """
    prefix: Fragment
    suffix: Fragment
    rule: StepRule
    result: Fragment
    matched: Optional[bool] = None


@dataclass(frozen=True)
class EvaluationTrace:
    """Complete record of one evaluation."""
    initial: Fragment
    steps: Tuple[EvaluationStep, ...] = field(default_factory=tuple)

    @property
    def result(self) -> Fragment:
        if not self.steps:
            return self.initial
        return self.steps[-1].result

    @property
    def strips_applied(self) -> int:
        return sum(1 for step in self.steps if step.matched)


# =============================================================================
# STEP RULES
# =============================================================================

def _rule_for(prefix: Sign, suffix: Sign) -> StepRule:
    if prefix is Sign.PLAIN:
        return StepRule.CONCAT if suffix is Sign.PLAIN else StepRule.STRIP_SUFFIX
    return StepRule.STRIP_PREFIX if suffix is Sign.PLAIN else StepRule.NEGATED_CONCAT


def apply_step(prefix: Fragment, suffix: Fragment) -> EvaluationStep:
    """Combine the running prefix with the next fragment."""
    rule = _rule_for(prefix.sign, suffix.sign)

    if rule is StepRule.CONCAT:
        return EvaluationStep(
            prefix, suffix, rule, Fragment.plain(prefix.text + suffix.text)
        )

    if rule is StepRule.NEGATED_CONCAT:
        return EvaluationStep(
            prefix, suffix, rule, Fragment.negated(prefix.text + suffix.text)
        )

    if rule is StepRule.STRIP_SUFFIX:
        # str.endswith("") is True and stripping "" is a no-op, so the
        # empty removal-operand needs no special case
        matched = prefix.text.endswith(suffix.text)
        text = prefix.text[:len(prefix.text) - len(suffix.text)] if matched else prefix.text
        return EvaluationStep(prefix, suffix, rule, Fragment.plain(text), matched)

    # STRIP_PREFIX: the later plain operand wins
    matched = suffix.text.startswith(prefix.text)
    text = suffix.text[len(prefix.text):] if matched else suffix.text
    return EvaluationStep(prefix, suffix, rule, Fragment.plain(text), matched)


def combine_step(prefix: Fragment, suffix: Fragment) -> Fragment:
    return apply_step(prefix, suffix).result


# =============================================================================
# EVALUATOR
# =============================================================================

class Evaluator:
    """
    Folds chains into fragments.

    Holds no state between evaluations except `last_trace`, which is
    only populated when the config asks for it.
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        self._config = config or EvaluatorConfig()
        self.last_trace: Optional[EvaluationTrace] = None

    @property
    def config(self) -> EvaluatorConfig:
        return self._config

    def evaluate(self, chain: Chain) -> Fragment:
        """Reduce `chain` to one fragment."""
        if self._config.record_trace:
            trace = self.trace(chain)
            self.last_trace = trace
            return trace.result

        fragments = chain.fragments()
        result = fragments[0]
        for index, suffix in enumerate(fragments[1:], start=1):
            step = apply_step(result, suffix)
            self._log_step(index, step)
            result = step.result

        logger.debug(
            "Evaluated chain",
            extra={"fragment_count": len(fragments), "result_sign": result.sign.value},
        )
        return result

    def trace(self, chain: Chain) -> EvaluationTrace:
        """Evaluate `chain` and keep every step."""
        fragments = chain.fragments()
        steps: List[EvaluationStep] = []
        result = fragments[0]
        for index, suffix in enumerate(fragments[1:], start=1):
            step = apply_step(result, suffix)
            self._log_step(index, step)
            steps.append(step)
            result = step.result

        logger.debug(
            "Traced chain",
            extra={"fragment_count": len(fragments), "result_sign": result.sign.value},
        )
        return EvaluationTrace(initial=fragments[0], steps=tuple(steps))

    def _log_step(self, index: int, step: EvaluationStep):
        if not self._config.log_steps:
            return
        logger.debug(
            "Evaluation step",
            extra={
                "step": index,
                "rule": step.rule.value,
                "matched": step.matched,
                "result_sign": step.result.sign.value,
            },
        )


_default_evaluator = Evaluator()


def evaluate(chain: Chain) -> Fragment:
    """Reduce `chain` to one fragment with the default evaluator."""
    return _default_evaluator.evaluate(chain)
