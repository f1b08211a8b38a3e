"""
Contracts Module

Leaf value types shared by every other module. Chains, the evaluator
and the serializers consume only these.

DESIGN PRINCIPLES:
==================
1. All contract types are immutable (frozen dataclasses, enums)
2. No behavior beyond construction checks and sign flipping
3. No dependencies on other modules of the package
"""

from .base import Fragment, Sign

__all__ = ["Fragment", "Sign"]
