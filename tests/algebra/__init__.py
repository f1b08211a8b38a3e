"""
Algebra Tests Package

Example-based tests for the chain algebra, evaluator and serializers.

TEST AXIOMS:
=============
1. Immutability: no operation changes an existing chain
2. Determinism: same chain, same text
3. Totality: no chain makes evaluation fail
"""
