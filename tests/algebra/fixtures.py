"""
Shared chains for algebra tests.
"""

from subtext import Chain, Fragment


PROMISE = "I promise "
PROMISE_MATHS = "I promise I love maths"
MATHS = "maths"
FERRIS = "cute rustaceans such as ferris"


def chain_of(*texts: str) -> Chain:
    """Plain chain whose logical order is `texts`."""
    return Chain.from_fragments(*(Fragment.plain(t) for t in texts))


def singleton(text: str, negated: bool = False) -> Chain:
    if negated:
        return Chain(head=Fragment.negated(text))
    return Chain(head=Fragment.plain(text))
