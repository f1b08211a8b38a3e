"""Domain helpers built on top of the core algebra."""

from .serialization import (
    ChainEncoder,
    SerializationError,
    chain_from_dict,
    chain_to_dict,
    dumps,
    loads,
)

__all__ = [
    "ChainEncoder",
    "SerializationError",
    "chain_from_dict",
    "chain_to_dict",
    "dumps",
    "loads",
]
