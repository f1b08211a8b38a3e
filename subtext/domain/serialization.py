"""
Chain Serialization

Stores the exact structure of a chain (every signed fragment), not just
its evaluated text, so a stored chain evaluates identically on reload.

FORMAT:
    {"fragments": [{"text": "...", "sign": "plain" | "negated"}, ...]}

Fragments are listed in storage order, newest first, matching how the
chain links them.
"""

import json
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, Optional

from ..contracts.base import Fragment, Sign
from ..core.chain import Chain


class SerializationError(ValueError):
    """Raised when serialized data does not describe a valid chain."""
    pass


class ChainEncoder(json.JSONEncoder):
    """
    JSON Encoder for algebra values.

    RULES:
    1. Enums MUST use their .value.
    2. Chains MUST use chain_to_dict (storage order, full structure).
    3. Other dataclasses (fragments, trace steps) go through asdict.
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Chain):
            return chain_to_dict(obj)
        if isinstance(obj, Enum):
            return obj.value
        if hasattr(obj, "__dataclass_fields__"):
            return _enum_values(asdict(obj))

        return super().default(obj)


def _enum_values(value: Any) -> Any:
    # asdict leaves enum members in place
    if isinstance(value, dict):
        return {k: _enum_values(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_enum_values(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value


def fragment_to_dict(fragment: Fragment) -> Dict[str, str]:
    return {"text": fragment.text, "sign": fragment.sign.value}


def fragment_from_dict(data: Any) -> Fragment:
    if not isinstance(data, dict):
        raise SerializationError(f"Fragment entry must be an object, got {type(data).__name__}")
    if "text" not in data:
        raise SerializationError("Fragment entry is missing 'text'")
    text = data["text"]
    if not isinstance(text, str):
        raise SerializationError(f"Fragment text must be a string, got {type(text).__name__}")
    try:
        sign = Sign(data.get("sign", Sign.PLAIN.value))
    except ValueError:
        raise SerializationError(f"Unknown fragment sign: {data.get('sign')!r}") from None
    return Fragment(text=text, sign=sign)


def chain_to_dict(chain: Chain) -> Dict[str, List[Dict[str, str]]]:
    return {"fragments": [fragment_to_dict(node.head) for node in chain.nodes()]}


def chain_from_dict(data: Any) -> Chain:
    """Rebuild a chain from `chain_to_dict` output."""
    if not isinstance(data, dict) or "fragments" not in data:
        raise SerializationError("Chain data must be an object with a 'fragments' list")
    entries = data["fragments"]
    if not isinstance(entries, list):
        raise SerializationError("'fragments' must be a list")
    if not entries:
        raise SerializationError("A chain needs at least one fragment")

    node: Optional[Chain] = None
    for entry in reversed(entries):
        node = Chain(head=fragment_from_dict(entry), tail=node)
    return node


def dumps(value: Any, **kwargs) -> str:
    return json.dumps(value, cls=ChainEncoder, **kwargs)


def loads(payload: str) -> Chain:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return chain_from_dict(data)
