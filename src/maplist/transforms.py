"""Ready-made element transformations and a registry of them by name."""

from __future__ import annotations

import codecs
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import UnknownTransformError
from .types import NOTHING, Transform


def identity(value: Any) -> Any:
    return value


def drop(value: Any) -> Any:
    """Filter the element out of the result."""

    return NOTHING


def rot13(value: str) -> str:
    """Rotate the ASCII letters of ``value`` by 13 places."""

    return codecs.encode(value, "rot13")


def upper(value: str) -> str:
    return value.upper()


def lower(value: str) -> str:
    return value.lower()


def constant(result: Any) -> Transform:
    """Return a transformation that ignores its input and yields ``result``."""

    def _constant(value: Any) -> Any:
        return result

    return _constant


def lookup(table: Mapping[Any, Any], default: Any = NOTHING) -> Transform:
    """Return a transformation mapping each element through ``table``.

    Keys missing from ``table`` map to ``default``, which drops the element
    unless another default is given.
    """

    def _lookup(value: Any) -> Any:
        return table.get(value, default)

    return _lookup


REGISTRY: Dict[str, Transform] = {
    "identity": identity,
    "drop": drop,
    "rot13": rot13,
    "upper": upper,
    "lower": lower,
}


def resolve(name: str) -> Transform:
    """Return the registered transformation called ``name``."""

    try:
        return REGISTRY[name]
    except KeyError:
        raise UnknownTransformError(name) from None


def resolve_all(names: Iterable[Optional[str]]) -> List[Optional[Transform]]:
    """Resolve ``names`` in order; ``None`` stays ``None`` (an absent slot)."""

    return [None if name is None else resolve(name) for name in names]


__all__ = [
    "identity",
    "drop",
    "rot13",
    "upper",
    "lower",
    "constant",
    "lookup",
    "REGISTRY",
    "resolve",
    "resolve_all",
]
