"""Shared types for :mod:`maplist`.

Transformations signal "no output for this element" by returning the
:data:`NOTHING` sentinel, which keeps ``None`` available as an ordinary value.
Positions in a transformation sequence are wrapped in :class:`Slot` so that
"no transformation here" is an explicit state rather than a falsy entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union


class _Nothing:
    """Type of the :data:`NOTHING` sentinel."""

    _instance: Optional["_Nothing"] = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self) -> str:
        return "NOTHING"


NOTHING = _Nothing()

Transform = Callable[[Any], Any]
TransformEntry = Union[Transform, "Slot", None]


@dataclass(frozen=True)
class Slot:
    """One position of a transformation sequence, present or absent."""

    fn: Optional[Transform] = None

    @classmethod
    def of(cls, fn: Transform) -> "Slot":
        if fn is None:
            raise TypeError("Slot.of() needs a transformation; use Slot.absent()")
        return cls(fn)

    @classmethod
    def absent(cls) -> "Slot":
        return _ABSENT

    @classmethod
    def wrap(cls, entry: TransformEntry) -> "Slot":
        """Return ``entry`` as a slot; ``None`` marks an absent position."""

        if isinstance(entry, Slot):
            return entry
        if entry is None:
            return _ABSENT
        return cls(entry)

    @property
    def present(self) -> bool:
        return self.fn is not None

    def apply(self, value: Any) -> Any:
        if self.fn is None:
            return NOTHING
        return self.fn(value)


_ABSENT = Slot()


__all__ = ["NOTHING", "Slot", "Transform", "TransformEntry"]
