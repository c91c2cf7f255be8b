"""Map a sequence of values through a sequence of transformations.

Unlike :func:`map`, which applies one function to every element, the helpers
here apply the ``i``-th transformation to the ``i``-th element. Transformations
are not chained; exactly one is used per element.

>>> code = [lambda x: x + 1, lambda x: x + 2, lambda x: x + 3, lambda x: x + 4]
>>> maplist(code, range(1, 10))
[2, 4, 6, 8]
>>> mapcycle(code, range(1, 10))
[2, 4, 6, 8, 6, 8, 10, 12, 10]
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Tuple

from .errors import EmptyTransformationsError
from .types import NOTHING, Slot, TransformEntry

logger = logging.getLogger(__name__)


def _as_slots(transforms: Iterable[TransformEntry]) -> Tuple[Slot, ...]:
    return tuple(Slot.wrap(entry) for entry in transforms)


def _apply(select: Callable[[int], Slot], values: Iterable[Any]) -> List[Any]:
    """Apply ``select(position)`` to each element in order, dropping ``NOTHING``."""

    results: List[Any] = []
    for position, value in enumerate(values):
        result = select(position).apply(value)
        if result is not NOTHING:
            results.append(result)
    return results


def maplist(transforms: Iterable[TransformEntry], values: Iterable[Any]) -> List[Any]:
    """Map ``values`` through ``transforms`` position by position.

    The first transformation is used for the first element, the second for the
    second, and so on. Once the transformations are exhausted, the remaining
    elements produce no output. A transformation that returns
    :data:`~maplist.types.NOTHING` contributes nothing to the result, and a
    ``None`` entry (or an absent :class:`~maplist.types.Slot`) behaves the same
    way for its position.
    """

    slots = _as_slots(transforms)
    absent = Slot.absent()

    def select(position: int) -> Slot:
        return slots[position] if position < len(slots) else absent

    results = _apply(select, values)
    logger.debug("maplist: %d transformations produced %d values", len(slots), len(results))
    return results


def mapcycle(transforms: Iterable[TransformEntry], values: Iterable[Any]) -> List[Any]:
    """Like :func:`maplist`, but cycle through ``transforms`` as often as needed.

    Raises
    ------
    EmptyTransformationsError
        If ``transforms`` is empty. The check happens before any element of
        ``values`` is consumed.
    """

    slots = _as_slots(transforms)
    if not slots:
        raise EmptyTransformationsError()
    count = len(slots)

    def select(position: int) -> Slot:
        return slots[position % count]

    results = _apply(select, values)
    logger.debug("mapcycle: %d transformations produced %d values", count, len(results))
    return results


__all__ = ["maplist", "mapcycle"]
