"""maplist
=======

Map lists through a list of transformations, not just one.

:func:`maplist` pairs the ``i``-th transformation with the ``i``-th element and
stops producing output once the transformations run out; :func:`mapcycle`
cycles through the transformations as often as needed.
"""

from .errors import ConfigError, EmptyTransformationsError, MapListError, UnknownTransformError
from .functional import mapcycle, maplist
from .types import NOTHING, Slot

__version__ = "1.122"

__all__ = [
    "maplist",
    "mapcycle",
    "NOTHING",
    "Slot",
    "MapListError",
    "EmptyTransformationsError",
    "UnknownTransformError",
    "ConfigError",
]
