"""Exception types raised by :mod:`maplist`."""

from __future__ import annotations


class MapListError(Exception):
    """Base class for errors raised by the library itself."""


class EmptyTransformationsError(MapListError, ValueError, ZeroDivisionError):
    """Raised when cycling through an empty transformation sequence.

    Selecting transformation ``i % 0`` is undefined, so the call is rejected
    before any input is consumed. The class derives from both ``ValueError``
    and ``ZeroDivisionError`` so either can be caught.
    """

    def __init__(self, message: str = "mapcycle requires at least one transformation") -> None:
        super().__init__(message)


class UnknownTransformError(MapListError, KeyError):
    """Raised when a transformation name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown transformation '{self.name}'"


class ConfigError(MapListError, ValueError):
    """Raised for malformed configuration documents."""


__all__ = [
    "MapListError",
    "EmptyTransformationsError",
    "UnknownTransformError",
    "ConfigError",
]
