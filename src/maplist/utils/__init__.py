"""Utility helpers for the :mod:`maplist` package."""

from .logging import setup_logging

__all__ = ["setup_logging"]
