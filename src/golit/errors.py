"""Exceptions raised while turning values into Go literals."""
from __future__ import annotations

__all__ = (
    "LiteralError",
    "InvalidValueKind",
    "UnsupportedCallableError",
    "CyclicValueError",
)


class LiteralError(Exception):
    "Base class for all the errors raised during a translation."


class InvalidValueKind(LiteralError, TypeError):
    """The value has no kind.

    This is raised for :data:`golit.values.INVALID` and for any object that
    isn't one of the :mod:`golit.values` variants.
    """


class UnsupportedCallableError(LiteralError, TypeError):
    "A non-nil function was found: Go has no literal syntax for behaviour."


class CyclicValueError(LiteralError, ValueError):
    "The value graph refers back to itself."
