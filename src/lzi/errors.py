from __future__ import annotations

"""Exception hierarchy shared by the ``lzi`` construction helpers."""

import typing as t


class LziError(Exception):
    """Base error for everything raised by ``lzi``."""


class OnceCellError(LziError):
    """Raised when a :class:`~lzi.once.OnceCell` cannot produce its value.

    This happens when an empty cell is read without a factory, or when the
    factory re-enters the cell it is initialising.
    """

    def __init__(self, message: str, name: t.Optional[str] = None):
        self.name = name
        if name: message = f'[{name}] {message}'
        super().__init__(message)


class UnsupportedStyleError(LziError, ValueError):
    """Raised by :func:`~lzi.factories.abstract.new_furniture_factory`."""

    def __init__(self, style: str):
        self.style = style
        super().__init__(f"Style {style} is not supported")


__all__ = ["LziError", "OnceCellError", "UnsupportedStyleError"]
