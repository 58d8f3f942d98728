r"""``golit.imports``: Import accumulation
=========================================

An :class:`ImportSet` collects the packages a generated literal refers to::

    >>> imports = ImportSet(["app/models"])
    >>> imports.add("encoding/json")
    >>> imports.generate().splitlines()
    ['import (', '\t"app/models"', '\t"encoding/json"', ')']

Paths are printed in sorted order so the same set always renders to the same
text.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator

__all__ = ("ImportSet",)

logger = logging.getLogger(__name__)


class ImportSet:
    """A growing set of Go import paths.

    Paths can only be added. The set is not safe to share between concurrent
    translations.

    Args:
      paths: initial content
    """

    __slots__ = ("_paths",)

    _paths: set[str]

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths = set()
        self.update(paths)

    def add(self, path: str) -> None:
        if not path:
            raise ValueError("Empty import path")
        if path not in self._paths:
            logger.debug("registering import %r", path)
            self._paths.add(path)

    def update(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.add(path)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ImportSet):
            return self._paths == other._paths
        if isinstance(other, set | frozenset):
            return self._paths == other
        return NotImplemented

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ImportSet({sorted(self._paths)!r})"

    def generate(self) -> str:
        """Render the set as a Go import declaration.

        Returns an empty string if the set is empty.
        """
        if not self._paths:
            return ""
        lines = "".join(f'\t"{path}"\n' for path in self)
        return f"import (\n{lines})"

    render = generate
