"""``golit.pretty``: Layout of the generated code
================================================

A cut down version of Christian Lindig's "strictly pretty" [`pdf
<https://lindig.github.io/papers/strictly-pretty-2000.pdf>`_] documents.

Go literals are laid out in a fixed way (struct fields go on their own lines,
everything else stays on one line) so we don't need line widths or automatic
groups: the top level is flat and :func:`hgrp` groups are always broken.
What we keep from the article is the handling of indentation: a struct nested
in another struct gets its fields indented one more level without the inner
literal having to know how deep it is.

    >>> fields = BREAK + text("X: 1,") + BREAK + text("Y: 2,")
    >>> doc = hgrp(text("Point{") + nest(4, fields) + BREAK + text("}"))
    >>> print(doc.to_string())
    Point{
        X: 1,
        Y: 2,
    }

"""

from __future__ import annotations

import dataclasses
import enum
import io
from typing import Iterable, TextIO

__all__ = (
    "Doc",
    "EMPTY",
    "text",
    "BREAK",
    "nest",
    "join",
    "hgrp",
)


class Mode(enum.Enum):
    "Specify the layout of a group"
    FLAT = enum.auto()
    BREAK = enum.auto()


# doc =
# | DocNil
# | DocCons of doc * doc
# | DocText of string
# | DocNest of int * doc
# | DocBreak of string
# | DocGroup of gmode * doc


class Doc:
    """Type used to represent documents

    This constructor should never be called directly

    Documents can be concatenated via the ``+`` operator.
    """

    def __add__(self, other: Doc) -> Doc:
        return DocCons(self, other)

    def to_string(self) -> str:
        "Render this document to a string"
        return to_string(self)


@dataclasses.dataclass(slots=True)
class DocNil(Doc):
    pass


@dataclasses.dataclass(slots=True)
class DocCons(Doc):
    left: Doc
    right: Doc


@dataclasses.dataclass(slots=True)
class DocText(Doc):
    text: str


@dataclasses.dataclass(slots=True)
class DocNest(Doc):
    indent: int
    doc: Doc


@dataclasses.dataclass(slots=True)
class DocBreak(Doc):
    text: str


@dataclasses.dataclass(slots=True)
class DocGroup(Doc):
    mode: Mode
    doc: Doc


#: The empty document
EMPTY: Doc = DocNil()


def text(s: str) -> Doc:
    """
    Turns a string into a document

    Args:
      s(str)

    Returns:
      Doc:
    """
    return DocText(s)


def nest(indentation: int, doc: Doc) -> Doc:
    """Set the indentation level for a document.

    Args:
      indentation(int):
      doc(Doc):

    Returns:
      Doc:
    """
    return DocNest(indentation, doc)


#: A break is rendered as nothing in flat groups and as a newline followed by
#: the current indentation in broken groups.
BREAK: Doc = DocBreak("")


def join(sep: Doc, docs: Iterable[Doc]) -> Doc:
    """Concatenate *docs* with *sep* between each of them.

    Args:
      sep(Doc):
      docs(Iterable[Doc]):

    Returns:
      Doc:
    """
    acc = EMPTY
    first = True
    for doc in docs:
        if not first:
            acc += sep
        else:
            first = False
        acc += doc
    return acc


def hgrp(doc: Doc) -> Doc:
    """
    BREAKs inside the group are always turned into newlines.

    Args:
      doc(Doc):

    Returns
      Doc:
    """
    return DocGroup(Mode.BREAK, doc)


# NOTE: The algorithm does a lot of deconstructing/reconstructing of
# head::tail. If we used normal python lists we'd convert a lot of O(1)
# operation in O(n) operations.
@dataclasses.dataclass(slots=True)
class LL:
    indent: int
    mode: Mode
    doc: Doc
    _succ: LL | None = None


# let rec format = function
#     | []                             -> SNil
#     | (i,m,DocNil)              :: z -> format z
#     | (i,m,DocCons(x,y))        :: z -> format ((i,m,x)::(i,m,y)::z)
#     | (i,m,DocNest(j,x))        :: z -> format ((i+j,m,x)::z)
#     | (i,m,DocText(s))          :: z -> SText(s, format z)
#     | (i,Flat, DocBreak(s))     :: z -> SText(s, format z)
#     | (i,Break,DocBreak(s))     :: z -> SLine(i, format z)
#     | (i,m,DocGroup(m',x))      :: z -> format ((i,m',x)::z)
#
# Written as a loop: CPython doesn't do tail call optimisation and literals can
# be deeply nested.
def format(elts: LL | None, out: TextIO) -> None:
    def sline(i: int) -> None:
        out.write("\n")
        out.write(" " * i)

    stext = out.write

    while elts is not None:
        match elts:
            case LL(_, _, DocNil(), z):
                elts = z
            case LL(i, m, DocCons(x, y), z):
                elts = LL(i, m, x, LL(i, m, y, z))
            case LL(i, m, DocNest(j, x), z):
                elts = LL(i + j, m, x, z)
            case LL(_, _, DocText(s), z):
                stext(s)
                elts = z
            case LL(_, Mode.FLAT, DocBreak(s), z):
                stext(s)
                elts = z
            case LL(i, Mode.BREAK, DocBreak(_), z):
                sline(i)
                elts = z
            case LL(i, _, DocGroup(m, x), z):
                elts = LL(i, m, x, z)
            case _:  # pragma: no cover
                assert False, elts


def to_string(doc: Doc) -> str:
    out = io.StringIO()
    format(LL(0, Mode.FLAT, doc), out)
    return out.getvalue()
