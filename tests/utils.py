"""Read back the Go literals we generate.

This only understands the subset of Go produced by :mod:`golit.literal` and
turns it into plain python values so tests can compare literals semantically
(e.g.: maps whatever the order of their keys).
"""
from __future__ import annotations

import dataclasses
import re

from golit import values

TOKEN = re.compile(
    r"""
    \s*(?:
      (?P<string>"(?:[^"\\]|\\.)*")
    | (?P<number>-?\d+(?:\.\d+)?(?:e[+-]?\d+)?)
    | (?P<ident>[A-Za-z_][A-Za-z_0-9]*)
    | (?P<punct>\[\]|[{}\[\]:,&*.()])
    )
    """,
    re.VERBOSE,
)

ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}


@dataclasses.dataclass(frozen=True)
class Struct:
    name: str
    fields: tuple[tuple[str, object], ...]


@dataclasses.dataclass(frozen=True)
class Ptr:
    target: object


@dataclasses.dataclass(frozen=True)
class Slice:
    elem_type: str
    items: tuple[object, ...]


@dataclasses.dataclass(frozen=True)
class GoMap:
    key_type: str
    value_type: str
    items: frozenset[tuple[object, object]]


def unquote(s: str) -> str:
    out = []
    i = 1
    while i < len(s) - 1:
        c = s[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue
        e = s[i + 1]
        if e in ESCAPES:
            out.append(ESCAPES[e])
            i += 2
        elif e == "x":
            out.append(chr(int(s[i + 2 : i + 4], 16)))
            i += 4
        elif e == "u":
            out.append(chr(int(s[i + 2 : i + 6], 16)))
            i += 6
        else:
            assert e == "U", s
            out.append(chr(int(s[i + 2 : i + 10], 16)))
            i += 10
    return "".join(out)


class Parser:
    def __init__(self, text: str) -> None:
        self.tokens = []
        pos = 0
        text = text.rstrip()
        while pos < len(text):
            m = TOKEN.match(text, pos)
            assert m is not None, text[pos:]
            kind = m.lastgroup
            assert kind is not None
            self.tokens.append((kind, m.group(kind)))
            pos = m.end()
        self.pos = 0

    def peek(self) -> str | None:
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos][1]

    def next(self) -> tuple[str, str]:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def expect(self, s: str) -> None:
        _, tok = self.next()
        assert tok == s, (tok, s)

    def type_name(self) -> str:
        _, tok = self.next()
        if tok == "[]":
            return "[]" + self.type_name()
        if tok == "*":
            return "*" + self.type_name()
        if tok == "map":
            self.expect("[")
            key = self.type_name()
            self.expect("]")
            return f"map[{key}]{self.type_name()}"
        if tok == "func":
            self.expect("(")
            self.expect(")")
            return "func()"
        if self.peek() == ".":
            self.next()
            _, name = self.next()
            return f"{tok}.{name}"
        return tok

    def items(self):
        self.expect("{")
        while self.peek() != "}":
            yield
            if self.peek() == ",":
                self.next()
        self.expect("}")

    def literal(self) -> object:
        kind, tok = self.tokens[self.pos]
        if kind == "string":
            self.next()
            return unquote(tok)
        if kind == "number":
            self.next()
            if any(c in tok for c in ".e"):
                return float(tok)
            return int(tok)
        if tok in ("nil", "true", "false"):
            self.next()
            return {"nil": None, "true": True, "false": False}[tok]
        if tok == "&":
            self.next()
            return Ptr(self.literal())
        if tok == "[]":
            self.next()
            elem = self.type_name()
            return Slice(elem, tuple(self.literal() for _ in self.items()))
        if tok == "map":
            ty = self.type_name()
            key_type, value_type = re.fullmatch(
                r"map\[(.*?)\](.*)", ty
            ).groups()  # type: ignore[union-attr]
            kvs = []
            for _ in self.items():
                k = self.literal()
                self.expect(":")
                kvs.append((k, self.literal()))
            return GoMap(key_type, value_type, frozenset(kvs))
        name = self.type_name()
        fields = []
        for _ in self.items():
            _, field = self.next()
            self.expect(":")
            fields.append((field, self.literal()))
        return Struct(name, tuple(fields))


def parse(text: str) -> object:
    parser = Parser(text)
    res = parser.literal()
    assert parser.peek() is None, parser.tokens[parser.pos :]
    return res


def plain(value: values.Value, default_module: str = "main") -> object:
    """What :func:`parse` should return for the literal of *value*."""
    match value:
        case values.String(s):
            return s
        case values.SignedInt(i) | values.UnsignedInt(i):
            return i
        case values.Other(v):
            return v
        case values.OptionalRef(None) | values.Function(None):
            return None
        case values.OptionalRef(target):
            return Ptr(plain(target, default_module))
        case values.Sequence(elem_type, items):
            return Slice(
                elem_type, tuple(plain(x, default_module) for x in items)
            )
        case values.Map(key_type, value_type, items):
            return GoMap(
                key_type,
                value_type,
                frozenset(
                    (plain(k, default_module), plain(v, default_module))
                    for k, v in items
                ),
            )
        case values.Record(ty, fields):
            name = ty.name
            if ty.module and ty.module != default_module:
                name = ty.go_type
            return Struct(
                name,
                tuple((f.name, plain(f.value, default_module)) for f in fields),
            )
    raise TypeError(value)
