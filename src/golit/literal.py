"""
``golit.literal``: Go literals
==============================

Print :mod:`golit.values` as Go source code::

    >>> from golit.values import Field, Record, RecordType
    >>> person = Record(
    ...     RecordType("Person", module="app/models"),
    ...     [Field("Name", String("Bob")), Field("Age", SignedInt(30))],
    ... )
    >>> text, imports = generate_literal(OptionalRef(person))
    >>> print(text)
    &models.Person{
        Name: "Bob",
        Age: 30,
    }
    >>> imports
    ImportSet(['app/models'])

The text is only valid Go code when compiled in a file that imports all the
packages in the returned :class:`~golit.imports.ImportSet`. :func:`dump_go`
generates such a file.

"""
from __future__ import annotations

import math
from typing import Any, Final, Iterator

from golit import config as _config
from golit import pretty, reflection
from golit.errors import (
    CyclicValueError,
    InvalidValueKind,
    UnsupportedCallableError,
)
from golit.imports import ImportSet
from golit.qualifier import qualify
from golit.values import (
    Function,
    Invalid,
    Map,
    OptionalRef,
    Other,
    Record,
    Sequence,
    SignedInt,
    String,
    UnsignedInt,
    Value,
)

__all__ = (
    "LiteralPrinter",
    "generate_literal",
    "dump_literal",
    "dump_go",
    "quote",
    "is_go_identifier",
)

INDENT: Final = 4

GO_KEYWORDS: Final = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

NIL: Final = pretty.text("nil")
COMMA: Final = pretty.text(", ")

_SHORT_ESCAPES: Final = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
    "\\": r"\\",
    '"': r"\"",
}


def _escape(c: str) -> str:
    escaped = _SHORT_ESCAPES.get(c)
    if escaped is not None:
        return escaped
    if c.isprintable():
        return c
    code = ord(c)
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if 0xD800 <= code <= 0xDFFF:
        # Lone surrogates aren't valid code points in Go: emit the raw bytes.
        return "".join(
            f"\\x{b:02x}" for b in c.encode("utf-8", "surrogatepass")
        )
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(s: str) -> str:
    r"""Quote a string the way Go's ``strconv.Quote`` does.

    >>> print(quote('hi"there'))
    "hi\"there"
    >>> print(quote("tab\there\x00"))
    "tab\there\x00"
    """
    return '"' + "".join(_escape(c) for c in s) + '"'


def _format_float(f: float) -> str:
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "+Inf" if f > 0 else "-Inf"
    return repr(f)


def format_other(v: bool | float | complex) -> str:
    """Best effort printing for the values we don't have a dedicated syntax for.

    Only booleans and finite floats are guaranteed to be valid Go.
    """
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float):
        return _format_float(v)
    if isinstance(v, complex):
        imag = _format_float(v.imag)
        if not imag.startswith(("-", "+")):
            imag = "+" + imag
        return f"({_format_float(v.real)}{imag}i)"
    return str(v)


class LiteralPrinter:
    """Convert :mod:`golit.values` into a :class:`pretty.Doc`.

    A printer accumulates the imports of all the values it prints in
    :attr:`imports`.

    Args:
      imports: where to record the packages used by the literals
      config:
    """

    imports: ImportSet
    config: _config.Config
    _visiting: set[int]

    def __init__(
        self,
        imports: ImportSet | None = None,
        config: _config.Config | None = None,
    ) -> None:
        self.imports = ImportSet() if imports is None else imports
        self.config = _config.default_config() if config is None else config
        self._visiting = set()

    def doc(self, value: Value) -> pretty.Doc:
        match value:
            case String(s):
                return pretty.text(quote(s))
            case SignedInt(i) | UnsignedInt(i):
                return pretty.text(str(i))
            case Record():
                return self.record(value)
            case Sequence(elem_type, items):
                return (
                    pretty.text(f"[]{elem_type}{{")
                    + pretty.join(COMMA, (self.doc(x) for x in items))
                    + pretty.text("}")
                )
            case Map(key_type, value_type, items):
                return (
                    pretty.text(f"map[{key_type}]{value_type}{{")
                    + pretty.join(COMMA, self._map_items(items))
                    + pretty.text("}")
                )
            case OptionalRef():
                return self.reference(value)
            case Function(None):
                return NIL
            case Function(fn):
                name = getattr(fn, "__qualname__", None) or repr(fn)
                raise UnsupportedCallableError(
                    f"Cannot generate a literal for function {name!r}"
                )
            case Other(v):
                return pretty.text(format_other(v))
            case Invalid():
                raise InvalidValueKind("Invalid value provided")
        raise InvalidValueKind(
            f"Object of type {type(value).__name__} is not a value"
        )

    def _map_items(
        self, items: tuple[tuple[Value, Value], ...]
    ) -> Iterator[pretty.Doc]:
        for key, value in items:
            # Keys before values so imports get registered in document order
            k = self.doc(key)
            v = self.doc(value)
            yield k + pretty.text(": ") + v

    def record(self, value: Record) -> pretty.Doc:
        name = qualify(value.type, self.imports, self.config)
        if not value.fields:
            return pretty.text(name + "{}")
        body = pretty.EMPTY
        for field in value.fields:
            body += (
                pretty.BREAK
                + pretty.text(f"{field.name}: ")
                + self.doc(field.value)
                + pretty.text(",")
            )
        return pretty.hgrp(
            pretty.text(name + "{")
            + pretty.nest(INDENT, body)
            + pretty.BREAK
            + pretty.text("}")
        )

    def reference(self, value: OptionalRef) -> pretty.Doc:
        target = value.target
        if target is None:
            return NIL
        addr = id(value)
        if addr in self._visiting:
            raise CyclicValueError("Recursive value found")
        self._visiting.add(addr)
        try:
            return pretty.text("&") + self.doc(target)
        finally:
            self._visiting.discard(addr)

    def to_string(self, value: Value) -> str:
        return self.doc(value).to_string()


def generate_literal(
    value: Value,
    imports: ImportSet | None = None,
    *,
    config: _config.Config | None = None,
) -> tuple[str, ImportSet]:
    """Generate the Go literal for *value*.

    Args:
      value: The value to print
      imports: The set to add the packages used by the literal to. A new set
        is created if this is ``None``.
      config: Defaults to :func:`golit.config.default_config`

    Returns:
      A tuple of the literal and the import set (*imports* if it was given).

    Raises:
      InvalidValueKind: if *value* (or any nested value) has no kind.
      UnsupportedCallableError: if *value* contains a non-nil function.
      CyclicValueError: if *value* refers back to itself.

    If an error is raised *imports* might already contain some of the packages
    used by the parts of *value* that were printed; it should be discarded.
    """
    printer = LiteralPrinter(imports=imports, config=config)
    return printer.to_string(value), printer.imports


def dump_literal(
    obj: Any,
    imports: ImportSet | None = None,
    *,
    config: _config.Config | None = None,
) -> tuple[str, ImportSet]:
    """Like :func:`generate_literal` but works on any python value.

    *obj* is converted via :func:`golit.reflection.reflect`::

        >>> dump_literal({"a": [1, 2]})
        ('map[string][]int{"a": []int{1, 2}}', ImportSet([]))
    """
    return generate_literal(reflection.reflect(obj), imports, config=config)


def is_go_identifier(name: str) -> bool:
    """Can *name* be used to name a variable in Go?

    >>> is_go_identifier("Primes"), is_go_identifier("func")
    (True, False)
    """
    return (
        name.isidentifier()
        and name not in GO_KEYWORDS
        and all(c == "_" or c.isalpha() or c.isdecimal() for c in name)
    )


def dump_go(
    obj: Any,
    *,
    name: str,
    package: str | None = None,
    config: _config.Config | None = None,
) -> str:
    """Generate a Go file declaring a variable initialised to *obj*.

    >>> print(dump_go([1, 2, 3], name="Primes", package="fixtures"), end="")
    package fixtures
    <BLANKLINE>
    var Primes = []int{1, 2, 3}

    Args:
      obj: A :data:`~golit.values.Value` or a python object supported by
        :func:`golit.reflection.reflect`
      name: The name of the variable
      package: The package clause of the file. Defaults to the config's
        default module.
      config: Defaults to ``Config(package)`` if *package* is given,
        :func:`golit.config.default_config` otherwise.

    Raises:
      ValueError: if *name* is not a valid Go identifier or if *package*
        is not the package of the config's default module (the file would
        have to import itself).
    """
    if not is_go_identifier(name):
        raise ValueError(f"Invalid variable name: {name!r}")
    if config is None:
        if package is None:
            config = _config.default_config()
        else:
            config = _config.Config(default_module=package)
    own_package = config.default_module.rsplit("/", 1)[-1]
    if package is None:
        package = own_package
    elif package != own_package:
        raise ValueError(
            f"Package {package!r} doesn't match the default module "
            f"{config.default_module!r}"
        )
    literal, imports = dump_literal(obj, config=config)
    sections = [f"package {package}"]
    if imports:
        sections.append(imports.generate())
    sections.append(f"var {name} = {literal}")
    return "\n\n".join(sections) + "\n"
