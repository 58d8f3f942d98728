"""``golit.values``: Runtime values
==================================

The values :mod:`golit.literal` knows how to print. Each class is one kind of
Go value; a :data:`Value` is any of them::

    >>> person = RecordType("Person", module="app/models")
    >>> fields = [Field("Name", String("Bob")), Field("Age", SignedInt(30))]
    >>> Record(person, fields)  # doctest: +NORMALIZE_WHITESPACE
    Record(type=RecordType(name='Person', module='app/models'),
           fields=(Field(name='Name', value=String(value='Bob')),
                   Field(name='Age',
                         value=SignedInt(value=30, type_name='int'))))

Containers carry the Go name of the types they hold. :func:`golit.reflect`
computes those names from python type hints but they can also be spelled out
by hand::

    >>> Sequence("int", [SignedInt(1), SignedInt(2)]).go_type
    '[]int'
    >>> person.go_type
    'models.Person'

All the values are immutable except for :class:`OptionalRef`: pointers can be
re-targeted after they've been created, which is how cyclic graphs get built.

"""
from __future__ import annotations

import dataclasses
import typing
from typing import Any, Callable, Iterable, TypeAlias

__all__ = (
    "String",
    "SignedInt",
    "UnsignedInt",
    "RecordType",
    "Field",
    "Record",
    "Sequence",
    "Map",
    "OptionalRef",
    "Function",
    "Other",
    "Invalid",
    "INVALID",
    "Value",
)


@dataclasses.dataclass(slots=True, frozen=True)
class String:
    value: str

    @property
    def go_type(self) -> str:
        return "string"


@dataclasses.dataclass(slots=True, frozen=True)
class SignedInt:
    value: int
    type_name: str = "int"

    @property
    def go_type(self) -> str:
        return self.type_name


@dataclasses.dataclass(slots=True, frozen=True)
class UnsignedInt:
    value: int
    type_name: str = "uint"

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(
                f"{self.type_name} cannot hold a negative value: {self.value}"
            )

    @property
    def go_type(self) -> str:
        return self.type_name


@dataclasses.dataclass(slots=True, frozen=True)
class RecordType:
    """A named struct type.

    Parameters:
      name(str): The bare name of the type
      module(str): The import path of the package that declares the type
        (empty for types declared locally).
    """

    name: str
    module: str = ""

    @property
    def package(self) -> str:
        "The name the module is referred to by in Go code."
        return self.module.rsplit("/", 1)[-1]

    @property
    def go_type(self) -> str:
        if not self.module:
            return self.name
        return f"{self.package}.{self.name}"


@dataclasses.dataclass(slots=True, frozen=True)
class Field:
    name: str
    value: Value


@dataclasses.dataclass(slots=True, frozen=True)
class Record:
    """A struct value.

    Parameters:
      type(RecordType):
      fields(tuple[Field, ...]): In declaration order
    """

    type: RecordType
    fields: tuple[Field, ...]

    def __init__(self, type: RecordType, fields: Iterable[Field] = ()) -> None:
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "fields", tuple(fields))

    @property
    def go_type(self) -> str:
        return self.type.go_type


@dataclasses.dataclass(slots=True, frozen=True)
class Sequence:
    """An array or a slice.

    Parameters:
      elem_type(str): The Go name of the type of the elements.
      items(tuple[Value, ...]):
    """

    elem_type: str
    items: tuple[Value, ...]

    def __init__(self, elem_type: str, items: Iterable[Value] = ()) -> None:
        object.__setattr__(self, "elem_type", elem_type)
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    @property
    def go_type(self) -> str:
        return f"[]{self.elem_type}"


@dataclasses.dataclass(slots=True, frozen=True)
class Map:
    """A key value container.

    The items are kept in the order they were given in; this is also the
    order in which they are printed.

    Parameters:
      key_type(str):
      value_type(str):
      items(tuple[tuple[Value, Value], ...]):
    """

    key_type: str
    value_type: str
    items: tuple[tuple[Value, Value], ...]

    def __init__(
        self,
        key_type: str,
        value_type: str,
        items: Iterable[tuple[Value, Value]] = (),
    ) -> None:
        object.__setattr__(self, "key_type", key_type)
        object.__setattr__(self, "value_type", value_type)
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    @property
    def go_type(self) -> str:
        return f"map[{self.key_type}]{self.value_type}"


@dataclasses.dataclass(slots=True, eq=False)
class OptionalRef:
    """A pointer.

    Pointers compare by identity: two pointers to equal values are still
    different pointers.

    Parameters:
      target(Value | None): The value pointed to, ``None`` for ``nil``.
    """

    target: Value | None = None

    @property
    def go_type(self) -> str:
        if self.target is None:
            return "any"
        return f"*{self.target.go_type}"


@dataclasses.dataclass(slots=True, frozen=True)
class Function:
    "A function value. Only ``nil`` functions can be printed."

    fn: Callable[..., Any] | None = None

    @property
    def go_type(self) -> str:
        return "func()"


@dataclasses.dataclass(slots=True, frozen=True)
class Other:
    """Values printed via their native string form.

    Only :class:`bool` and finite :class:`float` are guaranteed to produce
    valid Go code. Non-finite floats are printed the way Go's ``fmt`` prints
    them (``NaN``, ``+Inf``, ``-Inf``) and :class:`complex` as ``(1+2i)``.
    """

    value: bool | float | complex
    type_name: str

    @property
    def go_type(self) -> str:
        return self.type_name


class Invalid:
    "A value with no kind. Use the :data:`INVALID` singleton."

    __slots__ = ()

    def __repr__(self) -> str:
        return "INVALID"

    @property
    def go_type(self) -> str:
        return "any"


INVALID: typing.Final = Invalid()

#:
Value: TypeAlias = (
    String
    | SignedInt
    | UnsignedInt
    | Record
    | Sequence
    | Map
    | OptionalRef
    | Function
    | Other
    | Invalid
)
