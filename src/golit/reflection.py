"""
``golit.reflection``: From python objects to values
===================================================

Python doesn't have Go's type system so python objects have to be converted
to :mod:`golit.values` before they can be printed. Out of the box the
supported types are:

+ :class:`str`, :class:`int`, :class:`bool`, :class:`float`,
  :class:`complex`, :const:`None` (printed as ``nil``)
+ :class:`bytes` and :class:`bytearray` (as ``[]byte``)
+ :class:`list` and :class:`tuple` (as slices), :class:`dict` (as maps)
+ dataclasses (as structs)
+ functions (only so that they can be rejected when printed)
+ values that are already :mod:`golit.values`

Go types are derived from the type hints when there are some and from the
values otherwise::

    >>> reflect([1, 2]).go_type
    '[]int'
    >>> reflect([1, "a"]).go_type
    '[]any'
    >>> reflect([], list[str]).go_type
    '[]string'

Dataclasses are printed as structs. Their package is the ``__go_package__``
class attribute if there is one, otherwise it's derived from the python module
they were defined in (``a.b`` becomes ``a/b`` and ``__main__`` becomes
``main``). Fields annotated as ``T | None`` become pointers and
``Annotated[int, "uint8"]`` can be used to pick the exact integer type.

Support for new types can be added via :func:`register`.
"""
from __future__ import annotations

import collections.abc
import dataclasses
import inspect
import logging
import types
import typing
import weakref
from typing import Any, Callable, Iterable, Type, TypeAlias, TypeVar

from golit.errors import CyclicValueError
from golit.values import (
    Field,
    Function,
    Map,
    OptionalRef,
    Other,
    Record,
    RecordType,
    Sequence,
    SignedInt,
    String,
    UnsignedInt,
    Value,
)

__all__ = ("reflect", "register", "record_type", "go_type_name")

logger = logging.getLogger(__name__)

T = TypeVar("T")

Reflector: TypeAlias = Callable[[T], Value]

DISPATCH_TABLE = weakref.WeakKeyDictionary[Type[Any], Reflector[Any]]()

_SCALARS: dict[Any, str] = {
    str: "string",
    bool: "bool",
    int: "int",
    float: "float64",
    complex: "complex128",
    bytes: "[]byte",
    bytearray: "[]byte",
}

_SEQUENCES = (list, tuple, collections.abc.Sequence)
_MAPPINGS = (dict, collections.abc.Mapping)


def _infer_reflector_type(f: Reflector[T]) -> Type[T]:
    values = list(inspect.signature(f, eval_str=True).parameters.values())
    if len(values) != 1:
        raise ValueError(
            "The registered function should take only one argument"
        )
    [arg] = values
    ty: Type[T] | None = arg.annotation
    origin = typing.get_origin(ty)
    if origin is not None:
        ty = origin
    assert ty is not None
    return ty


@typing.overload
def register(function: Reflector[T], /) -> Reflector[T]:  # pragma: no cover
    ...


@typing.overload
def register(
    *, type: Type[T] | None = None
) -> Callable[[Reflector[T]], Reflector[T]]:  # pragma: no cover
    ...


def register(
    function: Reflector[T] | None = None,
    /,
    *,
    type: Type[T] | None = None,
) -> Reflector[T] | Callable[[Reflector[T]], Reflector[T]]:
    """Register a function to use while reflecting objects of a given type.

    *function* is expected to take objects of type *T* and to return a
    :data:`~golit.values.Value`.

    If *type* is not specified, :func:`register` uses the type annotation on
    the first argument to deduce which type register *function* for. Here are
    two equivalent ways to print sets of strings as ``map[string]bool``::

        @register
        def _reflect_set(s: set[str]):
            items = [(String(x), Other(True, "bool")) for x in sorted(s)]
            return Map("string", "bool", items)

        @register(type=set)
        def _reflect_set(s):
            ...

    Args:

      function: The reflection we are registering

      type: The type we are registering the function for
    """

    def wrapper(function: Reflector[T]) -> Reflector[T]:
        cls = _infer_reflector_type(function) if type is None else type
        logger.debug("registering reflector for %s", cls.__qualname__)
        DISPATCH_TABLE[cls] = function
        return function

    if function is None:
        return wrapper
    return wrapper(function)


def record_type(cls: type) -> RecordType:
    """The :class:`~golit.values.RecordType` of a dataclass.

    >>> @dataclasses.dataclass
    ... class Person:
    ...   __go_package__ = "app/models"
    ...   name: str
    >>> record_type(Person)
    RecordType(name='Person', module='app/models')
    """
    module = getattr(cls, "__go_package__", None)
    if module is None:
        module = cls.__module__
        module = "main" if module == "__main__" else module.replace(".", "/")
    return RecordType(cls.__name__, module)


def _annotated_name(hint: Any) -> str | None:
    if typing.get_origin(hint) is not typing.Annotated:
        return None
    for meta in hint.__metadata__:
        if isinstance(meta, str):
            return meta
    return None


def _unwrap_optional(hint: Any) -> tuple[bool, Any]:
    """Split ``T | None`` into ``(True, T)``.

    Unions of several non-``None`` types are returned with no usable hint.
    """
    if typing.get_origin(hint) not in (typing.Union, types.UnionType):
        return False, hint
    args = typing.get_args(hint)
    if types.NoneType not in args:
        return False, None
    rest = [arg for arg in args if arg is not types.NoneType]
    if len(rest) == 1:
        return True, rest[0]
    return True, None


def _elem_hint(hint: Any) -> Any:
    match typing.get_args(hint):
        case (elt,) | (elt, types.EllipsisType()):
            return elt
    return None


def _kv_hints(hint: Any) -> tuple[Any, Any]:
    match typing.get_args(hint):
        case (key, value):
            return key, value
    return None, None


def go_type_name(hint: Any) -> str:
    """Convert a python type hint to the name of the matching Go type

    >>> go_type_name(dict[str, list[int] | None])
    'map[string]*[]int'
    """
    name = _annotated_name(hint)
    if name is not None:
        return name
    if typing.get_origin(hint) is typing.Annotated:
        hint = typing.get_args(hint)[0]
    optional, inner = _unwrap_optional(hint)
    if optional:
        return "any" if inner is None else "*" + go_type_name(inner)
    if inner is None:
        return "any"
    if hint in _SCALARS:
        return _SCALARS[hint]
    origin = typing.get_origin(hint) or hint
    if origin in _SEQUENCES:
        return "[]" + go_type_name(_elem_hint(hint))
    if origin in _MAPPINGS:
        key, value = _kv_hints(hint)
        return f"map[{go_type_name(key)}]{go_type_name(value)}"
    if origin is collections.abc.Callable:
        return "func()"
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return record_type(hint).go_type
    return "any"


def _common_type(values: Iterable[Value]) -> str:
    names = {v.go_type for v in values}
    if len(names) == 1:
        return names.pop()
    return "any"


def _int(v: int, hint: Any) -> Value:
    name = _annotated_name(hint)
    if name is None:
        return SignedInt(v)
    if name.startswith("uint") or name == "byte":
        return UnsignedInt(v, name)
    return SignedInt(v, name)


def reflect(obj: Any, hint: Any = None) -> Value:
    """Convert *obj* to a :data:`~golit.values.Value`.

    Args:
      obj: The value to convert
      hint: The python type of *obj*, used to pick Go type names

    Raises:
      TypeError: if *obj* contains an unsupported type
      CyclicValueError: if *obj* contains itself
    """
    # ids of the containers we are currently visiting
    visiting: set[int] = set()

    def reduce(v: Any, hint: Any) -> Value:
        optional, hint = _unwrap_optional(hint)
        if optional:
            if v is None:
                return OptionalRef(None)
            return OptionalRef(reduce(v, hint))
        if isinstance(v, Value):
            return v
        ty = type(v)
        # We do exact type comparisons instead of calls to `isinstance` to
        # avoid running into problems with inheritance (e.g.: bool and int)
        if ty is str:
            return String(v)
        if ty is bool:
            return Other(v, "bool")
        if ty is int:
            return _int(v, hint)
        if ty in (float, complex):
            return Other(v, _annotated_name(hint) or _SCALARS[ty])
        if v is None:
            if typing.get_origin(hint) is collections.abc.Callable:
                return Function(None)
            return OptionalRef(None)
        if ty in (bytes, bytearray):
            return Sequence("byte", (UnsignedInt(b, "byte") for b in v))
        reflector = DISPATCH_TABLE.get(ty)
        if reflector is not None:
            return reflector(v)
        addr = id(v)
        if addr in visiting:
            raise CyclicValueError("Recursive value found")
        visiting.add(addr)
        try:
            return _reduce_container(v, ty, hint)
        finally:
            visiting.discard(addr)

    def _reduce_container(v: Any, ty: type, hint: Any) -> Value:
        if ty in (list, tuple):
            elem_hint = _elem_hint(hint)
            items = [reduce(x, elem_hint) for x in v]
            if elem_hint is None:
                elem_type = _common_type(items)
            else:
                elem_type = go_type_name(elem_hint)
            return Sequence(elem_type, items)
        if ty is dict:
            key_hint, value_hint = _kv_hints(hint)
            pairs = [
                (reduce(key, key_hint), reduce(value, value_hint))
                for key, value in v.items()
            ]
            key_type = (
                _common_type(k for k, _ in pairs)
                if key_hint is None
                else go_type_name(key_hint)
            )
            value_type = (
                _common_type(x for _, x in pairs)
                if value_hint is None
                else go_type_name(value_hint)
            )
            return Map(key_type, value_type, pairs)
        if dataclasses.is_dataclass(v) and not isinstance(v, type):
            hints = typing.get_type_hints(ty, include_extras=True)
            return Record(
                record_type(ty),
                (
                    Field(
                        fld.metadata.get("go_name", fld.name),
                        reduce(getattr(v, fld.name), hints.get(fld.name)),
                    )
                    for fld in dataclasses.fields(v)
                ),
            )
        if callable(v):
            return Function(v)
        raise TypeError(
            f"Object of type {ty.__name__} cannot be converted to a Go value"
        )

    return reduce(obj, hint)
