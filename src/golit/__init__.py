"""Generate Go literals from in-memory values"""
from __future__ import annotations

from importlib import metadata

from .config import Config, default_config
from .errors import (
    CyclicValueError,
    InvalidValueKind,
    LiteralError,
    UnsupportedCallableError,
)
from .imports import ImportSet
from .literal import dump_go, dump_literal, generate_literal
from .qualifier import qualify
from .reflection import reflect, register
from .values import (
    INVALID,
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

# https://packaging.python.org/en/latest/guides/single-sourcing-package-version/
__version__ = metadata.version(__name__)

__all__ = (
    "Config",
    "default_config",
    "ImportSet",
    "generate_literal",
    "dump_literal",
    "dump_go",
    "qualify",
    "reflect",
    "register",
    "LiteralError",
    "InvalidValueKind",
    "UnsupportedCallableError",
    "CyclicValueError",
    "INVALID",
    "Field",
    "Function",
    "Map",
    "OptionalRef",
    "Other",
    "Record",
    "RecordType",
    "Sequence",
    "SignedInt",
    "String",
    "UnsignedInt",
    "Value",
)
