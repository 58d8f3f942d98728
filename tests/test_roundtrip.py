from __future__ import annotations

import dataclasses

import pytest

from golit import (
    Config,
    Field,
    Function,
    ImportSet,
    Map,
    OptionalRef,
    Other,
    Record,
    RecordType,
    Sequence,
    SignedInt,
    String,
    UnsignedInt,
    UnsupportedCallableError,
    dump_literal,
    generate_literal,
)

from . import utils

MAIN = Config("main")

PERSON = RecordType("Person", module="app/models")
BOB = Record(
    PERSON, [Field("Name", String("Bob")), Field("Age", SignedInt(30))]
)
TAGS = Map(
    "string",
    "[]string",
    [
        (String("k\n1"), Sequence("string", [String("a"), String('"b"')])),
        (String("k2"), Sequence("string")),
    ],
)

SAMPLES = [
    SignedInt(42),
    SignedInt(-42, "int64"),
    UnsignedInt(255, "uint8"),
    String('hi"there'),
    String("tab\t nul\x00 unicode \u00e9 \u200b \U0001f600"),
    Other(True, "bool"),
    Other(2.5, "float64"),
    BOB,
    OptionalRef(),
    OptionalRef(BOB),
    Function(),
    Sequence("int", [SignedInt(1), SignedInt(2), SignedInt(3)]),
    Sequence("*models.Person", [OptionalRef(BOB), OptionalRef()]),
    TAGS,
    Record(
        RecordType("Everything"),
        [
            Field("Owner", OptionalRef(BOB)),
            Field("Tags", TAGS),
            Field("Nested", Record(RecordType("Empty", "x/y"))),
            Field("Fn", Function()),
        ],
    ),
]


@pytest.mark.parametrize("value", SAMPLES)
def test_roundtrip(value):
    text, _ = generate_literal(value, config=MAIN)
    assert utils.parse(text) == utils.plain(value)


def test_map_order_does_not_matter():
    reordered = Map("string", "[]string", reversed(TAGS.items))
    left, _ = generate_literal(TAGS, config=MAIN)
    right, _ = generate_literal(reordered, config=MAIN)
    assert left != right
    assert utils.parse(left) == utils.parse(right)


@dataclasses.dataclass
class Row:
    __go_package__ = "github.com/acme/tables"

    ID: int
    Labels: dict[str, float]
    Parent: Row | None = None


def test_python_roundtrip():
    row = Row(1, {"x": 0.5}, Parent=Row(0, {}))
    text, imports = dump_literal(row, config=MAIN)
    assert imports == {"github.com/acme/tables"}
    empty = utils.GoMap("string", "float64", frozenset())
    labels = utils.GoMap("string", "float64", frozenset({("x", 0.5)}))
    parent = utils.Struct(
        "tables.Row", (("ID", 0), ("Labels", empty), ("Parent", None))
    )
    assert utils.parse(text) == utils.Struct(
        "tables.Row",
        (("ID", 1), ("Labels", labels), ("Parent", utils.Ptr(parent))),
    )


# Worked examples


def test_scenario_integer():
    assert generate_literal(SignedInt(42), config=MAIN) == ("42", ImportSet())


def test_scenario_string():
    assert generate_literal(String('hi"there'), config=MAIN)[0] == (
        '"hi\\"there"'
    )


def test_scenario_struct_and_pointer():
    text, imports = generate_literal(BOB, config=MAIN)
    assert text == 'models.Person{\n    Name: "Bob",\n    Age: 30,\n}'
    assert imports == {"app/models"}
    ptr, ptr_imports = generate_literal(OptionalRef(BOB), config=MAIN)
    assert ptr == "&" + text
    assert ptr_imports == imports


def test_scenario_sequence():
    seq = Sequence("int", [SignedInt(1), SignedInt(2), SignedInt(3)])
    assert generate_literal(seq, config=MAIN)[0] == "[]int{1, 2, 3}"


def test_scenario_nil():
    assert generate_literal(OptionalRef(), config=MAIN)[0] == "nil"


def test_scenario_callable():
    value = Record(
        RecordType("Job"),
        [Field("Name", String("x")), Field("Run", Function(print))],
    )
    with pytest.raises(UnsupportedCallableError):
        generate_literal(value, config=MAIN)
