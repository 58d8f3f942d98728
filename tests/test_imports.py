from __future__ import annotations

import pytest

from golit import ImportSet

TWO = """\
import (
\t"app/models"
\t"encoding/json"
)\
"""


def test_empty():
    imports = ImportSet()
    assert imports.generate() == ""
    assert imports.render() == ""
    assert len(imports) == 0
    assert not imports


def test_generate():
    imports = ImportSet()
    imports.add("encoding/json")
    imports.add("app/models")
    imports.add("encoding/json")
    assert len(imports) == 2
    assert imports.generate() == TWO
    assert ImportSet(["fmt"]).generate() == 'import (\n\t"fmt"\n)'


def test_set_operations():
    imports = ImportSet(["b", "a"])
    assert "a" in imports
    assert "c" not in imports
    assert list(imports) == ["a", "b"]
    assert imports == ImportSet(["a", "b"])
    assert imports == {"a", "b"}
    assert imports != {"a"}
    assert repr(imports) == "ImportSet(['a', 'b'])"
    imports.update(["c"])
    assert imports == frozenset("abc")


def test_unhashable():
    with pytest.raises(TypeError):
        hash(ImportSet())


def test_empty_path():
    with pytest.raises(ValueError, match="Empty import path"):
        ImportSet().add("")
