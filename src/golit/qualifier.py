"""
``golit.qualifier``: Type names
===============================

Go code refers to a struct type declared in another package as
``package.Name`` and has to import that package. :func:`qualify` picks the
name and records the import.
"""
from __future__ import annotations

from golit import config as _config
from golit.imports import ImportSet
from golit.values import RecordType

__all__ = ("qualify",)


def qualify(
    record_type: RecordType,
    imports: ImportSet,
    config: _config.Config | None = None,
) -> str:
    """Get the name to use for *record_type* in the generated code.

    Types that live in the default package (or in no package) are referred to
    by their bare name. Other types are prefixed by their package name and
    their package is added to *imports*::

        >>> imports = ImportSet()
        >>> qualify(RecordType("Person", "app/models"), imports)
        'models.Person'
        >>> imports
        ImportSet(['app/models'])
        >>> qualify(RecordType("Person", "main"), imports)
        'Person'

    Args:
      record_type:
      imports: updated in place
      config: defaults to :func:`golit.config.default_config`
    """
    if config is None:
        config = _config.default_config()
    module = record_type.module
    if not module or module == config.default_module:
        return record_type.name
    imports.add(module)
    return f"{record_type.package}.{record_type.name}"
