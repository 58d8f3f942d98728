"""
``golit.config``: Default package
=================================

Go code refers to types declared in the package being compiled by their bare
name. Every other type has to be prefixed by its package's name. The
:class:`Config` holds the name of the package the generated code will live
in.

The process-wide configuration is read once, when this module is imported,
from the ``GOPACKAGE`` environment variable (``go generate`` sets it to the
package of the file being processed)::

    >>> Config.from_env({"GOPACKAGE": "fixtures"})
    Config(default_module='fixtures')
    >>> Config.from_env({})
    Config(default_module='main')

"""
from __future__ import annotations

import dataclasses
import logging
import os
from typing import Final, Mapping

__all__ = ("Config", "default_config", "DEFAULT_MODULE", "ENV_VAR")

logger = logging.getLogger(__name__)

#: The package used when ``GOPACKAGE`` is not set.
DEFAULT_MODULE: Final = "main"

#: Environment variable overriding :data:`DEFAULT_MODULE`.
ENV_VAR: Final = "GOPACKAGE"


@dataclasses.dataclass(slots=True, frozen=True)
class Config:
    """Settings shared by all the steps of a translation.

    Args:
      default_module(str): Types owned by this module (or by no module at all)
        are printed without a package prefix.
    """

    default_module: str = DEFAULT_MODULE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a configuration from environment variables.

        Args:
          environ: defaults to :data:`os.environ`
        """
        if environ is None:
            environ = os.environ
        # An empty value is treated as if the variable wasn't set.
        module = environ.get(ENV_VAR) or DEFAULT_MODULE
        return cls(default_module=module)


_PROCESS_CONFIG: Final = Config.from_env()
logger.debug("default module: %r", _PROCESS_CONFIG.default_module)


def default_config() -> Config:
    "The configuration resolved from the environment at start-up."
    return _PROCESS_CONFIG
