"""resultant: explicit success/failure values for fallible computations.

Public API:
    - ok() / err(): Construct a success or failure
    - Ok / Err: The two result variants (usable in ``match``)
    - Result: Type alias for ``Ok[V] | Err[E]``
    - collect(): Combine many results, stopping at the first failure
    - catching(): Turn a raising function into one returning a Result
    - Config: Diagnostic rendering configuration
"""

from __future__ import annotations

import logging

from resultant.config import Config
from resultant.errors import ConfigurationError, ResultantError, UnwrapError
from resultant.result import Err, Ok, Result, catching, collect, err, ok, render

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultant")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultant").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Err",
    "Ok",
    "Result",
    "ResultantError",
    "UnwrapError",
    "catching",
    "collect",
    "err",
    "ok",
    "render",
]
