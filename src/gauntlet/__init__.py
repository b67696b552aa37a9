"""Gauntlet: typed, non-throwing data transformations.

Public API:
    - transform(): Bind a handler into a reusable transform
    - apply(): Run a transform over many inputs, preserving order
    - unwrap_ok_results() / unwrap_or_default(): Collapse results into values
    - ignore_on_err / throw_on_err / log_on_err: Ready-made failure policies
    - Success / Failure: The two result variants
"""

from __future__ import annotations

import logging

from gauntlet.config import Config
from gauntlet.errors import ConfigurationError, GauntletError, TransformFailedError
from gauntlet.result import (
    Failure,
    Result,
    Success,
    is_failure,
    is_success,
    unwrap_or_else,
)
from gauntlet.transform import (
    TransformCompletion,
    TransformError,
    TransformFunction,
    TransformHandler,
    TransformResult,
    TransformReturn,
    apply,
    transform,
)
from gauntlet.unwrap import (
    UnwrapOptions,
    ignore_on_err,
    log_on_err,
    throw_on_err,
    unwrap_ok_results,
    unwrap_or_default,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("gauntlet-transform")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("gauntlet").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Failure",
    "GauntletError",
    "Result",
    "Success",
    "TransformCompletion",
    "TransformError",
    "TransformFailedError",
    "TransformFunction",
    "TransformHandler",
    "TransformResult",
    "TransformReturn",
    "UnwrapOptions",
    "apply",
    "ignore_on_err",
    "is_failure",
    "is_success",
    "log_on_err",
    "throw_on_err",
    "transform",
    "unwrap_ok_results",
    "unwrap_or_default",
    "unwrap_or_else",
]
