"""Collapse transform results into plain output values.

`unwrap_ok_results` keeps only successes and hands every failure to an
``on_err`` callback. `unwrap_or_default` keeps positions intact by replacing
each failure with a default computed from its error. Typical ``on_err``
policies are provided: `ignore_on_err`, `throw_on_err`, and `log_on_err`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, NoReturn

from gauntlet.errors import ConfigurationError, TransformFailedError
from gauntlet.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gauntlet.transform import TransformError

log = logging.getLogger(__name__)

ErrorHandler = Callable[[Any], None]


def ignore_on_err(_error: TransformError[Any]) -> None:
    """Discard a failure. Use with `unwrap_ok_results` to keep successes only."""


def throw_on_err(error: TransformError[Any]) -> NoReturn:
    """Raise `TransformFailedError` on the first failure encountered."""
    raise TransformFailedError(error)


def log_on_err(error: TransformError[Any]) -> None:
    """Log a failure at WARNING and continue."""
    log.warning("Dropping failed transform of %r: %s", error.value, error.message)


@dataclass(frozen=True)
class UnwrapOptions:
    """Options for `unwrap_ok_results`.

    ``on_err`` receives each `TransformError` in order. Typical uses: log the
    failures, abort on the first one (`throw_on_err`), collect them into an
    external list, or ignore them (`ignore_on_err`).
    """

    on_err: ErrorHandler

    def __post_init__(self) -> None:
        """Validate the error handler early for a clear message."""
        if not callable(self.on_err):
            raise ConfigurationError(
                f"on_err must be callable, got {type(self.on_err).__name__}",
                hint="Pass ignore_on_err, throw_on_err, log_on_err, or your own function.",
            )


def _coerce_options(
    options: UnwrapOptions | Mapping[str, Any] | ErrorHandler,
) -> UnwrapOptions:
    if isinstance(options, UnwrapOptions):
        return options
    if isinstance(options, Mapping):
        if "on_err" not in options:
            raise ConfigurationError(
                "unwrap options must provide 'on_err'",
                hint="Pass {'on_err': ignore_on_err} or UnwrapOptions(on_err=...).",
            )
        return UnwrapOptions(on_err=options["on_err"])
    return UnwrapOptions(on_err=options)


def unwrap_ok_results[I, O](
    items: Iterable[Success[O] | Failure[TransformError[I]]],
    options: UnwrapOptions | Mapping[str, Any] | ErrorHandler,
) -> list[O]:
    """Return the successful values, passing each failure to ``options.on_err``.

    Relative order of successes is preserved. Whatever ``on_err`` does
    (including raising) is the caller's policy.

    Args:
        items: The transformation results.
        options: `UnwrapOptions`, a mapping with an ``on_err`` key, or the
            error handler itself.

    Returns:
        The unwrapped outputs, one per success.
    """
    on_err = _coerce_options(options).on_err
    out: list[O] = []
    for item in items:
        match item:
            case Success(value=value):
                out.append(value)
            case Failure(error=error):
                on_err(error)
            case _:
                raise TypeError(
                    f"Expected Success or Failure, got {type(item).__name__}"
                )
    return out


def unwrap_or_default[I, O](
    items: Iterable[Success[O] | Failure[TransformError[I]]],
    default_fn: Callable[[TransformError[I]], O],
) -> list[O]:
    """Return one output per result, substituting ``default_fn(error)`` for failures.

    The output always has the same length as ``items`` and ``out[i]``
    corresponds to ``items[i]``.
    """
    out: list[O] = []
    for item in items:
        match item:
            case Success(value=value):
                out.append(value)
            case Failure(error=error):
                out.append(default_fn(error))
            case _:
                raise TypeError(
                    f"Expected Success or Failure, got {type(item).__name__}"
                )
    return out
