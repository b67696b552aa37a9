"""Transform binding and batch application.

A handler receives its input together with a `TransformCompletion` and must
finish through one of its two constructors:

    parse_int = transform(lambda text, g: g.ok(int(text)) if text.isdigit() else g.err("not a number"))

    parse_int("42")   # Success(value=42)
    parse_int("x")    # Failure(error=TransformError(value='x', message='not a number'))

Handlers report expected failures with ``err``; anything they raise is a bug
and propagates to the caller untouched.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import dataclasses
import functools
import logging
import typing
from typing import TYPE_CHECKING, Any, Protocol

from gauntlet.config import Config
from gauntlet.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)

I = typing.TypeVar("I")  # noqa: E741
O = typing.TypeVar("O")  # noqa: E741


@dataclasses.dataclass(frozen=True, slots=True)
class TransformError[I]:
    """Why a transformation could not be completed.

    Attributes:
        value: The original input passed to the transform.
        message: Human-readable reason for the failure.
    """

    value: I
    message: str


TransformResult = Success[O] | Failure[TransformError[I]]
# Alias used for handler return annotations.
TransformReturn = TransformResult


@dataclasses.dataclass(frozen=True, slots=True)
class TransformCompletion[I, O]:
    """Per-call completion handed to a handler.

    Bound to the input of a single invocation so ``err`` can record it
    without the handler passing it back.
    """

    input: I

    def ok(self, value: O) -> Success[O]:
        """Complete successfully with ``value``."""
        return Success(value)

    def err(self, message: str) -> Failure[TransformError[I]]:
        """Complete with a failure explaining why the input was rejected."""
        return Failure(TransformError(value=self.input, message=message))


class TransformHandler[I, O](Protocol):
    """Function performing the transformation through a completion."""

    def __call__(
        self, input: I, completion: TransformCompletion[I, O], /
    ) -> Success[O] | Failure[TransformError[I]]: ...


class TransformFunction[I, O](Protocol):
    """Callable produced by `transform`, invoked with the input only."""

    def __call__(self, input: I, /) -> Success[O] | Failure[TransformError[I]]: ...


def transform[I, O](f: TransformHandler[I, O]) -> TransformFunction[I, O]:
    """Bind a handler into a reusable, input-only transform.

    Args:
        f: Handler receiving ``(input, completion)``.

    Returns:
        A callable returning the handler's result unchanged. Usable as a
        decorator; the handler's name and docstring are preserved.

    Raises:
        TypeError: If ``f`` is not callable.
    """
    if not callable(f):
        raise TypeError(f"transform() expects a callable handler, got {type(f).__name__}")

    @functools.wraps(f)
    def bound(input: I) -> Success[O] | Failure[TransformError[I]]:
        return f(input, TransformCompletion(input))

    return bound


def apply[I, O](
    t: TransformFunction[I, O],
    inputs: Iterable[I],
    *,
    config: Config | None = None,
) -> list[Success[O] | Failure[TransformError[I]]]:
    """Apply a transform to every input and return all results.

    ``results[i]`` is always ``t(inputs[i])``. A failure never stops the
    remaining inputs from being processed; exceptions raised by the handler
    propagate.

    Args:
        t: The bound transform.
        inputs: Items to transform, in order.
        config: Optional configuration; resolved from the environment when
            omitted. With ``apply_workers > 1`` inputs run on a thread pool.

    Returns:
        One result per input, in input order.
    """
    cfg = config if config is not None else Config()
    items = list(inputs)
    workers = typing.cast("int", cfg.apply_workers)

    results: list[Success[O] | Failure[TransformError[I]]]
    if workers > 1 and len(items) > 1:
        with ThreadPoolExecutor(max_workers=min(workers, len(items))) as pool:
            # Executor.map yields in submission order.
            results = list(pool.map(t, items))
    else:
        results = []
        for item in items:
            results.append(t(item))

    failures = 0
    for idx, result in enumerate(results):
        if isinstance(result, Failure):
            failures += 1
            if cfg.log_failures:
                log.warning("Transform failed for input %d: %s", idx, _message_of(result))

    log.debug(
        "Applied %s to %d inputs (%d failed, workers=%d)",
        getattr(t, "__name__", type(t).__name__),
        len(items),
        failures,
        workers,
    )
    return results


def _message_of(result: Failure[Any]) -> str:
    error = result.error
    return error.message if isinstance(error, TransformError) else str(error)
