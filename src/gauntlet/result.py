"""Result type for explicit, inspectable failures.

A transformation never raises for an expected failure; it returns either a
`Success` carrying the output or a `Failure` carrying the error record. Callers
branch with `isinstance`, structural pattern matching, or the helpers below.
"""

from __future__ import annotations

import dataclasses
import typing

if typing.TYPE_CHECKING:
    from collections.abc import Callable

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure")


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A successful outcome holding the produced value."""

    value: TSuccess

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap_or_else[T](self, fn: Callable[[typing.Any], T]) -> TSuccess:  # noqa: ARG002
        """Return the contained value; ``fn`` is never called."""
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure]:
    """A failed outcome holding the error record."""

    error: TFailure

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap_or_else[T](self, fn: Callable[[TFailure], T]) -> T:
        """Recover a value from the error by calling ``fn(error)``."""
        return fn(self.error)


Result = Success[TSuccess] | Failure[TFailure]


def is_success(result: Result[typing.Any, typing.Any]) -> typing.TypeGuard[Success[typing.Any]]:
    """Return True when ``result`` is the success variant."""
    return isinstance(result, Success)


def is_failure(result: Result[typing.Any, typing.Any]) -> typing.TypeGuard[Failure[typing.Any]]:
    """Return True when ``result`` is the failure variant."""
    return isinstance(result, Failure)


def unwrap_or_else[T, E, R](result: Result[T, E], fn: Callable[[E], R]) -> T | R:
    """Return the success payload, or ``fn(error)`` for a failure."""
    match result:
        case Success(value=value):
            return value
        case Failure(error=error):
            return fn(error)
        case _:
            raise TypeError(
                f"Expected Success or Failure, got {type(result).__name__}"
            )
