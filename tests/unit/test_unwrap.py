"""Collapsing result lists into plain values."""

from __future__ import annotations

import logging
from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from gauntlet import (
    ConfigurationError,
    Failure,
    Success,
    TransformError,
    TransformFailedError,
    UnwrapOptions,
    ignore_on_err,
    log_on_err,
    throw_on_err,
    unwrap_ok_results,
    unwrap_or_default,
)

pytestmark = pytest.mark.unit


def _err(value: Any, message: str = "bad") -> Failure[TransformError[Any]]:
    return Failure(TransformError(value=value, message=message))


MIXED = [Success(1), _err("a", "first"), Success(2), _err("b", "second"), Success(3)]

results_strategy = st.lists(
    st.one_of(
        st.integers().map(Success),
        st.text(max_size=5).map(lambda v: _err(v, f"rejected {v!r}")),
    ),
    max_size=25,
)


# --- unwrap_ok_results ---


@given(items=results_strategy)
@settings(max_examples=30, deadline=None, derandomize=True)
def test_unwrap_ok_results_keeps_successes_in_order(items: list[Any]) -> None:
    """Property: outputs are the success payloads; on_err sees each failure once, in order."""
    seen: list[TransformError[Any]] = []

    out = unwrap_ok_results(items, UnwrapOptions(on_err=seen.append))

    assert out == [r.value for r in items if isinstance(r, Success)]
    assert seen == [r.error for r in items if isinstance(r, Failure)]


def test_unwrap_ok_results_collects_errors_externally() -> None:
    collected: list[TransformError[Any]] = []
    out = unwrap_ok_results(MIXED, UnwrapOptions(on_err=collected.append))

    assert out == [1, 2, 3]
    assert [(e.value, e.message) for e in collected] == [("a", "first"), ("b", "second")]


def test_unwrap_ok_results_with_ignore_drops_failures() -> None:
    assert unwrap_ok_results(MIXED, UnwrapOptions(on_err=ignore_on_err)) == [1, 2, 3]


def test_unwrap_ok_results_without_failures_keeps_length() -> None:
    items = [Success("x"), Success("y")]
    assert unwrap_ok_results(items, UnwrapOptions(on_err=throw_on_err)) == ["x", "y"]


def test_throw_on_err_stops_at_first_failure() -> None:
    with pytest.raises(TransformFailedError, match="^first$") as exc:
        unwrap_ok_results(MIXED, UnwrapOptions(on_err=throw_on_err))

    assert exc.value.error == TransformError(value="a", message="first")
    assert exc.value.value == "a"


def test_log_on_err_logs_and_continues(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="gauntlet.unwrap"):
        out = unwrap_ok_results(MIXED, UnwrapOptions(on_err=log_on_err))

    assert out == [1, 2, 3]
    assert [r.getMessage() for r in caplog.records] == [
        "Dropping failed transform of 'a': first",
        "Dropping failed transform of 'b': second",
    ]


def test_unwrap_ok_results_accepts_mapping_options() -> None:
    collected: list[Any] = []
    out = unwrap_ok_results(MIXED, {"on_err": collected.append})
    assert out == [1, 2, 3]
    assert len(collected) == 2


def test_unwrap_ok_results_accepts_bare_callable() -> None:
    assert unwrap_ok_results(MIXED, ignore_on_err) == [1, 2, 3]


def test_mapping_options_without_on_err_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as exc:
        unwrap_ok_results(MIXED, {})
    assert exc.value.hint is not None


def test_unwrap_options_requires_callable() -> None:
    with pytest.raises(ConfigurationError, match="on_err must be callable"):
        UnwrapOptions(on_err="log")  # type: ignore[arg-type]


def test_unwrap_ok_results_rejects_non_results() -> None:
    with pytest.raises(TypeError, match="Expected Success or Failure"):
        unwrap_ok_results([Success(1), 2], ignore_on_err)  # type: ignore[list-item]


# --- unwrap_or_default ---


@given(items=results_strategy)
@settings(max_examples=30, deadline=None, derandomize=True)
def test_unwrap_or_default_fills_every_position(items: list[Any]) -> None:
    """Property: same length; failures replaced by default_fn(error)."""
    out = unwrap_or_default(items, lambda e: f"default:{e.message}")

    assert len(out) == len(items)
    for result, value in zip(items, out, strict=True):
        if isinstance(result, Success):
            assert value == result.value
        else:
            assert value == f"default:{result.error.message}"


def test_unwrap_or_default_passes_error_record() -> None:
    seen: list[TransformError[Any]] = []

    def default_fn(error: TransformError[Any]) -> int:
        seen.append(error)
        return -1

    assert unwrap_or_default(MIXED, default_fn) == [1, -1, 2, -1, 3]
    assert [e.value for e in seen] == ["a", "b"]


def test_unwrap_or_default_empty() -> None:
    assert unwrap_or_default([], lambda _e: 0) == []


def test_ignore_on_err_returns_none() -> None:
    assert ignore_on_err(TransformError(value=1, message="x")) is None
