#!/usr/bin/env python3
"""Recipe: Choose how failed transforms are collapsed.

Problem:
    A batch of results mixes successes and failures. Downstream code wants
    plain values, but the right treatment of failures depends on the caller.

Pattern:
    - ``unwrap_ok_results`` with an ``on_err`` policy: ignore, log, collect,
      or raise at a boundary you choose.
    - ``unwrap_or_default`` when every position must be filled.
"""

from __future__ import annotations

import argparse
import logging
from typing import Any

from cookbook.utils.presentation import (
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
)
from gauntlet import (
    TransformError,
    TransformFailedError,
    UnwrapOptions,
    apply,
    ignore_on_err,
    log_on_err,
    throw_on_err,
    transform,
    unwrap_ok_results,
    unwrap_or_default,
)


@transform
def parse_quantity(text: str, g):
    """Parse a non-negative whole quantity."""
    cleaned = text.strip()
    if not cleaned.isdigit():
        return g.err(f"{text!r} is not a whole number")
    return g.ok(int(cleaned))


def collapse_all(values: list[str]) -> dict[str, Any]:
    """Collapse the same batch under every policy and report the outputs."""
    results = apply(parse_quantity, values)

    collected: list[TransformError[str]] = []
    outcome: dict[str, Any] = {
        "ignored": unwrap_ok_results(results, UnwrapOptions(on_err=ignore_on_err)),
        "logged": unwrap_ok_results(results, UnwrapOptions(on_err=log_on_err)),
        "collected": unwrap_ok_results(results, {"on_err": collected.append}),
        "defaulted": unwrap_or_default(results, lambda _e: 0),
        "errors": [e.message for e in collected],
    }
    try:
        unwrap_ok_results(results, UnwrapOptions(on_err=throw_on_err))
        outcome["raised"] = None
    except TransformFailedError as exc:
        outcome["raised"] = str(exc)
    return outcome


def main() -> None:
    parser = argparse.ArgumentParser(description="Unwrap policies recipe")
    parser.add_argument(
        "values", nargs="*", default=["3", "seven", "12", "-1", "40"]
    )
    parser.add_argument("--verbose", action="store_true", help="Show log_on_err output")
    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    print_header("Unwrap policies")
    outcome = collapse_all(list(args.values))

    print_section("Outputs")
    print_kv_rows(
        [
            ("ignore_on_err", outcome["ignored"]),
            ("log_on_err", outcome["logged"]),
            ("collect into list", outcome["collected"]),
            ("unwrap_or_default(0)", outcome["defaulted"]),
            ("throw_on_err", outcome["raised"] or "no failure"),
        ]
    )
    if outcome["errors"]:
        print_section("Collected errors")
        for message in outcome["errors"]:
            print(f"- {message}")
    print_learning_hints(
        [
            "Next: raise at the edge of your service with throw_on_err.",
            "Next: keep positional alignment with unwrap_or_default.",
        ]
    )


if __name__ == "__main__":
    main()
