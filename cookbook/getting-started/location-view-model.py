#!/usr/bin/env python3
"""Recipe: Turn database records into location view models.

Problem:
    Source records may lack a location, or carry opening hours in a shape we
    cannot parse. Each bad record should be reported with its reason instead
    of crashing the batch.

Pattern:
    - Write one handler that finishes with ``g.ok(...)`` or ``g.err(...)``.
    - Bind it once with ``transform`` and run it over the batch with ``apply``.
    - Inspect failures; each one carries the original record.
"""

from __future__ import annotations

import argparse
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from cookbook.utils.presentation import (
    describe_result,
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
)
from gauntlet import TransformCompletion, apply, transform

NO_LOCATION_MESSAGE = "There is no location attached to the provided record."
INVALID_HOURS_MESSAGE = (
    "The hours of operation are in an invalid format: expected 'H:MMxm - H:MMxm'."
)
CLOSE_BEFORE_OPEN_MESSAGE = "The close time must be later than the open time"

_HOURS_PATTERN = re.compile(
    r"^(\d+)(?::(\d+))?([ap]m) - (\d+)(?::(\d+))?([ap]m)", re.IGNORECASE
)


class ClockTime(BaseModel):
    """Wall-clock time on a 24-hour dial."""

    model_config = ConfigDict(frozen=True)

    hour: int
    minute: int

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute


class LocationViewModel(BaseModel):
    """Display-ready location; serialises with camelCase keys."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    location_id: int
    location_name: str
    location_open_time: ClockTime
    location_close_time: ClockTime


def _to_24h(hour: int, meridiem: str) -> int:
    meridiem = meridiem.lower()
    if meridiem == "pm" and hour != 12:
        return hour + 12
    if meridiem == "am" and hour == 12:
        return 0
    return hour


@transform
def location_transformer(
    record: dict[str, Any], g: TransformCompletion[dict[str, Any], LocationViewModel]
):
    """Map a source record onto a `LocationViewModel`."""
    location = record.get("location")
    if not location or not isinstance(location, dict):
        return g.err(NO_LOCATION_MESSAGE)

    hours = location.get("hoursOfOperation")
    match = _HOURS_PATTERN.match(hours) if isinstance(hours, str) else None
    if match is None:
        return g.err(INVALID_HOURS_MESSAGE)

    open_time = ClockTime(
        hour=_to_24h(int(match[1]), match[3]), minute=int(match[2] or 0)
    )
    close_time = ClockTime(
        hour=_to_24h(int(match[4]), match[6]), minute=int(match[5] or 0)
    )
    if open_time.minutes > close_time.minutes:
        return g.err(CLOSE_BEFORE_OPEN_MESSAGE)

    try:
        view = LocationViewModel(
            location_id=location.get("id"),
            location_name=location.get("name"),
            location_open_time=open_time,
            location_close_time=close_time,
        )
    except ValidationError as exc:
        return g.err(str(exc))
    return g.ok(view)


def build_records(hours: list[str]) -> list[dict[str, Any]]:
    """Build one demo record per hours string, plus one without a location."""
    records: list[dict[str, Any]] = [
        {
            "id": 100 + idx,
            "location": {"id": idx + 1, "name": f"Store #{idx + 1}", "hoursOfOperation": h},
        }
        for idx, h in enumerate(hours)
    ]
    records.append({"id": 100 + len(hours)})
    return records


def main_sync(hours: list[str]) -> None:
    records = build_records(hours)
    results = apply(location_transformer, records)

    print_section("Results")
    print_kv_rows(
        [(f"record {rec['id']}", describe_result(res)) for rec, res in zip(records, results, strict=True)]
    )
    print_learning_hints(
        [
            "Next: collapse the results with unwrap_ok_results or unwrap_or_default.",
            "Next: each failure's error.value is the record that was rejected.",
        ]
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Location view-model recipe")
    parser.add_argument(
        "--hours",
        action="append",
        default=None,
        help="Hours of operation, e.g. '9:30am - 6:45pm' (repeatable)",
    )
    args = parser.parse_args()
    hours = args.hours or ["9:30am - 6:45pm", "6:45pm - 9:30am", "all day"]

    print_header("Location view models")
    main_sync(hours)


if __name__ == "__main__":
    main()
