from datetime import UTC, datetime, timedelta, timezone

import pytest

from src.domain.entities.execution_report import ExecutionReport
from src.infrastructure.utils.formatting import (
    format_duration,
    format_report,
    format_timestamp,
    split_duration,
)

SECOND = 10**9


def test_format_duration_zero() -> None:
    assert format_duration(0) == "0s"


def test_format_duration_seconds_only() -> None:
    assert format_duration(5 * SECOND) == "5s"


def test_format_duration_minutes_only() -> None:
    assert format_duration(120 * SECOND) == "2m"


def test_format_duration_hours_and_minutes() -> None:
    assert format_duration(90 * 60 * SECOND) == "1h 30m"


def test_format_duration_days() -> None:
    assert format_duration(2 * 86_400 * SECOND + 3 * SECOND) == "2d 3s"


def test_format_duration_sub_second_units() -> None:
    assert format_duration(1_002_003_004) == "1s 2ms 3µs 4ns"


def test_format_duration_nanoseconds_only() -> None:
    assert format_duration(7) == "7ns"


def test_format_duration_negative_raises() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        format_duration(-1)


def test_split_duration_skips_zero_units() -> None:
    assert split_duration(3_600 * SECOND + 1_000) == [(1, "h"), (1, "µs")]


def test_format_timestamp_layout() -> None:
    eastern = timezone(timedelta(hours=-5), "EST")
    moment = datetime(2024, 1, 2, 15, 4, 5, tzinfo=eastern)

    rendered = format_timestamp(moment)
    local = moment.astimezone()

    assert rendered.startswith(local.strftime("%Y-%m-%d: %I:%M:%S"))
    assert rendered[len("YYYY-MM-DD: HH:MM:SS") :][:2] in ("am", "pm")
    assert rendered.endswith(f" - {local.strftime('%Z')}")


def test_format_timestamp_meridiem() -> None:
    # Naive datetimes are interpreted as system local time
    morning = datetime(2024, 1, 2, 9, 0, 0).astimezone()
    evening = datetime(2024, 1, 2, 21, 0, 0).astimezone()

    assert "09:00:00am" in format_timestamp(morning)
    assert "09:00:00pm" in format_timestamp(evening)


def test_format_report_layout(sample_report: ExecutionReport) -> None:
    text = format_report(sample_report)
    lines = text.split("\n")

    assert lines[0] == "Command: echo hello"
    assert lines[1] == "\tRan for:  1s 500ms."
    assert lines[2] == f"\tStarted:  {format_timestamp(sample_report.started_at)}."
    assert lines[3] == f"\tFinished: {format_timestamp(sample_report.finished_at)}."
    assert len(lines) == 4


def test_format_report_without_args(sample_report: ExecutionReport) -> None:
    report = sample_report.model_copy(update={"program": "true", "args": []})

    assert format_report(report).startswith("Command: true\n")


def test_format_report_zero_duration(sample_report: ExecutionReport) -> None:
    report = sample_report.model_copy(
        update={"elapsed_ns": 0, "finished_at": datetime(2024, 5, 1, 14, 30, 5, tzinfo=UTC)}
    )

    assert "\tRan for:  0s." in format_report(report)
