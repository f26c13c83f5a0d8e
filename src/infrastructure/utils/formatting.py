from datetime import datetime

from src.domain.entities.execution_report import ExecutionReport

# (suffix, nanoseconds per unit), largest first
DURATION_UNITS: list[tuple[str, int]] = [
    ("d", 86_400 * 10**9),
    ("h", 3_600 * 10**9),
    ("m", 60 * 10**9),
    ("s", 10**9),
    ("ms", 10**6),
    ("µs", 10**3),
    ("ns", 1),
]


def split_duration(nanoseconds: int) -> list[tuple[int, str]]:
    """Split a duration into its non-zero (value, suffix) parts, largest
    first."""
    if nanoseconds < 0:
        raise ValueError("nanoseconds must be non-negative")

    parts: list[tuple[int, str]] = []
    remainder = nanoseconds
    for suffix, size in DURATION_UNITS:
        value, remainder = divmod(remainder, size)
        if value:
            parts.append((value, suffix))
    return parts


def format_duration(nanoseconds: int) -> str:
    """Convert nanoseconds to a human-readable duration like '1h 30m 2s 5ms'."""
    parts = split_duration(nanoseconds)
    if not parts:
        return "0s"
    return " ".join(f"{value}{suffix}" for value, suffix in parts)


def format_timestamp(moment: datetime) -> str:
    """Render a timestamp in local time as 'YYYY-MM-DD: HH:MM:SSam - TZ'."""
    local = moment.astimezone()
    clock = local.strftime("%Y-%m-%d: %I:%M:%S")
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{clock}{meridiem} - {local.strftime('%Z')}"


def format_report(report: ExecutionReport) -> str:
    """Plain-text report shared by the webhook message and the terminal."""
    return (
        f"Command: {report.command_line}"
        f"\n\tRan for:  {format_duration(report.elapsed_ns)}."
        f"\n\tStarted:  {format_timestamp(report.started_at)}."
        f"\n\tFinished: {format_timestamp(report.finished_at)}."
    )
