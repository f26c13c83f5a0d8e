from src.cli.formatters.report_formatter import (
    format_colored_duration,
    format_exit_status,
    format_running_banner,
    format_summary,
    format_usage,
)

__all__ = [
    "format_colored_duration",
    "format_exit_status",
    "format_running_banner",
    "format_summary",
    "format_usage",
]
