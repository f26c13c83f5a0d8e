from rich.markup import escape

from src.cli.theme import theme
from src.domain.entities.execution_report import ExecutionReport
from src.domain.value_objects.exit_status import ExitedWithCode, KilledBySignal
from src.infrastructure.utils.formatting import format_timestamp, split_duration

BRAND = f"[{theme.BRAND}]WING[/]"


def format_colored_duration(nanoseconds: int) -> str:
    """Rich markup duration: bold colored value followed by colored suffix."""
    parts = split_duration(nanoseconds)
    if not parts:
        return f"[{theme.DURATION_ZERO}]0s[/]"
    return " ".join(
        f"[bold {theme.DURATION_UNITS[suffix]}]{value}[/][{theme.DURATION_UNITS[suffix]}]{suffix}[/]"
        for value, suffix in parts
    )


def format_running_banner(program: str, args: list[str]) -> str:
    command_line = " ".join([program, *args])
    return f"{BRAND}: [{theme.LABEL}]Running[/] - [{theme.COMMAND}]{escape(command_line)}[/]"


def format_exit_status(status: ExitedWithCode | KilledBySignal) -> str:
    match status:
        case ExitedWithCode(code=code):
            return f"{BRAND}: Process exited with code [{theme.EXIT_CODE}]{code}[/]"
        case _:
            return f"{BRAND}: Process terminated by signal!"


def format_summary(report: ExecutionReport) -> list[str]:
    """Terminal summary lines printed after the child exits."""
    return [
        f"{BRAND}: Ran for:  {format_colored_duration(report.elapsed_ns)}.",
        f"{BRAND}: Started:  [{theme.STARTED}]{format_timestamp(report.started_at)}[/]",
        f"{BRAND}: Finished: [{theme.FINISHED}]{format_timestamp(report.finished_at)}[/]",
    ]


def format_usage(prog: str = "wing") -> str:
    return (
        f"[{theme.LABEL}]Usage[/]: [{theme.PROGRAM}]{prog}[/] "
        f"[{theme.COMMAND}]<command>[/] [{theme.COMMAND}]\\[args...][/]\n"
        f"\n[{theme.LABEL}]Example[/]: [{theme.PROGRAM}]{prog}[/] [{theme.COMMAND}]ls -la[/]"
    )
