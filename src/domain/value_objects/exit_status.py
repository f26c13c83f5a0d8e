from typing import Annotated, Literal

from pydantic import BaseModel, Field


class ExitedWithCode(BaseModel, frozen=True):
    """Child exited normally with an explicit exit code."""

    kind: Literal["code"] = "code"
    code: int


class KilledBySignal(BaseModel, frozen=True):
    """Child was terminated by a signal instead of exiting."""

    kind: Literal["signal"] = "signal"
    signal: int | None = None


ExitStatus = Annotated[ExitedWithCode | KilledBySignal, Field(discriminator="kind")]

# Substituted for the wrapper's own exit code when the child was signalled
SIGNAL_EXIT_CODE = 1


def exit_status_from_returncode(returncode: int) -> ExitedWithCode | KilledBySignal:
    """Map an asyncio/subprocess return code to an ExitStatus.

    Negative return codes mean the child was killed by signal ``-returncode``.
    """
    if returncode < 0:
        return KilledBySignal(signal=-returncode)
    return ExitedWithCode(code=returncode)


def wrapper_exit_code(status: ExitedWithCode | KilledBySignal) -> int:
    match status:
        case ExitedWithCode(code=code):
            return code
        case KilledBySignal():
            return SIGNAL_EXIT_CODE
        case _:
            raise ValueError(f"Unsupported exit status: {status!r}")
