from src.domain.value_objects.exit_status import (
    SIGNAL_EXIT_CODE,
    ExitedWithCode,
    ExitStatus,
    KilledBySignal,
    exit_status_from_returncode,
    wrapper_exit_code,
)

__all__ = [
    "SIGNAL_EXIT_CODE",
    "ExitedWithCode",
    "ExitStatus",
    "KilledBySignal",
    "exit_status_from_returncode",
    "wrapper_exit_code",
]
