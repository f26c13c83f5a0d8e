from datetime import datetime

from pydantic import BaseModel, Field

from src.domain.value_objects.exit_status import ExitStatus


class ExecutionReport(BaseModel, frozen=True):
    """Immutable record of one completed child run."""

    program: str
    args: list[str] = Field(default_factory=list)
    elapsed_ns: int = Field(ge=0, description="Monotonic wall-clock duration in nanoseconds")
    started_at: datetime
    finished_at: datetime
    exit_status: ExitStatus
    stdout: str = ""
    stderr: str = ""

    @property
    def command_line(self) -> str:
        """Program followed by its arguments, space-separated."""
        return " ".join([self.program, *self.args])
