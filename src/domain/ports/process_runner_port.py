from abc import ABC, abstractmethod

from src.domain.entities.execution_report import ExecutionReport


class SpawnError(Exception):
    """Raised when the child program cannot be started.

    Fatal for the run: no report is produced and nothing is delivered.
    """

    def __init__(self, program: str, cause: OSError) -> None:
        self.program = program
        self.cause = cause
        super().__init__(f"Failed to spawn '{program}': {cause.strerror or cause}")


class RelayError(Exception):
    """Raised when a stream relay crashes instead of finishing normally."""

    def __init__(self, stream: str, cause: BaseException) -> None:
        self.stream = stream
        self.cause = cause
        super().__init__(f"Relay for {stream} failed: {cause}")


class ProcessRunnerPort(ABC):
    """Port for running a child command to completion."""

    @abstractmethod
    async def run(self, program: str, args: list[str]) -> ExecutionReport:
        """Run program with args, forwarding and capturing its output.

        Raises:
            SpawnError: If the program could not be started.
            RelayError: If forwarding one of the output streams crashed.
        """
