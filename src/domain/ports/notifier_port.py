from abc import ABC, abstractmethod

from src.domain.entities.execution_report import ExecutionReport


class NotificationError(Exception):
    """Raised when a report could not be delivered.

    Never affects the child's own exit code.
    """


class NotifierPort(ABC):
    """Port for delivering an execution report to a remote destination."""

    @abstractmethod
    async def deliver(self, report: ExecutionReport) -> None:
        """Deliver the report in a single attempt.

        Raises:
            NotificationError: If delivery failed.
        """
