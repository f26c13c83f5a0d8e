from dataclasses import dataclass

from loguru import logger

from src.domain.entities.execution_report import ExecutionReport
from src.domain.ports.notifier_port import NotificationError, NotifierPort
from src.domain.ports.process_runner_port import ProcessRunnerPort
from src.domain.value_objects.exit_status import wrapper_exit_code


@dataclass
class RunOutcome:
    report: ExecutionReport
    exit_code: int
    delivery_error: NotificationError | None = None

    @property
    def delivered(self) -> bool:
        return self.delivery_error is None


class RunAndReport:
    """Run a child command, then deliver its report exactly once.

    SpawnError and RelayError from the runner propagate untouched, so nothing
    is delivered for a run that never produced a report. A delivery failure
    is recorded on the outcome and never changes the exit code.
    """

    def __init__(self, runner: ProcessRunnerPort, notifier: NotifierPort) -> None:
        self.runner = runner
        self.notifier = notifier

    async def execute(self, program: str, args: list[str]) -> RunOutcome:
        report = await self.runner.run(program, args)
        exit_code = wrapper_exit_code(report.exit_status)

        try:
            await self.notifier.deliver(report)
        except NotificationError as e:
            logger.error("Could not deliver report for '{}': {}", report.command_line, e)
            return RunOutcome(report=report, exit_code=exit_code, delivery_error=e)

        return RunOutcome(report=report, exit_code=exit_code)
