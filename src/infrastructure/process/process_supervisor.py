import asyncio
import sys
import time
from datetime import UTC, datetime
from typing import BinaryIO

from loguru import logger

from src.domain.entities.execution_report import ExecutionReport
from src.domain.ports.process_runner_port import ProcessRunnerPort, RelayError, SpawnError
from src.domain.value_objects.exit_status import KilledBySignal, exit_status_from_returncode
from src.infrastructure.process.stream_relay import CHUNK_SIZE, StreamRelay


class ProcessSupervisor(ProcessRunnerPort):
    """Run one child command end-to-end.

    The child's stdout and stderr are piped through two concurrent
    StreamRelay tasks; stdin is inherited from the parent. Sinks default to
    the parent's own stdout/stderr, resolved at run time.
    """

    def __init__(
        self,
        stdout_sink: BinaryIO | None = None,
        stderr_sink: BinaryIO | None = None,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        self._stdout_sink = stdout_sink
        self._stderr_sink = stderr_sink
        self._chunk_size = chunk_size

    async def run(self, program: str, args: list[str]) -> ExecutionReport:
        stdout_sink = self._stdout_sink or sys.stdout.buffer
        stderr_sink = self._stderr_sink or sys.stderr.buffer

        started_at = datetime.now(UTC)
        start = time.monotonic_ns()

        try:
            proc = await asyncio.create_subprocess_exec(
                program,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error("Failed to spawn '{}': {}", program, e)
            raise SpawnError(program, e) from e

        logger.info("Spawned '{}' with pid {}", program, proc.pid)

        assert proc.stdout is not None
        assert proc.stderr is not None
        relays = {
            "stdout": StreamRelay(proc.stdout, stdout_sink, "stdout", self._chunk_size),
            "stderr": StreamRelay(proc.stderr, stderr_sink, "stderr", self._chunk_size),
        }
        tasks = {name: asyncio.create_task(relay.run()) for name, relay in relays.items()}

        returncode = await proc.wait()
        elapsed_ns = time.monotonic_ns() - start
        finished_at = datetime.now(UTC)

        results = await asyncio.gather(*tasks.values(), return_exceptions=True)
        captured: dict[str, str] = {}
        for name, result in zip(tasks, results, strict=True):
            if isinstance(result, BaseException):
                logger.error("Relay for {} crashed: {}", name, result)
                raise RelayError(name, result) from result
            captured[name] = result

        exit_status = exit_status_from_returncode(returncode)
        if isinstance(exit_status, KilledBySignal):
            logger.warning("'{}' terminated by signal {}", program, exit_status.signal)
        else:
            logger.info("'{}' exited with code {}", program, exit_status.code)

        return ExecutionReport(
            program=program,
            args=list(args),
            elapsed_ns=elapsed_ns,
            started_at=started_at,
            finished_at=finished_at,
            exit_status=exit_status,
            stdout=captured["stdout"],
            stderr=captured["stderr"],
        )
