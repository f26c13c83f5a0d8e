import io
import sys

import httpx
import pytest

from src.cli.runner import NOT_FOUND_EXIT_CODE, RELAY_ERROR_EXIT_CODE, run_wrapped_async
from src.infrastructure.process.process_supervisor import ProcessSupervisor

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX commands")


def discord_transport(
    requests: list[httpx.Request],
    probe_status: int = 200,
    post_status: int = 200,
) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.method == "GET":
            return httpx.Response(probe_status)
        return httpx.Response(post_status)

    return httpx.MockTransport(handler)


class BrokenSink(io.BytesIO):
    def write(self, data: bytes) -> int:  # type: ignore[override]
        raise BrokenPipeError("sink closed")


@pytest.fixture
def stdout_sink() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def supervisor(stdout_sink: io.BytesIO) -> ProcessSupervisor:
    return ProcessSupervisor(stdout_sink=stdout_sink, stderr_sink=io.BytesIO())


class TestWingEndToEnd:
    async def test_echo_hello_is_forwarded_and_reported(
        self,
        webhook_env: dict[str, str],
        supervisor: ProcessSupervisor,
        stdout_sink: io.BytesIO,
    ) -> None:
        requests: list[httpx.Request] = []

        exit_code = await run_wrapped_async(
            "echo",
            ["hello"],
            environ=webhook_env,
            runner=supervisor,
            transport=discord_transport(requests),
        )

        assert exit_code == 0
        assert stdout_sink.getvalue() == b"hello\n"
        assert [r.method for r in requests] == ["GET", "POST"]

        body = requests[1].content
        assert b"Command: echo hello" in body
        assert b'name="file1"; filename="stdout.txt"' in body
        assert b"\r\n\r\nhello\n\r\n" in body
        assert b'name="file2"' not in body

    async def test_nonexistent_program_sends_no_report(
        self,
        webhook_env: dict[str, str],
        supervisor: ProcessSupervisor,
    ) -> None:
        requests: list[httpx.Request] = []

        exit_code = await run_wrapped_async(
            "definitely-not-a-real-program-xyz",
            [],
            environ=webhook_env,
            runner=supervisor,
            transport=discord_transport(requests),
        )

        assert exit_code == NOT_FOUND_EXIT_CODE
        assert [r.method for r in requests if r.method == "POST"] == []

    @pytest.mark.parametrize("post_status", [200, 500])
    async def test_child_exit_code_is_propagated(
        self,
        webhook_env: dict[str, str],
        supervisor: ProcessSupervisor,
        post_status: int,
    ) -> None:
        requests: list[httpx.Request] = []

        exit_code = await run_wrapped_async(
            "sh",
            ["-c", "exit 3"],
            environ=webhook_env,
            runner=supervisor,
            transport=discord_transport(requests, post_status=post_status),
        )

        assert exit_code == 3
        assert [r.method for r in requests] == ["GET", "POST"]

    async def test_signalled_child_exits_with_one(
        self,
        webhook_env: dict[str, str],
        supervisor: ProcessSupervisor,
    ) -> None:
        requests: list[httpx.Request] = []

        exit_code = await run_wrapped_async(
            "sh",
            ["-c", "kill -TERM $$"],
            environ=webhook_env,
            runner=supervisor,
            transport=discord_transport(requests),
        )

        assert exit_code == 1

    async def test_unreachable_webhook_never_spawns_child(
        self,
        webhook_env: dict[str, str],
        tmp_path,
    ) -> None:
        requests: list[httpx.Request] = []
        marker = tmp_path / "ran"

        exit_code = await run_wrapped_async(
            "touch",
            [str(marker)],
            environ=webhook_env,
            runner=ProcessSupervisor(stdout_sink=io.BytesIO(), stderr_sink=io.BytesIO()),
            transport=discord_transport(requests, probe_status=404),
        )

        assert exit_code == 1
        assert not marker.exists()
        assert [r.method for r in requests] == ["GET"]

    async def test_missing_environment_makes_no_request(self, supervisor: ProcessSupervisor) -> None:
        requests: list[httpx.Request] = []

        exit_code = await run_wrapped_async(
            "echo",
            ["hello"],
            environ={},
            runner=supervisor,
            transport=discord_transport(requests),
        )

        assert exit_code == 1
        assert requests == []

    async def test_broken_output_aborts_without_report(self, webhook_env: dict[str, str]) -> None:
        requests: list[httpx.Request] = []

        exit_code = await run_wrapped_async(
            "sh",
            ["-c", "head -c 300000 /dev/zero"],
            environ=webhook_env,
            runner=ProcessSupervisor(stdout_sink=BrokenSink(), stderr_sink=io.BytesIO()),
            transport=discord_transport(requests),
        )

        assert exit_code == RELAY_ERROR_EXIT_CODE
        assert [r.method for r in requests] == ["GET"]
