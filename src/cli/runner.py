from collections.abc import Mapping

import httpx
from loguru import logger
from rich.console import Console
from rich.markup import escape

from src.application.use_cases.run_and_report import RunAndReport
from src.cli.formatters.report_formatter import (
    format_exit_status,
    format_running_banner,
    format_summary,
)
from src.cli.theme import theme
from src.domain.ports.process_runner_port import ProcessRunnerPort, RelayError, SpawnError
from src.infrastructure.process.process_supervisor import ProcessSupervisor
from src.infrastructure.webhook.endpoint import load_endpoint_from_env
from src.infrastructure.webhook.errors import WebhookConfigError
from src.infrastructure.webhook.notifier import DiscordWebhookNotifier

# Exit codes for failures of the wrapper itself
CONFIG_ERROR_EXIT_CODE = 1
SPAWN_ERROR_EXIT_CODE = 1
RELAY_ERROR_EXIT_CODE = 1
NOT_FOUND_EXIT_CODE = 127
NOT_EXECUTABLE_EXIT_CODE = 126

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def spawn_error_exit_code(error: SpawnError) -> int:
    if isinstance(error.cause, FileNotFoundError):
        return NOT_FOUND_EXIT_CODE
    if isinstance(error.cause, PermissionError):
        return NOT_EXECUTABLE_EXIT_CODE
    return SPAWN_ERROR_EXIT_CODE


async def run_wrapped_async(
    program: str,
    args: list[str],
    environ: Mapping[str, str] | None = None,
    runner: ProcessRunnerPort | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Validate the webhook, run the command, deliver the report.

    Returns the exit code the wrapper should terminate with.
    """
    try:
        endpoint = await load_endpoint_from_env(environ, transport=transport)
    except WebhookConfigError as e:
        logger.error("Webhook configuration error: {}", e)
        err_console.print(f"[{theme.ERROR_BOLD}]Error:[/] {escape(str(e))}")
        return CONFIG_ERROR_EXIT_CODE

    use_case = RunAndReport(
        runner=runner or ProcessSupervisor(),
        notifier=DiscordWebhookNotifier(endpoint, transport=transport),
    )

    console.print(format_running_banner(program, args))

    try:
        outcome = await use_case.execute(program, args)
    except SpawnError as e:
        err_console.print(f"[{theme.ERROR_BOLD}]Error:[/] {escape(str(e))}")
        return spawn_error_exit_code(e)
    except RelayError as e:
        logger.error("Run aborted: {}", e)
        err_console.print(f"[{theme.ERROR_BOLD}]Error:[/] {escape(str(e))}")
        return RELAY_ERROR_EXIT_CODE

    if outcome.delivery_error is not None:
        err_console.print(
            f"[{theme.ERROR_BOLD}]Error:[/] {escape(str(outcome.delivery_error))}"
        )

    err_console.print(format_exit_status(outcome.report.exit_status))
    for line in format_summary(outcome.report):
        console.print(line)

    return outcome.exit_code
