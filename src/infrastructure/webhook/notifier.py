import httpx
from loguru import logger

from src.domain.entities.execution_report import ExecutionReport
from src.domain.ports.notifier_port import NotifierPort
from src.infrastructure.utils.formatting import format_report
from src.infrastructure.webhook.endpoint import HTTP_TIMEOUT_S, WebhookEndpoint
from src.infrastructure.webhook.errors import WebhookDeliveryError

# (field name, filename) of the optional attachments
STDOUT_ATTACHMENT = ("file1", "stdout.txt")
STDERR_ATTACHMENT = ("file2", "stderr.txt")

MultipartFields = list[tuple[str, tuple[str | None, str] | tuple[str, str, str]]]


def build_report_form(report: ExecutionReport) -> MultipartFields:
    """Build the multipart fields for a report.

    `content` is always present; stdout/stderr attachments only when the
    capture is non-empty. A filename of None makes `content` a plain form
    field while keeping the body multipart/form-data.
    """
    fields: MultipartFields = [("content", (None, format_report(report)))]

    for (name, filename), text in (
        (STDOUT_ATTACHMENT, report.stdout),
        (STDERR_ATTACHMENT, report.stderr),
    ):
        if text:
            fields.append((name, (filename, text, "text/plain")))

    return fields


class DiscordWebhookNotifier(NotifierPort):
    """Deliver reports to a validated Discord webhook in a single POST."""

    def __init__(
        self,
        endpoint: WebhookEndpoint,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = HTTP_TIMEOUT_S,
    ) -> None:
        self.endpoint = endpoint
        self._transport = transport
        self._timeout = timeout

    async def deliver(self, report: ExecutionReport) -> None:
        fields = build_report_form(report)
        logger.debug(
            "Delivering report for '{}' with {} attachment(s)",
            report.command_line,
            len(fields) - 1,
        )

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.post(self.endpoint.url, files=fields)
        except httpx.HTTPError as e:
            logger.error("Report delivery failed: {}", e)
            raise WebhookDeliveryError(error=e) from e

        if not response.is_success:
            logger.error("Report delivery rejected with status {}", response.status_code)
            raise WebhookDeliveryError(status=response.status_code)

        logger.info("Report delivered to webhook {}", self.endpoint.id)
