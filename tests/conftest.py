from collections.abc import Callable
from datetime import UTC, datetime

import httpx
import pytest

from src.domain.entities.execution_report import ExecutionReport
from src.domain.value_objects.exit_status import ExitedWithCode
from src.infrastructure.webhook.endpoint import UnvalidatedWebhook, WebhookEndpoint

WEBHOOK_ID = 123456789012345678
WEBHOOK_TOKEN = "abc_DEF-123"


@pytest.fixture
def webhook_env() -> dict[str, str]:
    return {"WING_WEBHOOK_ID": str(WEBHOOK_ID), "WING_WEBHOOK_TOKEN": WEBHOOK_TOKEN}


@pytest.fixture
def sample_report() -> ExecutionReport:
    return ExecutionReport(
        program="echo",
        args=["hello"],
        elapsed_ns=1_500_000_000,
        started_at=datetime(2024, 5, 1, 14, 30, 5, tzinfo=UTC),
        finished_at=datetime(2024, 5, 1, 14, 30, 6, tzinfo=UTC),
        exit_status=ExitedWithCode(code=0),
        stdout="hello\n",
        stderr="",
    )


def make_transport(
    status_code: int = 200,
    requests: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """MockTransport answering every request with status_code, recording
    requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code)

    return httpx.MockTransport(handler)


@pytest.fixture
def transport_factory() -> Callable[..., httpx.MockTransport]:
    return make_transport


@pytest.fixture
async def endpoint() -> WebhookEndpoint:
    return await UnvalidatedWebhook(id=WEBHOOK_ID, token=WEBHOOK_TOKEN).check(
        transport=make_transport(200)
    )
