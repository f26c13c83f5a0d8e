"""Staged construction of a validated webhook endpoint.

    WebhookBuilder --id()--> WebhookWithId --token()--> UnvalidatedWebhook
        --check()--> WebhookEndpoint

Each stage either returns the next one or raises a dedicated
WebhookConfigError, so callers can tell exactly which input was wrong.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx
from loguru import logger

from src.infrastructure.webhook.errors import (
    WEBHOOK_ID_VAR_NAME,
    WEBHOOK_TOKEN_VAR_NAME,
    InvalidWebhookIdError,
    InvalidWebhookTokenError,
    InvalidWebhookUrlError,
    MissingWebhookIdError,
    MissingWebhookTokenError,
    WebhookRequestError,
)

DISCORD_WEBHOOK_BASE_URL = "https://discord.com/api/webhooks"
HTTP_TIMEOUT_S = 30.0
U64_MAX = 2**64 - 1

_ID_PATTERN = re.compile(r"\+?[0-9]+")
_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_-]*")

# Only UnvalidatedWebhook.check() holds this key
_CHECKED = object()


def parse_webhook_id(raw: str) -> int:
    """Parse a decimal unsigned 64-bit webhook id."""
    if not _ID_PATTERN.fullmatch(raw):
        raise InvalidWebhookIdError(raw)
    value = int(raw)
    if value > U64_MAX:
        raise InvalidWebhookIdError(raw)
    return value


def parse_webhook_token(raw: str) -> str:
    """Accept a token made only of ASCII letters, digits, `_` and `-`."""
    if not _TOKEN_PATTERN.fullmatch(raw):
        raise InvalidWebhookTokenError(raw)
    return raw


def construct_webhook_url(webhook_id: int, token: str, base_url: str = DISCORD_WEBHOOK_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{webhook_id}/{token}"


@dataclass(frozen=True)
class WebhookEndpoint:
    """A webhook id/token pair confirmed reachable.

    Obtain one through the builder pipeline; direct construction fails.
    """

    id: int
    token: str = field(repr=False)
    base_url: str = DISCORD_WEBHOOK_BASE_URL
    _key: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._key is not _CHECKED:
            raise TypeError("WebhookEndpoint can only be created by UnvalidatedWebhook.check()")

    @property
    def url(self) -> str:
        return construct_webhook_url(self.id, self.token, self.base_url)


@dataclass(frozen=True)
class UnvalidatedWebhook:
    id: int
    token: str = field(repr=False)
    base_url: str = DISCORD_WEBHOOK_BASE_URL

    @property
    def url(self) -> str:
        return construct_webhook_url(self.id, self.token, self.base_url)

    async def check(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = HTTP_TIMEOUT_S,
    ) -> WebhookEndpoint:
        """Probe the webhook URL with a GET; only a 2xx status passes."""
        url = self.url
        logger.debug("Checking webhook {} is reachable", self.id)

        try:
            async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            raise WebhookRequestError(url, e) from e

        if not response.is_success:
            raise InvalidWebhookUrlError(url, response.status_code)

        logger.info("Webhook {} validated", self.id)
        return WebhookEndpoint(
            id=self.id, token=self.token, base_url=self.base_url, _key=_CHECKED
        )


@dataclass(frozen=True)
class WebhookWithId:
    id: int
    base_url: str = DISCORD_WEBHOOK_BASE_URL

    def token(self, raw: str) -> UnvalidatedWebhook:
        return UnvalidatedWebhook(
            id=self.id, token=parse_webhook_token(raw), base_url=self.base_url
        )


@dataclass(frozen=True)
class WebhookBuilder:
    base_url: str = DISCORD_WEBHOOK_BASE_URL

    def id(self, raw: str) -> WebhookWithId:
        return WebhookWithId(id=parse_webhook_id(raw), base_url=self.base_url)


async def load_endpoint_from_env(
    environ: Mapping[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    base_url: str = DISCORD_WEBHOOK_BASE_URL,
) -> WebhookEndpoint:
    """Build and validate the endpoint from WING_WEBHOOK_ID/WING_WEBHOOK_TOKEN.

    Missing variables are reported before either value is parsed.
    """
    env = os.environ if environ is None else environ

    raw_id = env.get(WEBHOOK_ID_VAR_NAME)
    if raw_id is None:
        raise MissingWebhookIdError()
    raw_token = env.get(WEBHOOK_TOKEN_VAR_NAME)
    if raw_token is None:
        raise MissingWebhookTokenError()

    return await WebhookBuilder(base_url).id(raw_id).token(raw_token).check(transport=transport)
