"""Webhook error types.

Configuration errors abort the run before the child is spawned; delivery
errors are reported after the run and never change the exit code.
"""

import httpx

from src.domain.ports.notifier_port import NotificationError

WEBHOOK_ID_VAR_NAME = "WING_WEBHOOK_ID"
WEBHOOK_TOKEN_VAR_NAME = "WING_WEBHOOK_TOKEN"


class WebhookConfigError(Exception):
    """Base class for webhook configuration and validation failures."""


class MissingWebhookIdError(WebhookConfigError):
    def __init__(self) -> None:
        super().__init__(f"Missing webhook id. Set `{WEBHOOK_ID_VAR_NAME}` to the id.")


class MissingWebhookTokenError(WebhookConfigError):
    def __init__(self) -> None:
        super().__init__(f"Missing webhook token. Set `{WEBHOOK_TOKEN_VAR_NAME}` to the token.")


class InvalidWebhookIdError(WebhookConfigError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid webhook id {value}. IDs must be 64 bit integers.")


class InvalidWebhookTokenError(WebhookConfigError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid webhook token {value}. Token must be alphanumeric or `_`/`-`.")


class WebhookRequestError(WebhookConfigError):
    """Transport-level failure while probing the webhook URL."""

    def __init__(self, url: str, error: httpx.HTTPError) -> None:
        self.url = url
        self.error = error
        super().__init__(f"Encountered error during GET request to {url}: {error}")


class InvalidWebhookUrlError(WebhookConfigError):
    """The webhook URL answered the probe with a non-success status."""

    def __init__(self, url: str, status: int) -> None:
        self.url = url
        self.status = status
        super().__init__(f"Webhook URL {url} is not valid: {status}")


class WebhookDeliveryError(NotificationError):
    """Report upload failed, either in transport or with a non-success
    status."""

    def __init__(self, status: int | None = None, error: httpx.HTTPError | None = None) -> None:
        self.status = status
        self.error = error
        if status is not None:
            message = f"Failed to send report. Status: {status}"
        else:
            message = f"Failed to send report: {error}"
        super().__init__(message)
