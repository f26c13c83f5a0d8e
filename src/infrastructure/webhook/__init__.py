from src.infrastructure.webhook.endpoint import (
    WebhookBuilder,
    WebhookEndpoint,
    load_endpoint_from_env,
)
from src.infrastructure.webhook.errors import WebhookConfigError, WebhookDeliveryError
from src.infrastructure.webhook.notifier import DiscordWebhookNotifier

__all__ = [
    "DiscordWebhookNotifier",
    "WebhookBuilder",
    "WebhookConfigError",
    "WebhookDeliveryError",
    "WebhookEndpoint",
    "load_endpoint_from_env",
]
