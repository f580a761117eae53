"""
Slack adapter - Error alerting through an incoming webhook.

Provides:
- Best-effort delivery of plain-text alerts to one Slack channel

Failures never propagate: an alert that cannot be delivered is logged and
dropped, so alerting can be called from error handlers safely.
"""

from typing import Optional

import httpx

from chirp.config.settings import settings
from chirp.shared.core.logging import get_logger

logger = get_logger(__name__)


class SlackNotifier:
    """
    Adapter for Slack incoming webhooks.

    An empty webhook URL disables the adapter; send() then returns False
    without doing any I/O.
    """

    def __init__(self, webhook_url: Optional[str] = None, timeout: float = 5.0):
        """
        Initialize Slack adapter.

        Args:
            webhook_url: Incoming webhook URL (defaults to SLACK_WEBHOOK_URL)
            timeout: Request timeout in seconds
        """
        self.webhook_url = settings.SLACK_WEBHOOK_URL if webhook_url is None else webhook_url
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    async def send(self, text: str) -> bool:
        """
        Post a message to the webhook.

        Args:
            text: Message body

        Returns:
            True if Slack accepted the message
        """
        if not self.enabled:
            return False

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.webhook_url, json={"text": text})
                response.raise_for_status()
            return True
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Slack webhook rejected alert",
                status_code=e.response.status_code,
            )
        except httpx.HTTPError as e:
            logger.warning("Slack webhook unreachable", error=str(e))
        return False


# Module-level instance used by the error handler
slack_notifier = SlackNotifier()
