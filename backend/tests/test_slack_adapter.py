"""Tests for Slack alert delivery."""

from unittest.mock import patch

import json

import httpx
import pytest

from chirp.shared.adapters.slack_adapter import SlackNotifier

WEBHOOK = "https://hooks.slack.test/services/T000/B000/XXX"

RealAsyncClient = httpx.AsyncClient


def client_factory(handler):
    """Build AsyncClient replacements that route through a mock transport."""

    def _factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return RealAsyncClient(*args, **kwargs)

    return _factory


@pytest.mark.asyncio
async def test_disabled_without_webhook():
    notifier = SlackNotifier(webhook_url="")
    assert not notifier.enabled
    assert await notifier.send("boom") is False


@pytest.mark.asyncio
async def test_posts_text_payload():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="ok")

    with patch("chirp.shared.adapters.slack_adapter.httpx.AsyncClient", client_factory(handler)):
        assert await SlackNotifier(webhook_url=WEBHOOK).send("server on fire") is True

    assert len(seen) == 1
    assert str(seen[0].url) == WEBHOOK
    assert json.loads(seen[0].content) == {"text": "server on fire"}


@pytest.mark.asyncio
async def test_rejected_alert_returns_false():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="no_service")

    with patch("chirp.shared.adapters.slack_adapter.httpx.AsyncClient", client_factory(handler)):
        assert await SlackNotifier(webhook_url=WEBHOOK).send("boom") is False


@pytest.mark.asyncio
async def test_network_error_is_swallowed():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with patch("chirp.shared.adapters.slack_adapter.httpx.AsyncClient", client_factory(handler)):
        assert await SlackNotifier(webhook_url=WEBHOOK).send("boom") is False
