"""Testes para o cliente que publica alertas no webhook."""
from __future__ import annotations

import asyncio

import httpx
import pytest

from boletim.domain import WeatherAlert
from boletim.domain.exceptions import AlertDeliveryError
from boletim.services.alerts.clients import WebhookAlertNotifier


@pytest.fixture
def sample_alert() -> WeatherAlert:
    return WeatherAlert(
        recipient_email="ana@example.com",
        location="Nottingham",
        condition="Rain",
        temperature=9.0,
        alert_message="Alert: There is a Rain expected in Nottingham.",
    )


def test_notify_raises_delivery_error_on_connection_failure(sample_alert) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    notifier = WebhookAlertNotifier(
        "http://hooks.test/alerts",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(AlertDeliveryError) as excinfo:
        asyncio.run(notifier.notify(sample_alert))

    assert "boom" in str(excinfo.value)


def test_notify_posts_alert_once(upstream, sample_alert) -> None:
    notifier = WebhookAlertNotifier("http://hooks.test/alerts", client=upstream.client())

    asyncio.run(notifier.notify(sample_alert))

    assert len(upstream.alerts) == 1
    assert upstream.alerts[0]["alertMessage"] == sample_alert.alert_message
    assert upstream.alerts[0]["temperature"] == 9.0
