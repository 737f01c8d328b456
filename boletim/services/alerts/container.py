"""Dependency container for the alert subscription service."""
from __future__ import annotations

from dataclasses import dataclass

import httpx

from boletim.services.weather.application import WeatherService
from boletim.settings import AlertSettings

from .application import AlertSubscriptionService
from .clients import WebhookAlertNotifier


@dataclass
class AlertsContainer:
    """Container exposing the alert subscription dependencies."""

    notifier: WebhookAlertNotifier
    subscription_service: AlertSubscriptionService

    async def aclose(self) -> None:
        await self.notifier.aclose()


def build_alerts_container(
    weather_service: WeatherService,
    settings: AlertSettings | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> AlertsContainer:
    """Build the alerts container on top of an existing weather service."""

    settings = settings or AlertSettings.from_env()
    notifier = WebhookAlertNotifier(
        settings.webhook_url, client=client, timeout=settings.timeout
    )
    return AlertsContainer(
        notifier=notifier,
        subscription_service=AlertSubscriptionService(weather_service, notifier),
    )
