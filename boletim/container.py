"""Aggregated container combining every service of the API."""
from __future__ import annotations

from dataclasses import dataclass

from boletim.infrastructure.database import MongoClientFactory
from boletim.services.alerts import AlertsContainer, build_alerts_container
from boletim.services.articles import ArticlesContainer, build_articles_container
from boletim.services.weather import WeatherContainer, build_weather_container
from boletim.settings import AlertSettings, WeatherSettings


@dataclass
class BoletimContainer:
    """Holds the long-lived collaborators shared across requests."""

    weather: WeatherContainer
    alerts: AlertsContainer
    articles: ArticlesContainer

    async def aclose(self) -> None:
        await self.weather.aclose()
        await self.alerts.aclose()
        self.articles.close()


def build_container(
    *,
    weather_settings: WeatherSettings | None = None,
    alert_settings: AlertSettings | None = None,
    mongo_factory: MongoClientFactory | None = None,
) -> BoletimContainer:
    """Construct every service container from explicit settings."""

    weather = build_weather_container(weather_settings)
    alerts = build_alerts_container(weather.weather_service, alert_settings)
    articles = build_articles_container(mongo_factory)
    return BoletimContainer(weather=weather, alerts=alerts, articles=articles)
