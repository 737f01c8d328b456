"""Dependency container for the weather service."""
from __future__ import annotations

from dataclasses import dataclass

import httpx

from boletim.settings import WeatherSettings

from .application import WeatherService
from .clients import OpenWeatherClient


@dataclass
class WeatherContainer:
    """Container exposing the weather service dependencies."""

    provider: OpenWeatherClient
    weather_service: WeatherService
    cities: tuple[str, ...]

    async def aclose(self) -> None:
        await self.provider.aclose()


def build_weather_container(
    settings: WeatherSettings | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> WeatherContainer:
    """Build the weather service container."""

    settings = settings or WeatherSettings.from_env()
    provider = OpenWeatherClient(
        settings.api_key,
        base_url=settings.base_url,
        client=client,
        timeout=settings.timeout,
    )
    return WeatherContainer(
        provider=provider,
        weather_service=WeatherService(provider),
        cities=tuple(settings.cities),
    )
