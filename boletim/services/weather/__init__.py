"""Weather service dependency container."""

from .container import WeatherContainer, build_weather_container

__all__ = ["WeatherContainer", "build_weather_container"]
