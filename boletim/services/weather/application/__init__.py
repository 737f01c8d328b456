"""Casos de uso do serviço de clima."""

from .weather_service import WeatherService

__all__ = ["WeatherService"]
