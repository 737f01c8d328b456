"""Clientes HTTP utilizados pelo serviço de clima."""

from .openweather_client import OpenWeatherClient

__all__ = ["OpenWeatherClient"]
