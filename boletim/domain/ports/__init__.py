"""Portas que conectam o domínio com serviços externos."""
from .alert_notifier import AlertNotifier
from .weather_provider import WeatherProvider

__all__ = ["AlertNotifier", "WeatherProvider"]
