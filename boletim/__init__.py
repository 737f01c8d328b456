"""Boletim - clima das cidades, alertas por inscrição e notícias."""
from .container import BoletimContainer, build_container
from .domain import NewsArticle, WeatherAlert, WeatherSnapshot
from .services.alerts import build_alerts_container
from .services.articles import build_articles_container
from .services.weather import build_weather_container

__all__ = [
    "BoletimContainer",
    "NewsArticle",
    "WeatherAlert",
    "WeatherSnapshot",
    "build_alerts_container",
    "build_articles_container",
    "build_container",
    "build_weather_container",
]
