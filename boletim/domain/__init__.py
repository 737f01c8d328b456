"""API pública do domínio do Boletim.

Centraliza entidades, exceções, portas e repositórios para que possam ser
importados diretamente de ``boletim.domain``.
"""

from .cities import DEFAULT_CITIES
from .entities import ArticleContent, NewsArticle, WeatherAlert, WeatherSnapshot
from .exceptions import (
    AlertDeliveryError,
    ArticleNotFoundError,
    ArticleStoreError,
    BoletimError,
    InvalidArticleIdError,
    WeatherProviderError,
)
from .ports import AlertNotifier, WeatherProvider
from .repositories import ArticleRepository

__all__ = [
    "DEFAULT_CITIES",
    "ArticleContent",
    "NewsArticle",
    "WeatherAlert",
    "WeatherSnapshot",
    "BoletimError",
    "WeatherProviderError",
    "AlertDeliveryError",
    "ArticleStoreError",
    "InvalidArticleIdError",
    "ArticleNotFoundError",
    "WeatherProvider",
    "AlertNotifier",
    "ArticleRepository",
]
