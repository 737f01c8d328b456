"""Exceções levantadas pelos colaboradores do Boletim."""
from __future__ import annotations

from typing import Optional


class BoletimError(Exception):
    """Erro base com uma mensagem legível e o texto do erro original."""

    #: Código HTTP usado quando o erro chega até a borda da API.
    status_code: int = 500

    def __init__(self, message: str, *, error: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error


class WeatherProviderError(BoletimError):
    """Falha ao consultar o provedor de clima, qualquer que seja a causa."""


class AlertDeliveryError(BoletimError):
    """Falha ao encaminhar um alerta para o webhook."""


class ArticleStoreError(BoletimError):
    """Falha ao acessar a coleção de artigos."""


class InvalidArticleIdError(ArticleStoreError):
    """Identificador de artigo em formato inválido."""


class ArticleNotFoundError(BoletimError):
    status_code = 404


__all__ = [
    "AlertDeliveryError",
    "ArticleNotFoundError",
    "ArticleStoreError",
    "BoletimError",
    "InvalidArticleIdError",
    "WeatherProviderError",
]
