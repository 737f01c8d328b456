"""Contrato de persistência da coleção de notícias."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import ArticleContent, NewsArticle


class ArticleRepository(ABC):
    """Define operações de leitura e escrita sobre notícias."""

    @abstractmethod
    def list_all(self) -> list[NewsArticle]:
        """Retorna todas as notícias na ordem padrão do armazenamento."""

    @abstractmethod
    def create(self, content: ArticleContent) -> NewsArticle:
        """Persiste uma nova notícia e retorna a entidade com identificador."""

    @abstractmethod
    def get(self, article_id: str) -> Optional[NewsArticle]:
        """Busca uma notícia pelo identificador."""

    @abstractmethod
    def update(self, article_id: str, content: ArticleContent) -> Optional[NewsArticle]:
        """Substitui os campos da notícia e retorna o estado atualizado."""

    @abstractmethod
    def delete(self, article_id: str) -> bool:
        """Remove a notícia, indicando se algum documento foi apagado."""

    @abstractmethod
    def search_by_title(self, query: str | None) -> list[NewsArticle]:
        """Busca notícias cujo título contém o texto, sem diferenciar maiúsculas."""


__all__ = ["ArticleRepository"]
