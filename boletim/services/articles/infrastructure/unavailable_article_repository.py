"""Repositório usado quando o MongoDB não pôde ser configurado."""
from __future__ import annotations

from typing import NoReturn, Optional

from boletim.domain import ArticleContent, ArticleRepository, NewsArticle
from boletim.domain.exceptions import ArticleStoreError


class UnavailableArticleRepository(ArticleRepository):
    """Falha todas as operações com o erro registrado na inicialização."""

    def __init__(self, reason: str) -> None:
        self._reason = reason

    def _fail(self) -> NoReturn:
        raise ArticleStoreError(self._reason)

    def list_all(self) -> list[NewsArticle]:
        self._fail()

    def create(self, content: ArticleContent) -> NewsArticle:
        self._fail()

    def get(self, article_id: str) -> Optional[NewsArticle]:
        self._fail()

    def update(self, article_id: str, content: ArticleContent) -> Optional[NewsArticle]:
        self._fail()

    def delete(self, article_id: str) -> bool:
        self._fail()

    def search_by_title(self, query: str | None) -> list[NewsArticle]:
        self._fail()


__all__ = ["UnavailableArticleRepository"]
