"""Rotas FastAPI de cadastro e busca de notícias."""
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, FastAPI, Response

from boletim.domain import NewsArticle
from boletim.domain.exceptions import ArticleNotFoundError, ArticleStoreError
from boletim.infrastructure.web import api_error
from boletim.services.articles import ArticlesContainer

from .schemas import ArticlePayload


def serialize(article: NewsArticle) -> dict[str, Any]:
    """Converte ``NewsArticle`` no JSON consumido pelo frontend."""

    return {
        "_id": article.id,
        "title": article.title,
        "description": article.description,
        "imageUrl": article.image_url,
    }


def include_routes(
    app: FastAPI, container: ArticlesContainer, *, prefix: str = ""
) -> None:
    """Registra as rotas de notícias na aplicação informada."""

    router = APIRouter(prefix=prefix, tags=["Notícias"])
    repository = container.repository

    @router.get("/articles")
    def list_articles() -> list[dict[str, Any]]:
        """Lista todas as notícias, sem paginação."""

        try:
            articles = repository.list_all()
        except ArticleStoreError as exc:
            raise api_error(exc, "Error fetching articles") from exc
        return [serialize(article) for article in articles]

    @router.post("/articles", status_code=201)
    def create_article(payload: ArticlePayload) -> dict[str, Any]:
        try:
            article = repository.create(payload.to_domain())
        except ArticleStoreError as exc:
            raise api_error(exc, "Error adding article") from exc
        return serialize(article)

    @router.get("/articles/{article_id}")
    def get_article(article_id: str) -> dict[str, Any]:
        try:
            article = repository.get(article_id)
        except ArticleStoreError as exc:
            raise api_error(exc, "Error fetching article") from exc
        if article is None:
            raise ArticleNotFoundError("Article not found")
        return serialize(article)

    @router.put("/articles/{article_id}")
    def update_article(
        article_id: str, payload: ArticlePayload
    ) -> Optional[dict[str, Any]]:
        """Substitui os campos da notícia; retorna ``null`` se ela não existir."""

        try:
            article = repository.update(article_id, payload.to_domain())
        except ArticleStoreError as exc:
            raise api_error(exc, "Error editing article") from exc
        return serialize(article) if article else None

    @router.delete("/articles/{article_id}", status_code=204)
    def delete_article(article_id: str) -> Response:
        """Remove a notícia; responde 204 mesmo quando ela não existe."""

        try:
            repository.delete(article_id)
        except ArticleStoreError as exc:
            raise api_error(exc, "Error deleting article") from exc
        return Response(status_code=204)

    @router.get("/search-articles")
    def search_articles(query: Optional[str] = None) -> list[dict[str, Any]]:
        """Busca notícias pelo título, sem diferenciar maiúsculas."""

        try:
            articles = repository.search_by_title(query)
        except ArticleStoreError as exc:
            raise api_error(exc, "Error searching articles") from exc
        return [serialize(article) for article in articles]

    app.include_router(router)


__all__ = ["include_routes", "serialize"]
