"""Modelos Pydantic aceitos pelas rotas de notícias."""

from .article_payload import ArticlePayload

__all__ = ["ArticlePayload"]
