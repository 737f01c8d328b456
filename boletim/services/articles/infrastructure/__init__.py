"""Infraestrutura dedicada ao serviço de notícias."""

from .article_indexes import ensure_article_indexes
from .mongo_article_repository import MongoArticleRepository
from .unavailable_article_repository import UnavailableArticleRepository

__all__ = [
    "MongoArticleRepository",
    "UnavailableArticleRepository",
    "ensure_article_indexes",
]
