"""Interfaces de repositório utilizadas pela camada de domínio."""
from .article_repository import ArticleRepository

__all__ = ["ArticleRepository"]
