"""Dependency container for the articles service."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from pymongo.errors import PyMongoError

from boletim.domain import ArticleRepository
from boletim.infrastructure.database import MongoClientFactory

from .infrastructure import MongoArticleRepository, UnavailableArticleRepository


@dataclass
class ArticlesContainer:
    """Container exposing the articles service dependencies."""

    repository: ArticleRepository
    factory: MongoClientFactory | None = None

    def check_connection(self) -> bool:
        if self.factory is None:
            return True
        return self.factory.check_connection()

    def close(self) -> None:
        if self.factory is not None:
            self.factory.close()


def build_articles_container(
    factory: MongoClientFactory | None = None,
) -> ArticlesContainer:
    """Build the articles service container.

    A Mongo client that cannot be configured (for instance a malformed
    connection string) is logged, and article operations then fail with
    ``ArticleStoreError`` while the other services keep working.
    """

    factory = factory or MongoClientFactory()
    try:
        collection = factory.get_articles_collection()
    except (PyMongoError, ValueError) as exc:
        logging.getLogger("boletim.database").error(
            "MongoDB connection error: %s", exc
        )
        return ArticlesContainer(
            repository=UnavailableArticleRepository(str(exc)), factory=factory
        )
    return ArticlesContainer(
        repository=MongoArticleRepository(collection), factory=factory
    )
