"""Testes do repositório MongoDB de notícias."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from boletim.domain import ArticleContent
from boletim.domain.exceptions import ArticleStoreError, InvalidArticleIdError
from boletim.services.articles.infrastructure import MongoArticleRepository


def test_create_stores_image_url_field(collection) -> None:
    repository = MongoArticleRepository(collection)

    article = repository.create(
        ArticleContent(title="Sol", description="Dia limpo", image_url="https://x/y.png")
    )

    stored = collection.documents[0]
    assert str(stored["_id"]) == article.id
    assert stored["imageUrl"] == "https://x/y.png"


def test_search_treats_query_as_literal_text(collection) -> None:
    repository = MongoArticleRepository(collection)
    repository.create(ArticleContent(title="Chuva (forte) hoje"))
    repository.create(ArticleContent(title="Chuva fraca"))

    results = repository.search_by_title("(FORTE)")

    assert [article.title for article in results] == ["Chuva (forte) hoje"]


def test_invalid_ids_raise_invalid_article_id_error(collection) -> None:
    repository = MongoArticleRepository(collection)

    with pytest.raises(InvalidArticleIdError):
        repository.get("123")
    with pytest.raises(InvalidArticleIdError):
        repository.delete("zzzzzzzzzzzzzzzzzzzzzzzz")


def test_store_failures_are_wrapped() -> None:
    broken = MagicMock()
    broken.find.side_effect = ServerSelectionTimeoutError("no servers available")
    repository = MongoArticleRepository(broken)

    with pytest.raises(ArticleStoreError) as excinfo:
        repository.list_all()

    assert "no servers available" in str(excinfo.value)


def test_repository_creates_title_index(collection) -> None:
    MongoArticleRepository(collection)

    assert collection.indexes == [([("title", 1)], {"name": "title", "background": True})]
