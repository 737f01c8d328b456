"""Implementação MongoDB do repositório de notícias."""
from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from boletim.domain import ArticleContent, ArticleRepository, NewsArticle
from boletim.domain.exceptions import ArticleStoreError, InvalidArticleIdError

from .article_indexes import ensure_article_indexes


class MongoArticleRepository(ArticleRepository):
    """Persiste entidades :class:`NewsArticle` utilizando MongoDB.

    Atualizações concorrentes do mesmo documento não são detectadas: a última
    escrita prevalece.
    """

    def __init__(self, collection: Collection) -> None:
        self._collection: Collection = collection
        """Coleção MongoDB responsável por armazenar as notícias."""

        ensure_article_indexes(self._collection)

    def list_all(self) -> list[NewsArticle]:
        try:
            return self._deserialize_many(self._collection.find())
        except PyMongoError as exc:
            raise ArticleStoreError(str(exc)) from exc

    def create(self, content: ArticleContent) -> NewsArticle:
        document = self._serialize_content(content)
        try:
            result = self._collection.insert_one(document)
        except PyMongoError as exc:
            raise ArticleStoreError(str(exc)) from exc
        return NewsArticle(
            id=str(result.inserted_id),
            title=content.title,
            description=content.description,
            image_url=content.image_url,
        )

    def get(self, article_id: str) -> Optional[NewsArticle]:
        object_id = self._object_id(article_id)
        try:
            data = self._collection.find_one({"_id": object_id})
        except PyMongoError as exc:
            raise ArticleStoreError(str(exc)) from exc
        return self._deserialize_article(data) if data else None

    def update(self, article_id: str, content: ArticleContent) -> Optional[NewsArticle]:
        object_id = self._object_id(article_id)
        try:
            data = self._collection.find_one_and_update(
                {"_id": object_id},
                {"$set": self._serialize_content(content)},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            raise ArticleStoreError(str(exc)) from exc
        return self._deserialize_article(data) if data else None

    def delete(self, article_id: str) -> bool:
        object_id = self._object_id(article_id)
        try:
            result = self._collection.delete_one({"_id": object_id})
        except PyMongoError as exc:
            raise ArticleStoreError(str(exc)) from exc
        return result.deleted_count > 0

    def search_by_title(self, query: str | None) -> list[NewsArticle]:
        if not query:
            return []
        criteria = {"title": {"$regex": re.escape(query), "$options": "i"}}
        try:
            return self._deserialize_many(self._collection.find(criteria))
        except PyMongoError as exc:
            raise ArticleStoreError(str(exc)) from exc

    @staticmethod
    def _object_id(article_id: str) -> ObjectId:
        try:
            return ObjectId(article_id)
        except (InvalidId, TypeError) as exc:
            raise InvalidArticleIdError(
                f'Cast to ObjectId failed for value "{article_id}"'
            ) from exc

    @staticmethod
    def _serialize_content(content: ArticleContent) -> dict[str, Any]:
        # imageUrl keeps the field name already stored by existing documents
        return {
            "title": content.title,
            "description": content.description,
            "imageUrl": content.image_url,
        }

    def _deserialize_many(self, cursor: Iterable[Mapping[str, Any]]) -> list[NewsArticle]:
        return [self._deserialize_article(data) for data in cursor]

    @staticmethod
    def _deserialize_article(data: Mapping[str, Any]) -> NewsArticle:
        return NewsArticle(
            id=str(data["_id"]),
            title=data.get("title"),
            description=data.get("description"),
            image_url=data.get("imageUrl"),
        )


__all__ = ["MongoArticleRepository"]
