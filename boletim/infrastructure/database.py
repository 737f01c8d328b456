"""Mongo database utilities."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

from pymongo import MongoClient
from pymongo.errors import PyMongoError

_DEFAULT_URI = "mongodb://localhost:27017"
_DEFAULT_DATABASE = "boletim"
# mongoose pluralizes the ``NewsArticle`` model into this collection name
_DEFAULT_ARTICLES_COLLECTION = "newsarticles"
_DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 5000


@dataclass
class MongoSettings:
    uri: str
    database: str
    articles_collection: str = _DEFAULT_ARTICLES_COLLECTION
    server_selection_timeout_ms: int = _DEFAULT_SERVER_SELECTION_TIMEOUT_MS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "MongoSettings":
        env = os.environ if environ is None else environ
        # MONGODB_URL is the name used by existing deployments
        uri = env.get("MONGODB_URL") or env.get("MONGO_URI") or _DEFAULT_URI
        return cls(
            uri=uri,
            database=env.get("MONGO_DATABASE") or _DEFAULT_DATABASE,
            articles_collection=(
                env.get("MONGO_ARTICLES_COLLECTION") or _DEFAULT_ARTICLES_COLLECTION
            ),
            server_selection_timeout_ms=int(
                env.get(
                    "MONGO_SERVER_SELECTION_TIMEOUT_MS",
                    _DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
                )
            ),
        )


class MongoClientFactory:
    """Creates a single long-lived Mongo client shared by the repositories."""

    def __init__(self, settings: MongoSettings | None = None) -> None:
        self._settings = settings or MongoSettings.from_env()
        self._client: MongoClient | None = None
        self._log = logging.getLogger("boletim.database")

    @property
    def settings(self) -> MongoSettings:
        return self._settings

    def create_client(self) -> MongoClient:
        if not self._client:
            self._client = MongoClient(
                self._settings.uri,
                serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
            )
        return self._client

    def get_database(self) -> Any:
        client = self.create_client()
        # a database named in the connection string wins over MONGO_DATABASE
        return client.get_default_database(default=self._settings.database)

    def get_articles_collection(self) -> Any:
        return self.get_database()[self._settings.articles_collection]

    def check_connection(self) -> bool:
        """Ping the server, logging the outcome without raising."""

        try:
            self.create_client().admin.command("ping")
        except (PyMongoError, ValueError) as exc:
            self._log.error("MongoDB connection error: %s", exc)
            return False
        self._log.info("MongoDB connected...")
        return True

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
