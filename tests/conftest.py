from __future__ import annotations

import json
import re
from copy import deepcopy
from types import SimpleNamespace
from typing import Any, Callable

import httpx
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument

from boletim.api import create_app
from boletim.container import BoletimContainer
from boletim.domain import DEFAULT_CITIES
from boletim.services.alerts import build_alerts_container
from boletim.services.articles import ArticlesContainer
from boletim.services.articles.infrastructure import MongoArticleRepository
from boletim.services.weather import build_weather_container
from boletim.settings import AlertSettings, WeatherSettings

WEATHER_URL = "http://weather.test/data/2.5/weather"
WEBHOOK_URL = "http://hooks.test/alerts"


class FakeCollection:
    """Coleção em memória com o subconjunto da API do pymongo usado no projeto."""

    def __init__(self) -> None:
        self._documents: list[dict[str, Any]] = []
        self.indexes: list[tuple[Any, dict[str, Any]]] = []

    @property
    def documents(self) -> list[dict[str, Any]]:
        return self._documents

    def create_index(self, keys, **options) -> None:
        self.indexes.append((keys, options))

    def find(self, criteria: dict[str, Any] | None = None):
        return [deepcopy(doc) for doc in self._documents if _matches(doc, criteria or {})]

    def find_one(self, criteria: dict[str, Any]):
        for document in self._documents:
            if _matches(document, criteria):
                return deepcopy(document)
        return None

    def insert_one(self, document: dict[str, Any]):
        document.setdefault("_id", ObjectId())
        self._documents.append(deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    def find_one_and_update(
        self,
        criteria: dict[str, Any],
        update: dict[str, Any],
        return_document: ReturnDocument = ReturnDocument.BEFORE,
    ):
        for document in self._documents:
            if _matches(document, criteria):
                before = deepcopy(document)
                document.update(update.get("$set", {}))
                if return_document == ReturnDocument.AFTER:
                    return deepcopy(document)
                return before
        return None

    def delete_one(self, criteria: dict[str, Any]):
        for index, document in enumerate(self._documents):
            if _matches(document, criteria):
                del self._documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


def _matches(document: dict[str, Any], criteria: dict[str, Any]) -> bool:
    for key, expected in criteria.items():
        value = document.get(key)
        if isinstance(expected, dict) and "$regex" in expected:
            flags = re.IGNORECASE if "i" in expected.get("$options", "") else 0
            if not isinstance(value, str) or not re.search(expected["$regex"], value, flags):
                return False
            continue
        if value != expected:
            return False
    return True


def weather_payload(city: str, condition: str = "Clear", temp: float = 21.5) -> dict[str, Any]:
    return {
        "name": city,
        "weather": [{"id": 800, "main": condition, "description": condition.lower()}],
        "main": {"temp": temp, "humidity": 60},
        "cod": 200,
    }


class FakeUpstream:
    """Simula o provedor de clima e o webhook em um único ``MockTransport``."""

    def __init__(self, conditions: dict[str, str] | None = None) -> None:
        self.conditions: dict[str, str] = (
            dict(conditions) if conditions is not None else {city: "Clear" for city in DEFAULT_CITIES}
        )
        self.failing: set[str] = set()
        self.payloads: dict[str, dict[str, Any]] = {}
        self.webhook_status = 200
        self.weather_requests: list[httpx.Request] = []
        self.alerts: list[dict[str, Any]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "hooks.test":
            self.alerts.append(json.loads(request.content))
            return httpx.Response(self.webhook_status, json={"received": True})
        self.weather_requests.append(request)
        city = request.url.params.get("q")
        if city in self.payloads:
            return httpx.Response(200, json=self.payloads[city])
        if city in self.failing or city not in self.conditions:
            return httpx.Response(404, json={"cod": "404", "message": "city not found"})
        return httpx.Response(200, json=weather_payload(city, self.conditions[city]))

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def container(upstream: FakeUpstream, collection: FakeCollection) -> BoletimContainer:
    client = upstream.client()
    weather = build_weather_container(
        WeatherSettings(api_key="test-key", base_url=WEATHER_URL), client=client
    )
    alerts = build_alerts_container(
        weather.weather_service, AlertSettings(webhook_url=WEBHOOK_URL), client=client
    )
    articles = ArticlesContainer(repository=MongoArticleRepository(collection))
    return BoletimContainer(weather=weather, alerts=alerts, articles=articles)


@pytest.fixture
def client(container: BoletimContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def make_article(client: TestClient) -> Callable[..., dict[str, Any]]:
    def _make(title: str = "Tempestade no litoral", **fields: Any) -> dict[str, Any]:
        payload = {
            "title": title,
            "description": fields.get("description", "Chuva forte prevista"),
            "imageUrl": fields.get("imageUrl", "https://example.com/capa.jpg"),
        }
        response = client.post("/articles", json=payload)
        assert response.status_code == 201
        return response.json()

    return _make
