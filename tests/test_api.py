"""Testes da aplicação agregada."""
from __future__ import annotations

from fastapi.testclient import TestClient

from boletim.api import create_app
from boletim.services.articles.infrastructure import UnavailableArticleRepository


class _TrackingFactory:
    def __init__(self) -> None:
        self.checked = False
        self.closed = False

    def check_connection(self) -> bool:
        self.checked = True
        return False

    def close(self) -> None:
        self.closed = True


def test_health_endpoint(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_cors_allows_any_origin(client) -> None:
    response = client.get("/articles", headers={"Origin": "http://frontend.test"})

    assert response.headers["access-control-allow-origin"] in {"*", "http://frontend.test"}


def test_lifespan_checks_database_and_releases_resources(container) -> None:
    factory = _TrackingFactory()
    container.articles.factory = factory

    with TestClient(create_app(container)) as client:
        assert factory.checked
        # um Mongo indisponível não impede a API de responder
        assert client.get("/health").status_code == 200

    assert factory.closed


def test_unavailable_database_only_affects_article_routes(container) -> None:
    container.articles.repository = UnavailableArticleRepository(
        "Port contains non-digit characters"
    )
    client = TestClient(create_app(container))

    articles = client.get("/articles")
    weather = client.get("/weather/Berlin")

    assert articles.status_code == 500
    assert articles.json() == {
        "message": "Error fetching articles",
        "error": "Port contains non-digit characters",
    }
    assert weather.status_code == 200
