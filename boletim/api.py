"""Ponto de entrada REST que agrega os serviços do Boletim."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from boletim.container import BoletimContainer, build_container
from boletim.infrastructure.logs import configure_logging
from boletim.infrastructure.web import configure_cors, register_error_handlers
from boletim.services.alerts.api import include_routes as include_alerts_routes
from boletim.services.articles.api import include_routes as include_articles_routes
from boletim.services.weather.api import include_routes as include_weather_routes
from boletim.settings import get_api_bind_host, get_api_port, get_log_level


def create_app(container: BoletimContainer | None = None) -> FastAPI:
    """Cria a aplicação FastAPI com todas as rotas de serviços configuradas."""

    container = container or build_container()

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        # falha de conexão com o Mongo só é registrada no log
        await run_in_threadpool(container.articles.check_connection)
        try:
            yield
        finally:
            await container.aclose()

    app = FastAPI(
        title="Boletim API",
        version="1.0.0",
        description=(
            "Clima das cidades acompanhadas, inscrição em alertas e cadastro "
            "de notícias em uma única aplicação."
        ),
        lifespan=lifespan,
    )
    app.state.container = container
    configure_cors(app)
    register_error_handlers(app)

    @app.get("/health", tags=["Saúde"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    include_weather_routes(app, container.weather)
    include_alerts_routes(app, container.alerts)
    include_articles_routes(app, container.articles)
    return app


def run() -> None:
    """Executa a API agregada utilizando o Uvicorn."""

    load_dotenv()
    configure_logging(get_log_level())
    uvicorn.run(
        "boletim.api:create_app",
        host=get_api_bind_host(),
        port=get_api_port(),
        factory=True,
        log_config=None,
    )


__all__ = ["create_app", "run"]
