"""Rotas FastAPI que repassam dados do provedor de clima."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, FastAPI

from boletim.domain.exceptions import WeatherProviderError
from boletim.infrastructure.web import api_error
from boletim.services.weather import WeatherContainer

_ERROR_MESSAGE = "An error occurred"


def include_routes(
    app: FastAPI, container: WeatherContainer, *, prefix: str = ""
) -> None:
    """Registra as rotas de clima na aplicação informada."""

    router = APIRouter(prefix=prefix, tags=["Clima"])

    @router.get("/weather")
    async def list_cities_weather() -> list[dict[str, Any]]:
        """Retorna o clima das cidades configuradas, na mesma ordem da lista."""

        try:
            snapshots = await container.weather_service.current_for_many(
                container.cities
            )
        except WeatherProviderError as exc:
            raise api_error(exc, _ERROR_MESSAGE) from exc
        return [snapshot.raw for snapshot in snapshots]

    @router.get("/weather/{location}")
    async def get_location_weather(location: str) -> dict[str, Any]:
        """Retorna a resposta do provedor para uma localidade livre."""

        try:
            snapshot = await container.weather_service.current(location)
        except WeatherProviderError as exc:
            raise api_error(exc, _ERROR_MESSAGE) from exc
        return snapshot.raw

    app.include_router(router)


__all__ = ["include_routes"]
