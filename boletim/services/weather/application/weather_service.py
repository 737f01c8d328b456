"""Casos de uso relacionados à consulta de clima."""
from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from boletim.domain import WeatherProvider, WeatherSnapshot


class WeatherService:
    """Consulta o clima de uma ou várias localidades no provedor."""

    def __init__(
        self, provider: WeatherProvider, *, logger: logging.Logger | None = None
    ) -> None:
        self._provider = provider
        self._log = logger or logging.getLogger("boletim.weather")

    async def current(self, location: str) -> WeatherSnapshot:
        """Retorna o clima atual da localidade informada."""

        return await self._provider.fetch_weather(location)

    async def current_for_many(self, locations: Sequence[str]) -> list[WeatherSnapshot]:
        """Consulta todas as localidades em paralelo, preservando a ordem.

        A primeira falha interrompe a operação inteira e é propagada; as
        consultas ainda pendentes são canceladas e nenhum resultado parcial é
        devolvido.
        """

        if not locations:
            return []
        self._log.debug("Consultando clima de %d localidades", len(locations))
        tasks = [
            asyncio.ensure_future(self._provider.fetch_weather(location))
            for location in locations
        ]
        try:
            snapshots = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            # recolhe as demais falhas para que nenhuma fique sem tratamento
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return list(snapshots)


__all__ = ["WeatherService"]
