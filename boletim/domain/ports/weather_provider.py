"""Porta de entrada que fornece dados de clima."""
from __future__ import annotations

from abc import ABC, abstractmethod

from boletim.domain.entities import WeatherSnapshot


class WeatherProvider(ABC):
    """Define como a aplicação consulta o clima atual de uma localidade."""

    @abstractmethod
    async def fetch_weather(self, location: str) -> WeatherSnapshot:
        """Consultar o clima atual da localidade informada em texto livre."""
