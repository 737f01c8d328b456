"""Porta de saída responsável por entregar alertas de clima."""
from __future__ import annotations

from abc import ABC, abstractmethod

from boletim.domain.entities import WeatherAlert


class AlertNotifier(ABC):
    """Define como os alertas de inscrição são entregues a sistemas externos."""

    @abstractmethod
    async def notify(self, alert: WeatherAlert) -> None:
        """Encaminhar o alerta uma única vez, sem confirmação de entrega."""
