"""Inscrição em alertas de clima."""
from __future__ import annotations

import logging
from typing import Optional

from boletim.domain import AlertNotifier, WeatherAlert
from boletim.domain.exceptions import WeatherProviderError
from boletim.services.weather.application import WeatherService

#: Trechos que, presentes na condição atual, justificam um alerta.
ALERT_CONDITIONS: tuple[str, ...] = ("rain", "thunderstorm")


def build_alert_message(condition: Optional[str], location: Optional[str]) -> str:
    """Monta o texto do alerta ou retorna vazio quando não há risco."""

    normalized = (condition or "").lower()
    if not any(keyword in normalized for keyword in ALERT_CONDITIONS):
        return ""
    return (
        f"Alert: There is a {condition} expected in {location}. "
        "Please take necessary precautions."
    )


class AlertSubscriptionService:
    """Consulta o clima da localidade e encaminha o alerta ao notificador.

    Nenhuma inscrição é armazenada: cada chamada é independente.
    """

    def __init__(
        self,
        weather_service: WeatherService,
        notifier: AlertNotifier,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._weather_service = weather_service
        self._notifier = notifier
        self._log = logger or logging.getLogger("boletim.alerts")

    async def subscribe(
        self, email: Optional[str], location: Optional[str]
    ) -> WeatherAlert:
        snapshot = await self._weather_service.current(location or "")
        if snapshot.condition is None:
            raise WeatherProviderError(
                f"Provider response for {location} has no weather condition"
            )
        alert = WeatherAlert(
            recipient_email=email,
            location=location,
            condition=snapshot.condition,
            temperature=snapshot.temperature,
            alert_message=build_alert_message(snapshot.condition, location),
        )
        await self._notifier.notify(alert)
        if not alert.is_warranted:
            self._log.debug(
                "Condição %s em %s não exige alerta", alert.condition, location
            )
        return alert


__all__ = ["ALERT_CONDITIONS", "AlertSubscriptionService", "build_alert_message"]
