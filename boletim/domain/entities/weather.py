"""Entidades transitórias produzidas a partir das consultas de clima."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class WeatherSnapshot:
    """Condição atual de uma localidade conforme informada pelo provedor."""

    #: Nome da localidade devolvido pelo provedor.
    location: str
    #: Rótulo principal da condição, por exemplo ``Rain`` ou ``Clear``.
    condition: Optional[str]
    #: Temperatura em graus Celsius, exatamente como veio do provedor.
    temperature: Any
    #: Resposta original do provedor, repassada sem alterações.
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(
        cls, payload: Mapping[str, Any], requested_location: str
    ) -> "WeatherSnapshot":
        """Extrai os campos relevantes da resposta do OpenWeatherMap.

        Campos ausentes resultam em ``None``; a resposta original é mantida
        em ``raw`` sem alterações.
        """

        conditions = payload.get("weather")
        condition = None
        if isinstance(conditions, list) and conditions and isinstance(conditions[0], Mapping):
            condition = conditions[0].get("main")
        main = payload.get("main")
        return cls(
            location=str(payload.get("name") or requested_location),
            condition=str(condition) if condition else None,
            temperature=main.get("temp") if isinstance(main, Mapping) else None,
            raw=dict(payload),
        )


@dataclass(frozen=True)
class WeatherAlert:
    """Evento de inscrição encaminhado ao webhook de alertas."""

    recipient_email: Optional[str]
    location: Optional[str]
    condition: str
    temperature: Any
    #: Vazio quando a condição atual não justifica um alerta.
    alert_message: str = ""

    @property
    def is_warranted(self) -> bool:
        return bool(self.alert_message)

    def to_payload(self) -> dict[str, Any]:
        """Serializa o alerta no formato esperado pelo webhook."""

        return {
            "recipient_email": self.recipient_email,
            "location": self.location,
            "condition": self.condition,
            "temperature": self.temperature,
            "alertMessage": self.alert_message,
        }


__all__ = ["WeatherAlert", "WeatherSnapshot"]
