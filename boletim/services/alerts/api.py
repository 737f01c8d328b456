"""Rotas FastAPI de inscrição em alertas de clima."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, FastAPI
from pydantic import BaseModel, field_validator

from boletim.domain.exceptions import AlertDeliveryError, WeatherProviderError
from boletim.infrastructure.web import api_error, coerce_text
from boletim.services.alerts import AlertsContainer

SUBSCRIPTION_MESSAGE = "Subscription successful, weather alert sent via webhook!"


class SubscribeRequest(BaseModel):
    """Dados necessários para inscrever um endereço em alertas."""

    #: Endereço que receberá o alerta.
    email: Optional[str] = None
    #: Localidade monitorada, em texto livre.
    location: Optional[str] = None

    @field_validator("email", "location", mode="before")
    @classmethod
    def _scalar_as_text(cls, value):
        return coerce_text(value)


class SubscribeResponse(BaseModel):
    message: str


def include_routes(
    app: FastAPI, container: AlertsContainer, *, prefix: str = ""
) -> None:
    """Registra a rota de inscrição na aplicação informada."""

    router = APIRouter(prefix=prefix, tags=["Alertas"])

    @router.post("/subscribe", response_model=SubscribeResponse)
    async def subscribe(request: SubscribeRequest) -> SubscribeResponse:
        """Encaminha a inscrição ao webhook, havendo alerta ou não."""

        try:
            await container.subscription_service.subscribe(
                request.email, request.location
            )
        except (WeatherProviderError, AlertDeliveryError) as exc:
            raise api_error(exc, "An error occurred") from exc
        return SubscribeResponse(message=SUBSCRIPTION_MESSAGE)

    app.include_router(router)


__all__ = ["SubscribeRequest", "SubscribeResponse", "include_routes"]
