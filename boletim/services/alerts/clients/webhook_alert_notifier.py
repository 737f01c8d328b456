"""Cliente HTTP responsável por publicar alertas no webhook externo."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from boletim.domain import AlertNotifier, WeatherAlert
from boletim.domain.exceptions import AlertDeliveryError


class WebhookAlertNotifier(AlertNotifier):
    """Encaminha alertas de inscrição para um webhook via HTTP POST."""

    def __init__(
        self,
        webhook_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Configura o destino e o cliente HTTP utilizado para publicar alertas.

        Parameters
        ----------
        webhook_url:
            Endereço que recebe o corpo JSON do alerta.
        client:
            Cliente HTTP opcional reutilizado por outros componentes.
        timeout:
            Tempo limite aplicado quando o cliente interno é criado.
        """

        self._webhook_url = webhook_url
        """Endereço completo do webhook."""

        if client is None:
            client = (
                httpx.AsyncClient(timeout=timeout)
                if timeout is not None
                else httpx.AsyncClient()
            )
            owns_client = True
        else:
            owns_client = False

        self._client: httpx.AsyncClient = client
        """Cliente HTTP responsável por enviar os alertas."""

        self._owns_client: bool = owns_client
        """Indica se o cliente HTTP deve ser fechado por esta classe."""

        self._log = logging.getLogger("boletim.alerts")

    async def notify(self, alert: WeatherAlert) -> None:
        """Publica o alerta uma única vez; o corpo da resposta é ignorado."""

        try:
            response = await self._client.post(
                self._webhook_url, json=alert.to_payload()
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise AlertDeliveryError(
                f"Request failed with status code {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise AlertDeliveryError(str(exc) or exc.__class__.__name__) from exc
        self._log.info(
            "Alerta encaminhado para %s (%s)", alert.recipient_email, alert.location
        )

    async def aclose(self) -> None:
        """Fecha o cliente HTTP caso esta instância seja a proprietária dele."""

        if self._owns_client:
            await self._client.aclose()


__all__ = ["WebhookAlertNotifier"]
