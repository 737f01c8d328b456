"""Cliente HTTP responsável por consultar o OpenWeatherMap."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from boletim.domain import WeatherProvider, WeatherSnapshot
from boletim.domain.exceptions import WeatherProviderError
from boletim.settings import DEFAULT_WEATHER_URL


class OpenWeatherClient(WeatherProvider):
    """Consulta o clima atual de uma localidade em unidades métricas."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_WEATHER_URL,
        client: httpx.AsyncClient | None = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Cria o cliente configurando a chave de acesso e o cliente HTTP interno.

        Parameters
        ----------
        api_key:
            Chave ``appid`` enviada em todas as consultas.
        base_url:
            Endereço do endpoint de clima atual.
        client:
            Instância de :class:`httpx.AsyncClient` reutilizável. Quando omitida,
            o cliente cria e gerencia uma instância própria.
        timeout:
            Tempo máximo de espera quando o cliente interno é criado; ``None``
            mantém o padrão do httpx.
        """

        self._api_key = api_key
        """Chave de acesso ao provedor."""

        self._base_url = base_url
        """Endpoint de clima atual."""

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
        """Cliente HTTP usado para efetuar chamadas ao provedor."""

        self._owns_client: bool = owns_client
        """Indica se o cliente HTTP é gerenciado internamente."""

        self._log = logging.getLogger("boletim.weather")

    async def fetch_weather(self, location: str) -> WeatherSnapshot:
        """Busca o clima atual, sem validar ou normalizar o texto informado."""

        params = {"q": location, "appid": self._api_key, "units": "metric"}
        try:
            response = await self._client.get(self._base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            self._log.warning("Provedor respondeu %d para %r", status, location)
            raise WeatherProviderError(
                f"Request failed with status code {status}"
            ) from exc
        except httpx.HTTPError as exc:
            self._log.warning("Falha ao consultar clima de %r: %s", location, exc)
            raise WeatherProviderError(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            raise WeatherProviderError("Invalid JSON in provider response") from exc

        try:
            return WeatherSnapshot.from_payload(payload, location)
        except (AttributeError, TypeError, ValueError) as exc:
            raise WeatherProviderError(
                f"Unexpected provider response for {location}"
            ) from exc

    async def aclose(self) -> None:
        """Fecha o cliente HTTP quando a instância é de responsabilidade local."""

        if self._owns_client:
            await self._client.aclose()


__all__ = ["OpenWeatherClient"]
