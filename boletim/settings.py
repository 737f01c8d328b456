"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv

from boletim.domain.cities import DEFAULT_CITIES

load_dotenv()

_DEFAULT_API_BIND_HOST = "0.0.0.0"
_DEFAULT_API_PORT = 5000
_DEFAULT_LOG_LEVEL = "INFO"

DEFAULT_WEATHER_URL = "http://api.openweathermap.org/data/2.5/weather"
DEFAULT_ALERT_WEBHOOK_URL = "https://eol25tdfuhr5r8n.m.pipedream.net"


@lru_cache(maxsize=None)
def get_api_port() -> int:
    """Retorna a porta configurada para expor a API."""

    return int(os.getenv("BOLETIM_API_PORT", os.getenv("PORT", _DEFAULT_API_PORT)))


@lru_cache(maxsize=None)
def get_api_bind_host() -> str:
    """Retorna o host utilizado pelo Uvicorn para escutar conexões."""

    return os.getenv("BOLETIM_API_BIND_HOST", _DEFAULT_API_BIND_HOST)


def get_log_level() -> str:
    return os.getenv("BOLETIM_LOG_LEVEL", _DEFAULT_LOG_LEVEL)


def parse_timeout(value: Optional[str]) -> Optional[float]:
    """Converte o tempo limite em segundos; vazio mantém o padrão do httpx."""

    if value is None or not value.strip():
        return None
    return float(value)


def parse_cities(value: Optional[str]) -> tuple[str, ...]:
    """Lê uma lista de cidades separadas por vírgula."""

    if not value:
        return DEFAULT_CITIES
    cities = tuple(item.strip() for item in value.split(",") if item.strip())
    return cities or DEFAULT_CITIES


@dataclass(frozen=True)
class WeatherSettings:
    """Parâmetros de acesso ao provedor de clima."""

    api_key: str
    base_url: str = DEFAULT_WEATHER_URL
    timeout: Optional[float] = None
    cities: tuple[str, ...] = DEFAULT_CITIES

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "WeatherSettings":
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get("OPENWEATHERMAP_API_KEY", ""),
            base_url=env.get("OPENWEATHERMAP_URL") or DEFAULT_WEATHER_URL,
            timeout=parse_timeout(env.get("WEATHER_TIMEOUT")),
            cities=parse_cities(env.get("BOLETIM_CITIES")),
        )


@dataclass(frozen=True)
class AlertSettings:
    """Destino dos alertas de inscrição."""

    webhook_url: str = DEFAULT_ALERT_WEBHOOK_URL
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AlertSettings":
        env = os.environ if environ is None else environ
        return cls(
            webhook_url=env.get("ALERT_WEBHOOK_URL") or DEFAULT_ALERT_WEBHOOK_URL,
            timeout=parse_timeout(env.get("ALERT_TIMEOUT")),
        )


__all__ = [
    "AlertSettings",
    "DEFAULT_ALERT_WEBHOOK_URL",
    "DEFAULT_WEATHER_URL",
    "WeatherSettings",
    "get_api_bind_host",
    "get_api_port",
    "get_log_level",
    "parse_cities",
    "parse_timeout",
]
