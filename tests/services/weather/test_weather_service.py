"""Testes do serviço de clima e da consulta paralela."""
from __future__ import annotations

import asyncio
import gc

import pytest

from boletim.domain import WeatherProvider, WeatherSnapshot
from boletim.domain.exceptions import WeatherProviderError
from boletim.services.weather.application import WeatherService


class _BarrierProvider(WeatherProvider):
    """Só responde quando todas as consultas esperadas já foram iniciadas."""

    def __init__(self, expected: int) -> None:
        self._expected = expected
        self._started = 0
        self._all_started: asyncio.Event | None = None

    async def fetch_weather(self, location: str) -> WeatherSnapshot:
        if self._all_started is None:
            self._all_started = asyncio.Event()
        self._started += 1
        if self._started == self._expected:
            self._all_started.set()
        await asyncio.wait_for(self._all_started.wait(), timeout=1)
        return WeatherSnapshot(location=location, condition="Clear", temperature=20.0)


class _FailingProvider(WeatherProvider):
    def __init__(self, failing: str) -> None:
        self._failing = failing
        self.cancelled: list[str] = []

    async def fetch_weather(self, location: str) -> WeatherSnapshot:
        if location == self._failing:
            raise WeatherProviderError("Request failed with status code 404")
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            self.cancelled.append(location)
            raise
        return WeatherSnapshot(location=location, condition="Clear", temperature=20.0)


def test_current_for_many_issues_lookups_concurrently() -> None:
    locations = ["Berlin", "Osaka", "Jakarta"]
    service = WeatherService(_BarrierProvider(len(locations)))

    snapshots = asyncio.run(service.current_for_many(locations))

    assert [snapshot.location for snapshot in snapshots] == locations


def test_current_for_many_aborts_on_first_failure() -> None:
    provider = _FailingProvider("Osaka")
    service = WeatherService(provider)

    with pytest.raises(WeatherProviderError):
        asyncio.run(service.current_for_many(["Berlin", "Osaka", "Jakarta"]))

    assert sorted(provider.cancelled) == ["Berlin", "Jakarta"]


def test_current_for_many_with_no_locations_returns_empty_list() -> None:
    service = WeatherService(_FailingProvider("Osaka"))

    assert asyncio.run(service.current_for_many([])) == []


class _AllFailingProvider(WeatherProvider):
    async def fetch_weather(self, location: str) -> WeatherSnapshot:
        await asyncio.sleep(0)
        raise WeatherProviderError(f"Request failed for {location}")


def test_current_for_many_collects_every_failure() -> None:
    reported: list[dict] = []
    service = WeatherService(_AllFailingProvider())

    async def scenario() -> None:
        asyncio.get_running_loop().set_exception_handler(
            lambda loop, context: reported.append(context)
        )
        try:
            await service.current_for_many(["Berlin", "Osaka", "Jakarta"])
        except WeatherProviderError:
            pass
        else:
            raise AssertionError("a falha do provedor deveria ser propagada")
        gc.collect()
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert reported == []
