"""Testes da regra que decide quando um alerta é necessário."""
from __future__ import annotations

import pytest

from boletim.services.alerts.application import build_alert_message


@pytest.mark.parametrize("condition", ["Rain", "rain", "Thunderstorm", "THUNDERSTORM"])
def test_build_alert_message_for_severe_conditions(condition: str) -> None:
    message = build_alert_message(condition, "Venice")

    assert message == (
        f"Alert: There is a {condition} expected in Venice. "
        "Please take necessary precautions."
    )


@pytest.mark.parametrize("condition", ["Clear", "Clouds", "Drizzle", "Snow", "", None])
def test_build_alert_message_is_empty_otherwise(condition) -> None:
    assert build_alert_message(condition, "Venice") == ""
