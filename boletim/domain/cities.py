"""Cidades consultadas pela rota agregada de clima."""
from __future__ import annotations

#: Lista fixa de cidades exibidas no painel; a ordem é preservada na resposta.
DEFAULT_CITIES: tuple[str, ...] = (
    "Kuala Lumpur",
    "Cape Town",
    "Buenos Aires",
    "New Delhi",
    "Copenhagen",
    "Venice",
    "Casablanca",
    "Las Vegas",
    "Osaka",
    "Guangzhou",
    "Saint Petersburg",
    "Riyadh",
    "Berlin",
    "Nottingham",
    "Jakarta",
)

__all__ = ["DEFAULT_CITIES"]
