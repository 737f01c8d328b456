"""Interface de linha de comando para operar o Boletim."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Iterable, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from boletim.domain import NewsArticle, WeatherAlert, WeatherSnapshot
from boletim.domain.exceptions import BoletimError
from boletim.infrastructure.logs import configure_logging
from boletim.services.alerts import build_alerts_container
from boletim.services.articles import build_articles_container
from boletim.services.weather import build_weather_container
from boletim.settings import get_log_level


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Boletim - clima, alertas e notícias"
    )
    parser.add_argument(
        "--log-level", default=None, help="Nível de log (default: BOLETIM_LOG_LEVEL)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="Inicia a API HTTP com o Uvicorn")

    weather = subparsers.add_parser(
        "weather", help="Mostra o clima atual de uma localidade ou das cidades padrão"
    )
    weather.add_argument(
        "location", nargs="?", help="Localidade em texto livre. Se omitida usa a lista"
    )

    subscribe = subparsers.add_parser(
        "subscribe", help="Envia uma inscrição de alerta para o webhook"
    )
    subscribe.add_argument("email", help="Endereço que receberá o alerta")
    subscribe.add_argument("location", help="Localidade monitorada")

    subparsers.add_parser("list-articles", help="Lista as notícias cadastradas")

    search = subparsers.add_parser(
        "search-articles", help="Busca notícias pelo título"
    )
    search.add_argument("query", help="Trecho procurado no título")

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    configure_logging(args.log_level or get_log_level(), console=console)
    logger = logging.getLogger("boletim.cli")

    try:
        if args.command == "serve":
            from boletim.api import run

            run()
        elif args.command == "weather":
            snapshots = asyncio.run(_fetch_weather(args.location))
            _print_weather(console, snapshots)
        elif args.command == "subscribe":
            alert = asyncio.run(_subscribe(args.email, args.location))
            console.print(
                f"[green]Inscrição enviada para {alert.recipient_email}.[/green]"
            )
            if alert.is_warranted:
                console.print(f"[yellow]{alert.alert_message}[/yellow]")
            else:
                console.print(
                    f"Sem alerta para {alert.location}: {alert.condition}, "
                    f"{_format_temperature(alert.temperature)}"
                )
        elif args.command == "list-articles":
            container = build_articles_container()
            try:
                _print_articles(console, container.repository.list_all())
            finally:
                container.close()
        elif args.command == "search-articles":
            container = build_articles_container()
            try:
                _print_articles(console, container.repository.search_by_title(args.query))
            finally:
                container.close()
    except BoletimError as exc:
        logger.error("%s", exc.message)
        console.print(f"[red]Erro: {exc.message}[/red]")
        sys.exit(1)


async def _fetch_weather(location: str | None) -> list[WeatherSnapshot]:
    container = build_weather_container()
    try:
        if location:
            return [await container.weather_service.current(location)]
        return await container.weather_service.current_for_many(container.cities)
    finally:
        await container.aclose()


async def _subscribe(email: str, location: str) -> WeatherAlert:
    weather = build_weather_container()
    alerts = build_alerts_container(weather.weather_service)
    try:
        return await alerts.subscription_service.subscribe(email, location)
    finally:
        await alerts.aclose()
        await weather.aclose()


def _format_temperature(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:.1f} °C"
    return "-" if value is None else str(value)


def _print_weather(console: Console, snapshots: Iterable[WeatherSnapshot]) -> None:
    table = Table(title="Clima atual")
    table.add_column("Localidade")
    table.add_column("Condição")
    table.add_column("Temperatura", justify="right")
    for snapshot in snapshots:
        table.add_row(
            snapshot.location,
            snapshot.condition or "-",
            _format_temperature(snapshot.temperature),
        )
    console.print(table)


def _print_articles(console: Console, articles: Iterable[NewsArticle]) -> None:
    articles = list(articles)
    if not articles:
        console.print("[yellow]Nenhuma notícia encontrada.[/yellow]")
        return
    for article in articles:
        console.print(f"[bold]-[/bold] {article.id}: {article.title}")


if __name__ == "__main__":
    main()
