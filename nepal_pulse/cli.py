"""
Command-line entry points for fetching content and watching the news feed.
"""
from __future__ import annotations

import json
import os
import threading

import click
from dotenv import load_dotenv

load_dotenv(os.getenv("PULSE_DOTENV", ".env"))

from nepal_pulse import build_resolver  # noqa: E402
from nepal_pulse.dashboard import DashboardController  # noqa: E402
from nepal_pulse.models import ContentType, FetchResult, Language  # noqa: E402
from nepal_pulse.serialization import result_to_dict  # noqa: E402
from nepal_pulse.settings import load_settings  # noqa: E402

SETTINGS = load_settings()

_language_option = click.option(
    "--language",
    type=click.Choice([lang.value for lang in Language]),
    default=SETTINGS.default_language.value,
    show_default=True,
)
_relay_option = click.option("--relay-url", default=None, help="Override PULSE_RELAY_URL.")


def _emit(result: FetchResult) -> None:
    click.echo(json.dumps(result_to_dict(result), ensure_ascii=False, indent=2))


def _fetch_once(content_type: ContentType, language: str, relay_url: str | None) -> None:
    resolver = build_resolver(relay_url, settings=SETTINGS)
    _emit(resolver.fetch(content_type, Language(language)))


@click.group()
def cli():
    pass


@cli.command()
@_language_option
@_relay_option
def news(language: str, relay_url: str | None):
    """Latest election headlines and the hot topic."""
    _fetch_once(ContentType.NEWS, language, relay_url)


@cli.command()
@_language_option
@_relay_option
def parties(language: str, relay_url: str | None):
    """Description and latest stance for each party on the roster."""
    _fetch_once(ContentType.PARTIES, language, relay_url)


@cli.command()
@_language_option
@_relay_option
def horoscope(language: str, relay_url: str | None):
    """Today's horoscope for all twelve signs."""
    _fetch_once(ContentType.HOROSCOPE, language, relay_url)


@cli.command()
@_language_option
@_relay_option
@click.option("--interval", type=int, default=SETTINGS.refresh_interval_seconds, show_default=True)
def watch(language: str, relay_url: str | None, interval: int):
    """Print each news refresh until interrupted."""
    controller = DashboardController(build_resolver(relay_url, settings=SETTINGS), refresh_interval_seconds=interval)
    controller.state.set_language(Language(language))
    controller.subscribe(_emit)
    controller.start()
    try:
        threading.Event().wait()
    except KeyboardInterrupt:
        click.echo("Stopping.")
    finally:
        controller.stop()


if __name__ == "__main__":  # pragma: no cover
    cli()
