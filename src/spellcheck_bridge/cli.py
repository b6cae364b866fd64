"""Command line entrypoint for checking text through the bridge."""

from __future__ import annotations

import asyncio
import json

import typer
from dishka import make_container

from spellcheck_bridge.config import settings
from spellcheck_bridge.di import SpellCheckBridgeProvider
from spellcheck_bridge.logging_utils import configure_logging
from spellcheck_bridge.protocols import SpellCheckClientProtocol
from spellcheck_bridge.providers import DictionaryNotFound

app = typer.Typer(help="Spell-check text with the default dictionary provider")

LanguageOption = typer.Option(None, "--language", "-l", help="Dictionary language (e.g. en, de)")
LogLevelOption = typer.Option(None, "--log-level", help="Overrides SPELLCHECK_BRIDGE_LOG_LEVEL")


def _build_client(language: str | None) -> SpellCheckClientProtocol:
    container = make_container(SpellCheckBridgeProvider(language=language))
    try:
        return container.get(SpellCheckClientProtocol)
    except DictionaryNotFound as e:
        typer.secho(f"No dictionary available for language '{e.language}'", fg=typer.colors.RED)
        raise typer.Exit(code=2) from e


def _setup(log_level: str | None) -> None:
    configure_logging(
        service_name=settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT,
        log_level=log_level or settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT or None,
    )


@app.command()
def check(
    text: str = typer.Argument(..., help="Text to check"),
    language: str | None = LanguageOption,
    log_level: str | None = LogLevelOption,
) -> None:
    """Print the first misspelling in TEXT."""
    _setup(log_level)
    span = _build_client(language).check_one(text)
    if span is None:
        typer.echo("No misspellings found")
        return
    typer.echo(json.dumps({"word": span.text, "location": span.start, "length": span.length}))


@app.command("check-all")
def check_all(
    text: str = typer.Argument(..., help="Text to check"),
    language: str | None = LanguageOption,
    log_level: str | None = LogLevelOption,
) -> None:
    """Print every misspelled range in TEXT, or "cancelled" if nothing was checked."""
    _setup(log_level)
    outcome = asyncio.run(_build_client(language).check_all(text))
    if outcome.is_cancelled:
        typer.echo("cancelled")
        return
    typer.echo(json.dumps([item.model_dump() for item in outcome.results]))


@app.command()
def autocorrect(
    word: str = typer.Argument(..., help="Word to correct"),
    language: str | None = LanguageOption,
    log_level: str | None = LogLevelOption,
) -> None:
    """Print the automatic correction for WORD."""
    _setup(log_level)
    correction = _build_client(language).auto_correct(word)
    typer.echo(correction if correction is not None else "No correction")


if __name__ == "__main__":
    app()
