"""CLI entry point that plays a game over stdin/stdout."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from oreminer.config import load_config
from oreminer.env.driver import run_game
from oreminer.utils.errors import ProtocolError
from oreminer.utils.real_time_logger import get_logger

app = typer.Typer(add_completion=False)


@app.command()
def main(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML file with engine settings (see oreminer.yaml)."
    ),
    turn_log: Optional[Path] = typer.Option(
        None, "--turn-log", help="Optional path for a JSON log of every turn's decisions."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-turn timing to stderr."),
) -> None:
    """Read judge turns from stdin and answer with one command per robot."""

    if verbose:
        get_logger().setLevel(logging.DEBUG)

    try:
        engine_config = load_config(config)
    except FileNotFoundError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    except ValidationError as exc:
        typer.secho("Config failed validation", fg=typer.colors.RED, err=True)
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    try:
        run_game(sys.stdin, sys.stdout, engine_config, turn_log=turn_log)
    except ProtocolError as exc:
        typer.secho(f"Protocol error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc


if __name__ == "__main__":
    app()
