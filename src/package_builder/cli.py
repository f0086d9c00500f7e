"""Typer-based CLI for package builder."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from .builder import run_build
from .config import BuilderSettings, ConfigError, save_settings
from .prompts import PromptAttemptsExceeded

app = typer.Typer(help="Scaffold a Composer package skeleton.")
console = Console()


def _configure_logging(level: str, log_file: Path | None) -> None:
    logger.remove()
    logger.add(console.print, level=level, format="{message}")
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level)


@app.command()
def build(
    directory: Optional[Path] = typer.Argument(None, help="Directory the package folder is created in"),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to builder settings YAML"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write the log to this file"),
) -> None:
    """Ask a few questions and build the package skeleton."""

    _configure_logging(log_level.upper(), log_file)
    try:
        result = run_build(directory, config, console=console)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=4)
    except PromptAttemptsExceeded as exc:
        console.print(f"[red]ERROR:[/red] {exc}")
        raise typer.Exit(code=3)
    except OSError as exc:
        console.print(f"[red]ERROR:[/red] {exc}")
        raise typer.Exit(code=3)

    for message in result.warnings:
        console.print(f"[yellow]WARNING:[/yellow] {message.text}")
    console.print(f"[green]Package created in {result.target}[/green]")
    raise typer.Exit(code=0 if not result.has_warnings else 2)


@app.command("init-config")
def init_config(path: Path = typer.Argument(..., writable=True, resolve_path=True)) -> None:
    """Write an example builder settings file to PATH."""

    save_settings(BuilderSettings(), path)
    console.print(f"[green]Wrote configuration to {path}[/green]")


if __name__ == "__main__":
    app()
