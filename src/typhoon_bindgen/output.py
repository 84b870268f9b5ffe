"""Styled terminal lines for the CLI."""

import typer

SUCCESS = "✓"
ERROR = "✗"
INFO = "ℹ"
WARNING = "⚠"
ARROW = "→"


def success(msg: str) -> None:
    typer.secho(f"{SUCCESS} {msg}", fg=typer.colors.GREEN)


def error(msg: str) -> None:
    typer.secho(f"{ERROR} {msg}", fg=typer.colors.RED, err=True)


def info(msg: str) -> None:
    typer.secho(f"{INFO} {msg}", fg=typer.colors.CYAN)


def warning(msg: str) -> None:
    typer.secho(f"{WARNING} {msg}", fg=typer.colors.YELLOW)


def step(msg: str) -> None:
    typer.secho(f"{ARROW} {msg}", dim=True)
