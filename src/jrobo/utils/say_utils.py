"""Console notices in the style of a task runner: ``say`` for progress, ``yell`` for trouble."""

import click

SAY_PREFIX = "➜  "
YELL_COLOR = "red"


def say(message: str) -> None:
    """Print a one-line progress notice to stderr."""
    click.echo(f"{SAY_PREFIX}{message}", err=True)


def yell(message: str, color: str = YELL_COLOR) -> None:
    """Print a framed notice to stderr, hard to miss in CI logs."""
    width = len(message) + 4
    click.secho("?" * width, fg=color, bold=True, err=True)
    click.secho(f"  {message}  ", fg=color, bold=True, err=True)
    click.secho("?" * width, fg=color, bold=True, err=True)
