"""CLI entry point for md5state."""

from __future__ import annotations

import asyncio
import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer.core import TyperCommand

from md5state.config import USAGE, UsageError, load_config, parse_command_line
from md5state.errors import Md5StateError
from md5state.filelist import load_file_list
from md5state.hashing import generate_report

_TOKENS_KEY = "md5state.tokens"

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

err_console = Console(stderr=True, soft_wrap=True, highlight=False)


class DirectiveCommand(TyperCommand):
    """Command that keeps its raw token stream instead of parsing options.

    Tokens such as ``--``, ``-`` and ``-n-`` carry meaning of their own, so
    they are handed to ``parse_command_line`` untouched.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        ctx.meta[_TOKENS_KEY] = list(args)
        return super().parse_args(ctx, [])


app = typer.Typer(name="md5state", add_completion=False)


def _configure_logging(level: str) -> None:
    pkg_logger = logging.getLogger("md5state")
    pkg_logger.setLevel(_LOG_LEVELS[level])
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))


def _fail(error: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


@app.command(cls=DirectiveCommand)
def main(ctx: typer.Context) -> None:
    """Print MD5 checksums for a list of files."""
    try:
        cfg = load_config()
    except ValueError as e:
        _fail(e)
    _configure_logging(cfg.log_level)

    try:
        settings = parse_command_line(ctx.meta[_TOKENS_KEY], cfg)
    except UsageError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        err_console.print(USAGE, markup=False)
        raise typer.Exit(2)

    try:
        paths = load_file_list(settings.source)
        report = asyncio.run(generate_report(paths, settings.policy))
    except Md5StateError as e:
        _fail(e)

    # The report already ends in a blank line; echo adds the final newline.
    typer.echo(report)
