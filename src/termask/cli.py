#!/usr/bin/env python3
"""CLI entry point for termask."""

import logging
import re
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from .builder import PromptBuilder
from .colours import Colour
from .config import Config
from .errors import AskError
from .output import ConsoleOutput

COLOUR_NAMES = [c.value for c in Colour]

# Prompt text goes to stderr so `x=$(termask ...)` captures only the answer
err_console = Console(stderr=True, highlight=False)


@click.command(name="termask")
@click.version_option(package_name="termask")
@click.argument("message")
@click.option("--no-echo", is_flag=True, help="Hide typed characters (password style).")
@click.option("--no-answer", is_flag=True, help="Ask, but print an empty answer.")
@click.option("--confirm", is_flag=True, help="Loop until the user confirms with Y.")
@click.option("--default", "default_answer", help="Answer to use when the reply is empty.")
@click.option("--prompt", "prompt_char", help="Character appended to the message, e.g. ':'.")
@click.option("--fg", type=click.Choice(COLOUR_NAMES, case_sensitive=False), help="Text colour.")
@click.option("--bg", type=click.Choice(COLOUR_NAMES, case_sensitive=False), help="Background colour.")
@click.option("--match", "pattern", help="Regular expression the answer must match in full.")
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Load TERMASK_* settings from this .env file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log pipeline steps to stderr.")
def main(
    message: str,
    no_echo: bool,
    no_answer: bool,
    confirm: bool,
    default_answer: Optional[str],
    prompt_char: Optional[str],
    fg: Optional[str],
    bg: Optional[str],
    pattern: Optional[str],
    env_file: Optional[Path],
    verbose: bool,
):
    """Ask MESSAGE on the terminal and print the answer."""
    config = Config(env_file)
    errors = config.validate()
    if errors:
        for error in errors:
            err_console.print(f"[red]✗ {error}[/red]")
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.logging_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    builder = PromptBuilder(message, config=config)
    builder.redirect_out(ConsoleOutput(err_console))

    if no_echo:
        builder.no_echo()
    if no_answer:
        builder.no_answer()
    if confirm:
        builder.confirm()
    if default_answer is not None:
        builder.default(default_answer)
    if prompt_char is not None:
        try:
            builder.prompt(prompt_char)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--prompt")
    if fg:
        builder.fg_colour(Colour(fg.lower()))
    if bg:
        builder.bg_colour(Colour(bg.lower()))
    if pattern is not None:
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise click.BadParameter(str(e), param_hint="--match")
        builder.validate(lambda answer: regex.fullmatch(answer) is not None)

    try:
        answer = builder.ask()
    except AskError as e:
        err_console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    click.echo(answer)


if __name__ == "__main__":
    sys.exit(main())
