"""vocabsync CLI - collect words into maimemo."""

import logging
import sys
from dataclasses import replace
from datetime import date

import click

from .config import Config, load_config
from .core.errors import VocabSyncError
from .core.notepad import heading_for, section_words
from .workflows import add_vocabulary, collect, read_notepad


def _load(**overrides: str | None) -> Config:
    """Config file values, overridden by any option or env var that was given."""
    return replace(load_config(), **{k: v for k, v in overrides.items() if v})


token_option = click.option(
    "--token",
    envvar="MAIMEMO_TOKEN",
    help="maimemo open API token (overrides config).",
)
notebook_option = click.option(
    "--notebook",
    envvar="MAIMEMO_NOTEBOOK_ID",
    help="Target notepad ID (overrides config).",
)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """vocabsync - collect words into a maimemo notepad."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command("collect")
@click.argument("word")
@token_option
@notebook_option
def collect_cmd(word: str, token: str | None, notebook: str | None):
    """Add WORD under today's heading in the notepad."""
    config = _load(auth_token=token, notebook_id=notebook)
    try:
        collect(word, config)
    except VocabSyncError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Added '{word}' to notepad {config.notebook_id}.")


@main.command("add")
@click.argument("word")
@token_option
@click.option(
    "--vocabulary",
    envvar="MAIMEMO_VOCABULARY_ID",
    help="Target vocabulary ID (overrides config).",
)
def add_cmd(word: str, token: str | None, vocabulary: str | None):
    """Add WORD through the vocabulary endpoint."""
    config = _load(auth_token=token, vocabulary_id=vocabulary)
    try:
        add_vocabulary(word, config)
    except VocabSyncError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Added '{word}' to vocabulary {config.vocabulary_id}.")


@main.command()
@token_option
@notebook_option
@click.option("--today", "today_only", is_flag=True, help="Only list words collected today")
def show(token: str | None, notebook: str | None, today_only: bool):
    """Print the notepad content."""
    config = _load(auth_token=token, notebook_id=notebook)
    try:
        notepad = read_notepad(config)
    except VocabSyncError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if today_only:
        today = date.today()
        words = section_words(notepad.content, today)
        if not words:
            click.echo("No words collected today.")
            return
        click.echo(heading_for(today))
        for word in words:
            click.echo(word)
        return

    if not notepad.content.strip():
        click.echo("Notepad is empty.")
        return

    if notepad.title:
        click.echo(f"{notepad.title}\n")
    click.echo(notepad.content.strip())
