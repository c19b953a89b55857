"""CLI interface for texttrimmer."""

import click

from texttrimmer.config import highlight_options, load_config, trim_options
from texttrimmer.errors import ConfigError, InvalidOptionError, TextTrimmerError
from texttrimmer.highlighter import highlight
from texttrimmer.trimmer import trim
from texttrimmer.utils.logging_config import setup_logging
from texttrimmer.utils.text_processing import escape_for_search


def _read_text(text: str | None) -> str:
    if text is None or text == "-":
        data = click.get_text_stream("stdin").read()
        # Drop the newline a shell pipe usually adds
        return data[:-1] if data.endswith("\n") else data
    return text


def _apply_overrides(options: dict, **overrides) -> dict:
    """Layer explicitly given CLI values over the config defaults."""
    merged = dict(options)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


@click.group()
@click.option("--config-dir", default=None, help="Path to config directory")
@click.pass_context
def cli(ctx, config_dir):
    """texttrimmer - trim and highlight text."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_dir)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    setup_logging(
        config.get("logging", {}).get("level", "INFO"),
        config.get("logging", {}).get("file"),
        config.get("logging", {}).get("package_level"),
    )
    ctx.obj["config"] = config


@cli.command("trim")
@click.argument("text", required=False)
@click.option("--max-length", type=int, default=None, help="Maximum length, ellipsis included")
@click.option("--max-words", type=int, default=None, help="Maximum number of words (wins over --max-length)")
@click.option("--ellipsis", default=None, help="Marker appended when text is shortened")
@click.option("--respect-word-boundaries/--split-words", default=None, help="Back off to the previous whitespace when trimming by length")
@click.option("--strip-html/--keep-html", default=None, help="Remove <...> tags before measuring")
@click.pass_context
def trim_command(ctx, text, max_length, max_words, ellipsis, respect_word_boundaries, strip_html):
    """Trim TEXT (or stdin) to a maximum length or word count."""
    options = _apply_overrides(
        trim_options(ctx.obj["config"]),
        max_length=max_length,
        max_words=max_words,
        ellipsis=ellipsis,
        respect_word_boundaries=respect_word_boundaries,
        strip_html=strip_html,
    )
    try:
        result = trim(_read_text(text), **options)
    except InvalidOptionError as e:
        raise click.UsageError(str(e)) from e
    except TextTrimmerError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result)


@cli.command("highlight")
@click.argument("text", required=False)
@click.option("-t", "--term", "terms", multiple=True, help="Term to highlight (repeatable, applied in order)")
@click.option("--start", "highlight_start", default=None, help="Marker inserted before each match")
@click.option("--end", "highlight_end", default=None, help="Marker inserted after each match")
@click.option("--case-sensitive/--ignore-case", default=None)
@click.option("--whole-words/--any-position", default=None, help="Only match terms on word boundaries")
@click.pass_context
def highlight_command(ctx, text, terms, highlight_start, highlight_end, case_sensitive, whole_words):
    """Wrap each occurrence of the given terms in TEXT (or stdin) with markers."""
    options = _apply_overrides(
        highlight_options(ctx.obj["config"]),
        highlight_start=highlight_start,
        highlight_end=highlight_end,
        case_sensitive=case_sensitive,
        whole_words=whole_words,
    )
    try:
        result = highlight(_read_text(text), list(terms), **options)
    except TextTrimmerError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result)


@cli.command("escape")
@click.argument("literal")
def escape_command(literal):
    """Print LITERAL with regex metacharacters escaped."""
    click.echo(escape_for_search(literal))
