"""Translation CLI commands."""

import click

from wikiforge.cli.params import parse_pairs
from wikiforge.i18n import TranslationCatalog


@click.group()
def i18n():
    """Translation commands."""
    pass


@i18n.command()
@click.argument("key")
@click.option(
    "--file",
    "patterns",
    multiple=True,
    required=True,
    help="Locale file, LANG is replaced by the language code (repeatable).",
)
@click.option("--locale", default="en", show_default=True, help="Locale code, e.g. en_US.")
@click.option("--param", "params", multiple=True, help="Placeholder value as KEY=VALUE.")
def translate(key: str, patterns: tuple[str, ...], locale: str, params: tuple[str, ...]):
    """Translate KEY using the given locale files."""
    catalog = TranslationCatalog(locale=locale)
    for pattern in patterns:
        catalog.load_locale(pattern)
    if key not in catalog:
        click.echo(click.style(f"Missing translation for '{key}'", fg="yellow"), err=True)
    click.echo(catalog.translate(key, parse_pairs(params, "--param")))
