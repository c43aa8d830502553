"""wikiforge CLI entry point."""

import logging

import click


@click.group()
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Logging level.",
)
def cli(log_level: str):
    """wikiforge: wiki support library CLI."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


# Register subcommand groups
from wikiforge.cli.config_cmd import config  # noqa: E402
from wikiforge.cli.i18n_cmd import i18n  # noqa: E402
from wikiforge.cli.templates_cmd import templates  # noqa: E402

cli.add_command(config)
cli.add_command(i18n)
cli.add_command(templates)
