"""Configuration CLI commands."""

from pathlib import Path

import click

from wikiforge.config import WikiConfig
from wikiforge.errors import MultiError


@click.group()
def config():
    """Configuration commands."""
    pass


@config.command()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file. Without it, settings come from WIKIFORGE_* variables.",
)
def check(config_path: Path | None):
    """Check that the configuration is usable."""
    try:
        cfg = WikiConfig.from_file(config_path) if config_path else WikiConfig.from_env()
        cfg.check()
    except MultiError as e:
        for message in e.messages:
            click.echo(click.style(f"✗ {message}", fg="red"))
        click.echo(
            click.style(f"\n{len(e.messages)} problem(s) found", fg="red", bold=True)
        )
        raise SystemExit(1)

    click.echo(f"Root: {cfg.root}")
    click.echo(f"Locale: {cfg.locale}")
    click.echo(f"Mode: {'production' if cfg.production else 'development'}")
    click.echo(click.style("\nConfiguration is valid.", fg="green", bold=True))
