"""Template CLI commands: show and render."""

from pathlib import Path

import click

from wikiforge.cli.params import parse_pairs
from wikiforge.errors import TemplateNotFound
from wikiforge.templates import TemplateCache, TemplateRenderer


def _cache(paths: tuple[Path, ...]) -> TemplateCache:
    return TemplateCache.from_paths(list(paths) or [Path.cwd() / "views"])


@click.group()
def templates():
    """Template commands."""
    pass


@templates.command()
@click.argument("kind")
@click.argument("name")
@click.option(
    "--path",
    "paths",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Template search directory (repeatable, first match wins). Defaults to ./views.",
)
def show(kind: str, name: str, paths: tuple[Path, ...]):
    """Print the source of template NAME.KIND."""
    cache = _cache(paths)
    try:
        for block in cache.stream(kind, name):
            click.echo(block, nl=False)
    except TemplateNotFound as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        for candidate in e.searched:
            click.echo(f"  searched {candidate}", err=True)
        raise SystemExit(1)


@templates.command()
@click.argument("name")
@click.option(
    "--path",
    "paths",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Template search directory (repeatable, first match wins). Defaults to ./views.",
)
@click.option("--var", "variables", multiple=True, help="Template variable as KEY=VALUE.")
@click.option("--no-layout", is_flag=True, default=False, help="Do not wrap in layout.html.")
def render(name: str, paths: tuple[Path, ...], variables: tuple[str, ...], no_layout: bool):
    """Render template NAME.html."""
    renderer = TemplateRenderer(_cache(paths))
    local_vars = parse_pairs(variables, "--var")
    try:
        click.echo(renderer.render(name, locals=local_vars, layout=not no_layout))
    except TemplateNotFound as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)
