"""Shared CLI option parsing."""

import click


def parse_pairs(pairs: tuple[str, ...], option: str) -> dict[str, str]:
    """Turn ``("a=1", "b=2")`` into ``{"a": "1", "b": "2"}``."""
    values: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint=option)
        values[key] = value
    return values
