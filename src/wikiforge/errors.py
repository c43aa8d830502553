"""Error types shared across wikiforge."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any


class WikiforgeError(Exception):
    """Base class for wikiforge errors."""


class MultiError(WikiforgeError):
    """Several failed conditions reported as one error.

    Attributes:
        messages: The failed condition names, in the order they were checked
    """

    def __init__(self, *messages: str):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class TemplateNotFound(WikiforgeError, LookupError):
    """No search path holds a template for the requested (kind, name)."""

    def __init__(self, kind: str, name: str, searched: list[Path] | None = None):
        self.kind = kind
        self.name = name
        self.searched = list(searched or [])
        super().__init__(f"Template '{name}.{kind}' not found")


def forbid(conditions: Mapping[str, Any]) -> None:
    """Raise MultiError naming every condition that holds.

    Usage:
        forbid({
            "Root directory does not exist": not root.exists(),
            "Locale is empty": not locale,
        })

    Raises:
        MultiError: If any condition value is truthy
    """
    failed = [name for name, holds in conditions.items() if holds]
    if failed:
        raise MultiError(*failed)
