"""Application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from wikiforge.errors import MultiError, forbid
from wikiforge.i18n.catalog import LANG_PLACEHOLDER


@dataclass
class WikiConfig:
    """Wiki configuration.

    Attributes:
        root: Application root directory
        locale: Locale code such as ``en`` or ``en_US``
        production: Keep resolved templates in memory for the process lifetime
        template_paths: Template search directories, first match wins
        locale_patterns: Locale file paths with a ``LANG`` placeholder
    """

    root: Path
    locale: str = "en"
    production: bool = False
    template_paths: list[Path] = field(default_factory=list)
    locale_patterns: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        if not self.template_paths:
            self.template_paths = [self.root / "views"]
        if not self.locale_patterns:
            self.locale_patterns = [str(self.root / "locale" / f"{LANG_PLACEHOLDER}.yml")]

    @classmethod
    def from_env(cls, base_path: Path | None = None) -> WikiConfig:
        """Create config from environment variables.

        Resolution order for each setting:
        1. WIKIFORGE_ROOT, WIKIFORGE_LOCALE, WIKIFORGE_ENV,
           WIKIFORGE_TEMPLATE_PATHS (os.pathsep separated)
        2. Defaults: base_path (or cwd), "en", development, root/views
        """
        root = Path(os.environ.get("WIKIFORGE_ROOT") or base_path or Path.cwd())
        template_paths = [
            Path(p)
            for p in os.environ.get("WIKIFORGE_TEMPLATE_PATHS", "").split(os.pathsep)
            if p
        ]
        return cls(
            root=root,
            locale=os.environ.get("WIKIFORGE_LOCALE", "en"),
            production=os.environ.get("WIKIFORGE_ENV", "development") == "production",
            template_paths=template_paths,
        )

    @classmethod
    def from_file(cls, path: Path) -> WikiConfig:
        """Create config from a YAML file.

        Relative paths resolve against the directory holding the file.

        Raises:
            MultiError: If the file is not valid YAML or not a mapping
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise MultiError(f"Config file '{path}' is not valid YAML: {e}") from e

        if not isinstance(data, dict):
            raise MultiError(f"Config file '{path}' must contain a mapping")

        base = path.parent
        root = base / data.get("root", ".")
        return cls(
            root=root,
            locale=str(data.get("locale", "en")),
            production=bool(data.get("production", False)),
            template_paths=[base / p for p in data.get("template_paths", [])],
            locale_patterns=[str(base / p) for p in data.get("locale_patterns", [])],
        )

    def check(self) -> None:
        """Check the configuration is usable.

        Raises:
            MultiError: Listing every failed condition
        """
        forbid({
            f"Root directory '{self.root}' does not exist": not self.root.is_dir(),
            "Locale must not be empty": not self.locale,
            "No template path exists": not any(p.is_dir() for p in self.template_paths),
        })
