"""Locale string catalog loaded from YAML files."""

import logging
import re
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

LANG_PLACEHOLDER = "LANG"

_PLACEHOLDER = re.compile(r"#\{(\w+)\}")
_DIALECT = re.compile(r"^(\w+)[_-]")


class TranslationCatalog:
    """Merged key/value store for locale strings.

    Files are merged at most once per path, later files overriding keys
    of earlier ones. Loading is best effort: a file that is missing or
    malformed leaves the catalog as it was.

    Example:
        catalog = TranslationCatalog(locale="en_US")
        catalog.load_locale("locale/LANG.yml")  # en.yml, then en_US.yml
        catalog.translate("greeting", name="Ada")  # "Hello Ada"
        catalog.translate("unknown")  # "#unknown"
    """

    def __init__(self, locale: str = "en"):
        self.locale = locale
        self.entries: dict[str, str] = {}
        self._loaded: list[Path] = []
        self._lock = threading.Lock()

    @property
    def loaded_paths(self) -> list[Path]:
        return list(self._loaded)

    def load_locale(self, pattern: str | Path) -> None:
        """Load the locale files matching ``pattern``.

        ``LANG`` in the pattern is replaced by the language code. For a
        dialect such as ``en_US`` the base language file is loaded first
        and the dialect file second, so dialect strings win.
        """
        pattern = str(pattern)
        match = _DIALECT.match(self.locale)
        if match:
            self.load(pattern.replace(LANG_PLACEHOLDER, match.group(1)))
        self.load(pattern.replace(LANG_PLACEHOLDER, self.locale))

    def load(self, path: str | Path) -> bool:
        """Merge a YAML mapping file into the catalog.

        Returns:
            True if the file was merged by this call
        """
        resolved = Path(path).resolve()
        with self._lock:
            if resolved in self._loaded:
                logger.debug("Locale file %s already loaded, skipping", resolved)
                return False

        try:
            with open(resolved, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.debug("Could not load locale file %s: %s", resolved, e)
            return False

        if not isinstance(data, Mapping):
            logger.debug("Locale file %s is not a mapping, ignoring", resolved)
            return False

        strings = _flat_strings(data, resolved)

        with self._lock:
            if resolved in self._loaded:
                return False
            for key, value in strings.items():
                if value is None:
                    self.entries.pop(key, None)
                else:
                    self.entries[key] = value
            self._loaded.append(resolved)
        logger.debug("Loaded %d strings from %s", len(strings), resolved)
        return True

    def translate(
        self, key: str, params: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> str:
        """Look up ``key`` and fill in its ``#{name}`` placeholders.

        Placeholders without a matching parameter, or whose value is None
        or False, are kept literally.
        A missing key yields ``"#" + key`` so it shows up on the page.
        """
        template = self.entries.get(key)
        if template is None:
            return f"#{key}"

        values = {str(k): v for k, v in (params or {}).items()}
        values.update(kwargs)

        def substitute(match: re.Match) -> str:
            value = values.get(match.group(1))
            return match.group(0) if value is None or value is False else str(value)

        return _PLACEHOLDER.sub(substitute, template)

    def __contains__(self, key: str) -> bool:
        return key in self.entries


def _flat_strings(data: Mapping[Any, Any], path: Path) -> dict[str, str | None]:
    """Scalar entries of a locale mapping as text.

    Null values stay None: merging one removes the key, so it translates
    as missing. Nested mappings or lists are skipped.
    """
    strings: dict[str, str | None] = {}
    for key, value in data.items():
        if value is None:
            strings[str(key)] = None
        elif isinstance(value, (Mapping, list)):
            logger.debug("Skipping non-scalar entry '%s' in %s", key, path)
        else:
            strings[str(key)] = str(value)
    return strings
