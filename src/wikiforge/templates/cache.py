"""Template source lookup over ordered search paths."""

import logging
import threading
from collections.abc import Iterator, Sequence
from pathlib import Path

from wikiforge.errors import TemplateNotFound
from wikiforge.files import BLOCK_SIZE, SearchPathFilesystem, iter_blocks

logger = logging.getLogger(__name__)


class TemplateCache:
    """Resolves (kind, name) to template source text.

    In production mode every resolved template is kept for the life of
    the process; entries are never invalidated. In development mode the
    file is read again on each call so edits show up immediately.
    """

    def __init__(self, filesystem: SearchPathFilesystem, production: bool = False):
        self.filesystem = filesystem
        self.production = production
        self._cache: dict[tuple[str, str], str] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_paths(cls, paths: Sequence[Path | str], production: bool = False) -> "TemplateCache":
        return cls(SearchPathFilesystem(paths), production=production)

    @property
    def paths(self) -> list[Path]:
        return self.filesystem.paths

    def resolve(self, kind: str, name: str) -> str:
        """Get the source of template ``name.kind``.

        Raises:
            TemplateNotFound: If no search path holds the file
        """
        if not self.production:
            return self._load(kind, name)

        key = (kind, name)
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return cached

        source = self._load(kind, name)
        with self._lock:
            return self._cache.setdefault(key, source)

    def is_cached(self, kind: str, name: str) -> bool:
        with self._lock:
            return (kind, name) in self._cache

    def locate(self, kind: str, name: str) -> Path:
        """Path of the first search path file for ``name.kind``.

        Raises:
            TemplateNotFound: If no search path holds the file
        """
        candidates = self.filesystem.list_candidate_paths(kind, name)
        for path in candidates:
            if self.filesystem.exists(path):
                return path
        raise TemplateNotFound(kind, name, candidates)

    def stream(self, kind: str, name: str, block_size: int = BLOCK_SIZE) -> Iterator[bytes]:
        """Raw bytes of ``name.kind`` in blocks, always read from disk.

        The file is located eagerly, so a missing template raises here
        rather than on first iteration.
        """
        return iter_blocks(self.locate(kind, name), block_size)

    def _load(self, kind: str, name: str) -> str:
        path = self.locate(kind, name)
        logger.debug("Loading template %s.%s from %s", name, kind, path)
        return self.filesystem.read_all(path).decode("utf-8")
