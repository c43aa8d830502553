"""Filesystem access for template lookup and raw file streaming."""

from collections.abc import Iterator, Sequence
from pathlib import Path

BLOCK_SIZE = 8192


class SearchPathFilesystem:
    """Resolves ``<dir>/<name>.<kind>`` candidates over ordered search paths."""

    def __init__(self, paths: Sequence[Path | str]):
        self.paths = [Path(p) for p in paths]

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read_all(self, path: Path) -> bytes:
        return path.read_bytes()

    def list_candidate_paths(self, kind: str, name: str) -> list[Path]:
        """Candidate file paths, in search order."""
        return [base / f"{name}.{kind}" for base in self.paths]


class BlockFile:
    """Binary file that iterates in fixed-size blocks.

    Each iteration starts again from the beginning of the file, so a
    response body built from it can be replayed.
    """

    def __init__(self, path: Path | str, block_size: int = BLOCK_SIZE):
        self.path = Path(path)
        self.block_size = block_size
        self._file = open(self.path, "rb")

    def __iter__(self) -> Iterator[bytes]:
        self._file.seek(0)
        while True:
            part = self._file.read(self.block_size)
            if not part:
                break
            yield part

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "BlockFile":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def iter_blocks(path: Path | str, size: int = BLOCK_SIZE) -> Iterator[bytes]:
    """Yield the contents of ``path`` in chunks of at most ``size`` bytes."""
    with BlockFile(path, size) as f:
        yield from f
