import os
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .formatter import FileRecord, read_file_record
from .languages import get_extension

# Version control and dependency folders that are never descended into
EXCLUDED_NAMES = frozenset({"node_modules", ".git"})


def parse_extensions(value: Optional[str]) -> frozenset:
    """
    Parses a comma separated extension list such as ".js, .TS" into {".js", ".ts"}.
    An empty or missing value means every extension is allowed.
    """
    if not value:
        return frozenset()
    return frozenset(ext.strip().lower() for ext in value.split(",") if ext.strip())


def is_skipped(name: str) -> bool:
    return name.startswith(".") or name in EXCLUDED_NAMES


class DirectoryWalker:
    """
    An iterable class that walks a directory tree depth-first.
    Yields one FileRecord per eligible file, in directory-listing order.

    Hidden entries and EXCLUDED_NAMES are skipped, symlinks are ignored,
    and files are kept only if their extension is in `extensions`
    (an empty set keeps everything).
    """
    def __init__(self, root: Path | str, base_path: Path | str = None, extensions: Iterable[str] = ()):
        self.root = Path(root)
        self.base_path = Path(base_path) if base_path is not None else self.root
        self.extensions = frozenset(ext.lower() for ext in extensions)

    def accepts(self, filename: str) -> bool:
        if not self.extensions:
            return True
        return get_extension(filename) in self.extensions

    def __iter__(self) -> Iterator[FileRecord]:
        yield from self._walk(self.root)

    def _walk(self, dir_path: Path | str) -> Iterator[FileRecord]:
        with os.scandir(dir_path) as entries:
            for entry in entries:
                if is_skipped(entry.name):
                    continue

                if entry.is_dir(follow_symlinks=False):
                    yield from self._walk(entry.path)
                elif entry.is_file(follow_symlinks=False) and self.accepts(entry.name):
                    yield read_file_record(entry.path, self.base_path)


def scan_directory(dir_path: Path | str, base_path: Path | str, allowed_extensions: Iterable[str] = ()) -> str:
    """Returns the rendered blocks of every eligible file under `dir_path`, concatenated."""
    walker = DirectoryWalker(dir_path, base_path=base_path, extensions=allowed_extensions)
    return "".join(record.render() for record in walker)
