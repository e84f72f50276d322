import os
from pathlib import Path
from typing import Optional

from .languages import get_language_hint


class FileRecord:
    """
    The output unit for a single file: its relative path, language hint,
    and either the trimmed content or the reason it could not be read.
    """
    def __init__(self, relative_path: str, language: str = "", content: Optional[str] = None, error: Optional[str] = None):
        self.relative_path = relative_path
        self.language = language
        self.content = content
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """Formats the record as a Markdown block ready to append to the prompt."""
        header = f"---\nFile: {self.relative_path}\n---\n"
        if not self.ok:
            return f"{header}Error reading file: {self.error}\n\n"
        return f"{header}```{self.language}\n{self.content}\n```\n\n"

    def __repr__(self):
        status = "ok" if self.ok else f"error={self.error!r}"
        return f"FileRecord({self.relative_path!r}, {status})"


def relative_posix_path(file_path: Path | str, base_path: Path | str) -> str:
    return os.path.relpath(file_path, base_path).replace("\\", "/")


def read_file_record(file_path: Path | str, base_path: Path | str) -> FileRecord:
    """
    Reads a file as UTF-8 text and wraps it in a FileRecord.

    Read failures (permissions, binary content, a directory passed as a file)
    are captured on the record instead of being raised.
    """
    relative_path = relative_posix_path(file_path, base_path)
    try:
        # utf-8-sig drops a leading BOM; newline="" keeps line endings as on disk
        with open(file_path, "r", encoding="utf-8-sig", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        return FileRecord(relative_path, error=str(e))

    return FileRecord(relative_path, language=get_language_hint(file_path), content=content.strip())


def format_file(file_path: Path | str, base_path: Path | str) -> str:
    return read_file_record(file_path, base_path).render()
