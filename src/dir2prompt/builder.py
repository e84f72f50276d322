from pathlib import Path
from typing import Iterable, List

from tqdm import tqdm

from dir2prompt.scan.formatter import FileRecord, read_file_record
from dir2prompt.scan.walker import DirectoryWalker

PREAMBLE = "# Project Analysis Prompt\n\nAnalyze the following project structure and file contents.\n\n"


class PromptBuilder:
    """
    Assembles the Markdown prompt for a selection of files and directories.

    Each selected path gets a `## From: <name>` section. Directories are walked
    (relative paths start inside the directory), single files are emitted as-is.
    """
    def __init__(self, extensions: Iterable[str] = (), show_progress: bool = False):
        self.extensions = frozenset(extensions)
        self.show_progress = show_progress
        self.file_count = 0
        self.error_count = 0

    def collect(self, path: Path | str) -> List[FileRecord]:
        """Returns the file records for one selected path."""
        path = Path(path)
        # Raises for vanished paths
        path.stat()

        if path.is_dir():
            return list(DirectoryWalker(path, base_path=path, extensions=self.extensions))
        if path.is_file():
            return [read_file_record(path, path.parent)]
        return []

    def build_section(self, path: Path | str) -> str:
        """Renders the `## From:` section for one selected path and updates the counters."""
        path = Path(path)
        records = self.collect(path)

        self.file_count += len(records)
        self.error_count += sum(1 for record in records if not record.ok)

        return f"## From: {path.name}\n\n" + "".join(record.render() for record in records)

    def build(self, paths: Iterable[Path | str]) -> str:
        """Builds the full prompt document for `paths`, in order."""
        self.file_count, self.error_count = 0, 0
        paths = list(paths)

        sections = [PREAMBLE]
        for path in tqdm(paths, desc="Scanning selections", unit="path", disable=not self.show_progress):
            sections.append(self.build_section(path))
        return "".join(sections)

    def write(self, paths: Iterable[Path | str], output_path: Path | str) -> Path:
        """Builds the prompt and writes it to `output_path` as UTF-8."""
        output_path = Path(output_path)
        document = self.build(paths)
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(document)
        return output_path
