from .scan.languages import get_language_hint
from .scan.formatter import FileRecord, read_file_record, format_file
from .scan.walker import DirectoryWalker, scan_directory, parse_extensions

from .selection.picker import select_paths

from .builder import PromptBuilder

__version__ = "0.1.0"
