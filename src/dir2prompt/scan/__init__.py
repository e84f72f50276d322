from .languages import get_language_hint, LANGUAGE_HINTS
from .formatter import FileRecord, read_file_record, format_file
from .walker import DirectoryWalker, scan_directory, parse_extensions, EXCLUDED_NAMES
