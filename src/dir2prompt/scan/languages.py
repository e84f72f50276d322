import os
from pathlib import Path

# Fence tags for Markdown code blocks, keyed by lowercased extension
LANGUAGE_HINTS = {
    '.js': 'javascript', '.ts': 'typescript', '.jsx': 'jsx', '.tsx': 'tsx',
    '.py': 'python', '.java': 'java', '.cs': 'csharp', '.php': 'php',
    '.rb': 'ruby', '.go': 'go', '.rs': 'rust', '.swift': 'swift',
    '.kt': 'kotlin', '.scala': 'scala', '.html': 'html', '.css': 'css',
    '.scss': 'scss', '.sh': 'bash', '.ps1': 'powershell', '.sql': 'sql',
    '.xml': 'xml', '.txt': '',
    # Config and docs
    '.json': 'json', '.md': 'markdown', '.yaml': 'yaml', '.yml': 'yaml',
    '.toml': 'toml',
    # C family
    '.c': 'c', '.h': 'c', '.cpp': 'cpp', '.hpp': 'cpp',
}


def get_extension(path: Path | str) -> str:
    """Returns the lowercased dotted extension of the last path component ('' if none)."""
    return os.path.splitext(os.path.basename(str(path)))[1].lower()


def get_language_hint(path: Path | str) -> str:
    """Maps a file path to a code fence language tag. Unknown extensions give ''."""
    return LANGUAGE_HINTS.get(get_extension(path), '')
