"""Source file discovery and reading."""

import logging
from pathlib import Path

from codemood.core.settings import settings

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset(
    {
        ".js",
        ".ts",
        ".jsx",
        ".tsx",
        ".py",
        ".java",
        ".c",
        ".cpp",
        ".cs",
        ".go",
        ".rb",
        ".rs",
        ".php",
        ".swift",
    }
)


def is_supported_file(file_path: Path | str) -> bool:
    """Check if a file extension is analyzed, ignoring case."""
    return Path(file_path).suffix.lower() in SUPPORTED_EXTENSIONS


def get_code_files(
    directory: Path,
    max_depth: int | None = None,
    ignore_dirs: tuple[str, ...] | None = None,
) -> list[Path]:
    """Collect supported source files below a directory.

    Entries are visited in name order so results are stable between runs.
    Symlinks are not followed and unreadable directories are skipped.

    Args:
        directory: Root directory to scan
        max_depth: Deepest directory level to enter, the root being level 0.
            Defaults to settings.max_scan_depth.
        ignore_dirs: Directory names never entered. Defaults to settings.ignore_dirs.

    Returns:
        Paths of supported files in depth-first order
    """
    if max_depth is None:
        max_depth = settings.max_scan_depth
    if ignore_dirs is None:
        ignore_dirs = settings.ignore_dirs

    files: list[Path] = []
    _collect_code_files(directory, 0, max_depth, frozenset(ignore_dirs), files)
    return files


def _collect_code_files(
    directory: Path, depth: int, max_depth: int, ignore_dirs: frozenset[str], files: list[Path]
) -> None:
    if depth > max_depth:
        return

    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        logger.warning("Error reading directory %s: %s", directory, e)
        return

    for entry in entries:
        if entry.is_symlink():
            continue
        if entry.is_dir():
            if entry.name not in ignore_dirs:
                _collect_code_files(entry, depth + 1, max_depth, ignore_dirs, files)
        elif entry.is_file() and is_supported_file(entry):
            files.append(entry)


def read_source_file(file_path: Path, max_bytes: int | None = None) -> str | None:
    """Read a source file as text.

    Line endings are left untouched and undecodable bytes are replaced rather
    than rejected.

    Args:
        file_path: File to read
        max_bytes: Size limit, defaults to settings.max_file_bytes

    Returns:
        File contents, or None if the file is missing, unreadable or too large
    """
    if max_bytes is None:
        max_bytes = settings.max_file_bytes

    try:
        size = file_path.stat().st_size
        if size > max_bytes:
            logger.warning("Skipping %s: %d bytes exceeds the %d byte limit", file_path, size, max_bytes)
            return None
        return file_path.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        logger.warning("Error reading file %s: %s", file_path, e)
        return None
