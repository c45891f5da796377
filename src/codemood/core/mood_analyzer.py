"""Mood analysis of source text, files and directory trees."""

import logging
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from pathlib import Path

from codemood.core.aggregator import aggregate
from codemood.core.errors import SourceReadError, UnsupportedFileError
from codemood.core.file_utils import get_code_files, is_supported_file, read_source_file
from codemood.core.metrics_collector import collect
from codemood.core.models import DirectoryAnalysis, FileAnalysisResult
from codemood.core.mood_classifier import classify
from codemood.core.settings import settings
from codemood.core.suggestions import suggest

logger = logging.getLogger(__name__)


def analyze_source(text: str | None, filename: str = "unknown", path: str | None = None) -> FileAnalysisResult:
    """Run collection, classification and suggestions over one text."""
    metrics = collect(text, filename)
    verdict = classify(metrics)
    return FileAnalysisResult(
        path=path if path is not None else filename,
        metrics=metrics,
        verdict=verdict,
        suggestions=suggest(metrics, verdict),
    )


def _analyze_single_file(file_path: Path, max_bytes: int) -> FileAnalysisResult | None:
    """Analyze a single source file.

    Module-level function for ProcessPoolExecutor compatibility.
    """
    code = read_source_file(file_path, max_bytes=max_bytes)
    if code is None:
        return None
    return analyze_source(code, file_path.name, str(file_path))


class MoodAnalyzer:
    """Runs the mood pipeline over files and directories."""

    def __init__(
        self,
        parallel_threshold: int | None = None,
        max_workers: int | None = None,
        max_file_bytes: int | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            parallel_threshold: Minimum file count for process-pool analysis.
                Defaults to settings.parallel_file_threshold.
            max_workers: Pool size cap, defaults to settings.max_parallel_workers.
            max_file_bytes: Files above this size are skipped, defaults to settings.max_file_bytes.
        """
        self.parallel_threshold = (
            parallel_threshold if parallel_threshold is not None else settings.parallel_file_threshold
        )
        self.max_workers = max_workers if max_workers is not None else settings.max_parallel_workers
        self.max_file_bytes = max_file_bytes if max_file_bytes is not None else settings.max_file_bytes

    def analyze_source(self, text: str | None, filename: str = "unknown") -> FileAnalysisResult:
        """Analyze in-memory source text."""
        return analyze_source(text, filename)

    def analyze_file(self, file_path: Path) -> FileAnalysisResult | None:
        """Analyze a single source file.

        Args:
            file_path: Path to the source file.

        Returns:
            FileAnalysisResult, or None if the file could not be read.
        """
        return _analyze_single_file(file_path, self.max_file_bytes)

    def analyze_file_or_raise(self, file_path: Path) -> FileAnalysisResult:
        """Analyze a file the user asked for explicitly.

        Raises:
            UnsupportedFileError: If the extension is not supported.
            SourceReadError: If the file cannot be read.
        """
        if not is_supported_file(file_path):
            raise UnsupportedFileError(f"Unsupported file type: {file_path.suffix or file_path.name}")

        result = self.analyze_file(file_path)
        if result is None:
            raise SourceReadError(f"Could not read file: {file_path}")
        return result

    def analyze_files(self, file_paths: list[Path]) -> list[FileAnalysisResult]:
        """Analyze multiple source files, in parallel once there are enough of them.

        Args:
            file_paths: List of paths to analyze.

        Returns:
            Results in the order of file_paths, without the files that could not be read.
        """
        if len(file_paths) >= self.parallel_threshold and len(file_paths) > 1:
            workers = min(self.max_workers, len(file_paths))
            logger.debug("Analyzing %d files with %d worker processes", len(file_paths), workers)
            with ProcessPoolExecutor(max_workers=workers) as executor:
                results = list(executor.map(_analyze_single_file, file_paths, repeat(self.max_file_bytes)))
        else:
            results = [self.analyze_file(file_path) for file_path in file_paths]

        return [result for result in results if result is not None]

    def analyze_directory(self, directory: Path) -> DirectoryAnalysis:
        """Analyze every supported file below a directory.

        Args:
            directory: Root of the tree to scan.

        Returns:
            DirectoryAnalysis with per-file results and their aggregate, if any.
        """
        file_paths = get_code_files(directory)
        logger.debug("Found %d supported files in %s", len(file_paths), directory)

        results = self.analyze_files(file_paths)
        return DirectoryAnalysis(
            root=str(directory),
            results=results,
            aggregate=aggregate(results) if results else None,
        )
