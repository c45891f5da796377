"""Exceptions raised by the analysis layers around the scoring core."""


class MoodAnalysisError(Exception):
    """Raised when a file cannot be analyzed."""


class UnsupportedFileError(MoodAnalysisError):
    """Raised when a single file has an extension that is not analyzed."""


class SourceReadError(MoodAnalysisError):
    """Raised when a single file cannot be read."""
