"""Code Mood Analyzer - find out how your code is feeling."""

__version__ = "1.0.0"
