"""Highlight and filter log lines with color:regex patterns."""

__version__ = "0.1.0"
