"""
Utility functions for scriptreflect.
"""

import os


def normalize_path(path: str) -> str:
    """Normalize a file path."""
    return os.path.normpath(os.path.abspath(path))


def read_source(file_path: str, encoding: str = "utf-8") -> str:
    """Read a script's text."""
    with open(file_path, 'r', encoding=encoding) as f:
        return f.read()


def count_lines(text: str) -> int:
    """Count lines the way coverage reports do: newlines plus one."""
    return text.count('\n') + 1
