"""
Exceptions raised by the reflection engine.
"""

from typing import Optional


class ReflectError(Exception):
    """Base class for all scriptreflect errors."""


class MalformedNodeError(ReflectError):
    """
    A syntax node is missing a field the analysis has to inspect.

    This always points at a malformed tree coming out of the parser,
    so it is raised immediately and never recovered from.
    """

    def __init__(self, node_type: str, field: str, line: Optional[int] = None):
        self.node_type = node_type
        self.field = field
        self.line = line
        if line is not None:
            message = f"{node_type} node at line {line} is missing required field '{field}'"
        else:
            message = f"{node_type} node is missing required field '{field}'"
        super().__init__(message)


class ParseError(ReflectError):
    """The parser rejected the source text."""

    def __init__(self, file_path: str, description: str, line: Optional[int] = None):
        self.file_path = file_path
        self.description = description
        self.line = line
        location = f"{file_path}:{line}" if line is not None else file_path
        super().__init__(f"{location}: {description}")
