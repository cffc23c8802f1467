"""
JavaScript parser backed by esprima.

Produces ESTree trees with line locations, normalized into
``SyntaxNode`` instances.
"""

import logging
import re

import esprima
from esprima.error_handler import Error as EsprimaError

from scriptreflect.errors import ParseError
from scriptreflect.parsers import register_parser
from scriptreflect.parsers.base import BaseParser, SyntaxNode

logger = logging.getLogger(__name__)

SOURCE_TYPES = ("script", "module")

# esprima prefixes every error message with its line
_LINE_PREFIX = re.compile(r"^Line \d+: ")


@register_parser("javascript")
class JavaScriptParser(BaseParser):
    """
    Parser for JavaScript source code.

    Scripts are parsed with ``esprima.parseScript`` and ES modules with
    ``esprima.parseModule``; locations are always requested because
    every collector reports line numbers.
    """

    def __init__(self, source_type: str = "script", tolerant: bool = False, jsx: bool = False):
        if source_type not in SOURCE_TYPES:
            raise ValueError(f"Unknown source type: {source_type}")
        self.source_type = source_type
        self.tolerant = tolerant
        self.jsx = jsx

    @property
    def language(self) -> str:
        return "javascript"

    def parse(self, source: str, file_path: str = "<unknown>") -> SyntaxNode:
        """Parse JavaScript source code into a syntax tree."""
        options = {
            "loc": True,
            "tolerant": self.tolerant,
            "jsx": self.jsx,
        }

        try:
            if self.source_type == "module":
                program = esprima.parseModule(source, options)
            else:
                program = esprima.parseScript(source, options)
        except EsprimaError as e:
            raise ParseError(
                file_path,
                _describe(e),
                line=getattr(e, "lineNumber", None),
            ) from e

        # Only set when parsing tolerantly
        for error in getattr(program, "errors", None) or []:
            logger.warning(
                "%s:%s: recovered from syntax error: %s",
                file_path, getattr(error, "lineNumber", "?"), _describe(error),
            )

        tree = SyntaxNode.from_dict(program.toDict())
        logger.debug(
            "Parsed %s as %s: %d top-level statements",
            file_path, self.source_type, len(tree.nodes("body")),
        )
        return tree


def _describe(error: Exception) -> str:
    """Get an esprima error's message without its line prefix."""
    message = getattr(error, "message", None) or str(error)
    return _LINE_PREFIX.sub("", message)
