"""
Reflection driver.

Turns source text into a syntax tree and runs the three collectors
over it. The collectors are independent of each other and keep no
state between calls, so one tree may be analyzed from several threads.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from scriptreflect.core.branches import BranchInfo, branches
from scriptreflect.core.functions import function_names
from scriptreflect.core.lines import executable_lines
from scriptreflect.parsers import get_parser
from scriptreflect.parsers.base import BaseParser, SyntaxNode

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """The static coverage facts for one syntax tree."""
    executable_lines: List[int] = field(default_factory=list)
    branches: List[BranchInfo] = field(default_factory=list)
    function_names: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "executable_lines": list(self.executable_lines),
            "branches": [branch.to_dict() for branch in self.branches],
            "function_names": list(self.function_names),
        }


def strip_shebang(source: str) -> str:
    """
    Blank out a leading ``#!`` line.

    The newline ending the shebang line is kept, so every following
    line keeps its number.
    """
    if not source.startswith("#!"):
        return source

    newline = source.find("\n")
    if newline == -1:
        return ""
    return source[newline:]


def parse_source(
    source: str,
    parser: Optional[BaseParser] = None,
    file_path: str = "<string>",
) -> SyntaxNode:
    """Parse source text, shebang and all, into a program tree."""
    stripped = strip_shebang(source)
    if stripped is not source:
        logger.debug("Stripped shebang line from %s", file_path)

    if parser is None:
        parser = get_parser("javascript")
    return parser.parse(stripped, file_path)


def analyze_tree(tree: SyntaxNode) -> AnalysisResult:
    """Run every collector over a program tree."""
    result = AnalysisResult(
        executable_lines=executable_lines(tree),
        branches=branches(tree),
        function_names=function_names(tree),
    )
    logger.debug(
        "Reflected %d executable lines, %d branches, %d functions",
        len(result.executable_lines), len(result.branches), len(result.function_names),
    )
    return result


def analyze(
    source: str,
    parser: Optional[BaseParser] = None,
    file_path: str = "<string>",
) -> AnalysisResult:
    """Parse source text and collect its static coverage facts."""
    return analyze_tree(parse_source(source, parser, file_path))
