"""
Per-file reflection for coverage tools.
"""

import logging
from typing import List, Optional

from scriptreflect.config import ReflectConfig
from scriptreflect.core.branches import BranchInfo
from scriptreflect.core.driver import AnalysisResult, analyze
from scriptreflect.parsers import get_parser
from scriptreflect.parsers.base import BaseParser
from scriptreflect.utils import count_lines, normalize_path, read_source

logger = logging.getLogger(__name__)


class ReflectedScript:
    """
    The static coverage facts of one script file.

    The file is read and analyzed the first time any fact is asked
    for, and only once per instance.
    """

    def __init__(
        self,
        path: str,
        config: Optional[ReflectConfig] = None,
        parser: Optional[BaseParser] = None,
    ):
        self.path = normalize_path(path)
        self.config = config or ReflectConfig()
        self.parser = parser or get_parser(
            self.config.language, **self.config.to_parser_options()
        )
        self._result: Optional[AnalysisResult] = None
        self._n_lines = 0

    def __repr__(self) -> str:
        return f"ReflectedScript(path={self.path!r})"

    @property
    def reflected(self) -> bool:
        """Whether the file has been analyzed yet."""
        return self._result is not None

    def _reflect(self) -> AnalysisResult:
        if self._result is None:
            logger.debug("Reflecting %s", self.path)
            source = read_source(self.path, self.config.encoding)
            self._n_lines = count_lines(source)
            self._result = analyze(source, self.parser, self.path)
        return self._result

    @property
    def functions(self) -> List[str]:
        """Function names in discovery order."""
        return list(self._reflect().function_names)

    @property
    def branches(self) -> List[BranchInfo]:
        """Branches in discovery order."""
        return list(self._reflect().branches)

    @property
    def executable_lines(self) -> List[int]:
        """Executable lines, sorted."""
        return sorted(self._reflect().executable_lines)

    @property
    def n_lines(self) -> int:
        """Number of lines in the file."""
        self._reflect()
        return self._n_lines

    def result(self) -> AnalysisResult:
        """The full analysis, in discovery order."""
        return self._reflect()
