"""
JSON output formatter for machine-readable results.
"""

import json
from typing import Optional

from scriptreflect.core.driver import AnalysisResult


class JSONFormatter:
    """
    Formats reflection results as JSON.
    """

    def __init__(self, indent: int = 2, sort_lines: bool = False):
        self.indent = indent
        self.sort_lines = sort_lines

    def format_result(
        self,
        result: AnalysisResult,
        file_path: str = "<string>",
        n_lines: Optional[int] = None,
    ) -> str:
        """Format the analysis of one file as JSON."""
        data = {"file": file_path}
        if n_lines is not None:
            data["n_lines"] = n_lines
        data.update(result.to_dict())

        if self.sort_lines:
            data["executable_lines"] = sorted(data["executable_lines"])

        return json.dumps(data, indent=self.indent)
