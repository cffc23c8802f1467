"""
Text output formatter for human-readable results.
"""

import sys
from typing import Optional

from scriptreflect.core.driver import AnalysisResult


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"


def supports_color() -> bool:
    """Check if the terminal supports color output."""
    if not hasattr(sys.stdout, "isatty"):
        return False
    return sys.stdout.isatty()


class TextFormatter:
    """
    Formats reflection results for the terminal.
    """

    def __init__(self, use_color: bool = True, verbose: bool = False, sort_lines: bool = False):
        self.use_color = use_color and supports_color()
        self.verbose = verbose
        self.sort_lines = sort_lines

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if self.use_color:
            return f"{color}{text}{Colors.RESET}"
        return text

    def _heading(self, title: str, count: int) -> str:
        return self._color(f"{title} ({count})", Colors.BOLD)

    def format_result(
        self,
        result: AnalysisResult,
        file_path: str = "<string>",
        n_lines: Optional[int] = None,
    ) -> str:
        """Format the analysis of one file."""
        lines = []

        header = file_path
        if n_lines is not None:
            header += f" ({n_lines} lines)"
        lines.append(self._color(header, Colors.CYAN))
        lines.append(self._color("-" * 70, Colors.DIM))

        executable = result.executable_lines
        if self.sort_lines:
            executable = sorted(executable)
        lines.append(self._heading("Executable lines", len(executable)))
        lines.append("  " + (", ".join(str(n) for n in executable) or "none"))
        lines.append("")

        lines.append(self._heading("Branches", len(result.branches)))
        if not result.branches:
            lines.append("  none")
        for branch in result.branches:
            alternates = ", ".join(str(n) for n in branch.alternates)
            lines.append(f"  line {branch.point:<6} -> {self._color(alternates, Colors.YELLOW)}")
        lines.append("")

        lines.append(self._heading("Functions", len(result.function_names)))
        if not result.function_names:
            lines.append("  none")
        for name in result.function_names:
            lines.append(f"  {self._color(name, Colors.GREEN)}")

        if self.verbose:
            lines.append("")
            lines.append(self._color(
                f"{len(executable)} executable lines, "
                f"{len(result.branches)} branches, "
                f"{len(result.function_names)} functions",
                Colors.DIM,
            ))

        return "\n".join(lines)
