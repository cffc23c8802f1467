"""Reflection core: node taxonomy, child resolution and the collectors."""

from scriptreflect.core.kinds import NodeKind, EXECUTABLE_KINDS, is_executable
from scriptreflect.core.children import children_of, iter_preorder
from scriptreflect.core.lines import executable_lines
from scriptreflect.core.branches import BranchInfo, branches, resolve_start
from scriptreflect.core.functions import function_names
from scriptreflect.core.driver import (
    AnalysisResult, analyze, analyze_tree, parse_source, strip_shebang
)
from scriptreflect.core.script import ReflectedScript

__all__ = [
    "NodeKind",
    "EXECUTABLE_KINDS",
    "is_executable",
    "children_of",
    "iter_preorder",
    "executable_lines",
    "BranchInfo",
    "branches",
    "resolve_start",
    "function_names",
    "AnalysisResult",
    "analyze",
    "analyze_tree",
    "parse_source",
    "strip_shebang",
    "ReflectedScript",
]
