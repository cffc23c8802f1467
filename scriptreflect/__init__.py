"""
scriptreflect

Static reflection of JavaScript sources for coverage tools: which lines
hold executable code, where branches split and what every function
is called.
"""

__version__ = "1.0.0"
__author__ = "scriptreflect Team"

from scriptreflect.core.driver import AnalysisResult, analyze, analyze_tree, parse_source
from scriptreflect.core.branches import BranchInfo
from scriptreflect.core.script import ReflectedScript
from scriptreflect.config import ReflectConfig
from scriptreflect.errors import ReflectError, MalformedNodeError, ParseError

__all__ = [
    "analyze",
    "analyze_tree",
    "parse_source",
    "AnalysisResult",
    "BranchInfo",
    "ReflectedScript",
    "ReflectConfig",
    "ReflectError",
    "MalformedNodeError",
    "ParseError",
]
