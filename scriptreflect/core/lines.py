"""
Executable line collection.
"""

from typing import List

from scriptreflect.core.children import iter_preorder
from scriptreflect.core.kinds import is_executable, kind_of
from scriptreflect.parsers.base import SyntaxNode


def executable_lines(tree: SyntaxNode) -> List[int]:
    """
    Collect the lines holding executable code.

    Lines come back in the order they were first seen during a
    preorder walk of the program, without duplicates. They are not
    sorted.
    """
    lines = [
        node.line
        for node in iter_preorder(tree.nodes("body"))
        if is_executable(kind_of(node))
    ]
    return list(dict.fromkeys(lines))
