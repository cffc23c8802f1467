"""
Function name collection.
"""

from typing import List, Optional

from scriptreflect.core.children import iter_preorder
from scriptreflect.core.kinds import NodeKind, kind_of
from scriptreflect.parsers.base import SyntaxNode

FUNCTION_KINDS = (NodeKind.FUNCTION_DECLARATION, NodeKind.FUNCTION_EXPRESSION)


def function_name(node: SyntaxNode) -> Optional[str]:
    """
    Get the name of a function node, ``None`` for any other node.

    Anonymous functions are named ``function:<line>`` after the line
    they start on, so a coverage tool entering a nameless frame can
    still tell which function it is.
    """
    if kind_of(node) not in FUNCTION_KINDS:
        return None

    identifier = node.get("id")
    if identifier is not None:
        return identifier.require("name")
    return f"function:{node.line}"


def function_names(tree: SyntaxNode) -> List[str]:
    """Collect function names in preorder, nested functions included."""
    names = []
    for node in iter_preorder(tree.nodes("body")):
        name = function_name(node)
        if name is not None:
            names.append(name)
    return names
