"""
Branch collection.

A branch point is a statement where control flow can diverge: an
``if``, a ``while``/``do-while`` loop guard or a ``switch``. For each one
we record the lines where its alternate paths actually start running.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from scriptreflect.core.children import iter_preorder
from scriptreflect.core.kinds import NodeKind, kind_of
from scriptreflect.parsers.base import SyntaxNode


@dataclass(frozen=True)
class BranchInfo:
    """A branch point and the start lines of its alternates."""
    point: int
    alternates: Tuple[int, ...]

    def __post_init__(self):
        if not self.alternates:
            raise ValueError(f"Branch at line {self.point} has no alternates")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "point": self.point,
            "alternates": list(self.alternates),
        }


# Statements that never execute on their own
_NEVER_EXECUTED = (NodeKind.EMPTY_STATEMENT, NodeKind.LABELED_STATEMENT)


def resolve_start(node: SyntaxNode) -> Optional[int]:
    """
    Find the line where execution starts when entering a node.

    Blocks and case clauses start at their first statement that
    itself resolves, so empty nested blocks are skipped over. Returns
    ``None`` when nothing inside can ever execute.
    """
    kind = kind_of(node)

    if kind is NodeKind.BLOCK_STATEMENT:
        return _first_start(node.nodes("body"))
    if kind is NodeKind.SWITCH_CASE:
        return _first_start(node.nodes("consequent"))
    if kind in _NEVER_EXECUTED:
        return None

    return node.line


def _first_start(statements: Iterable[SyntaxNode]) -> Optional[int]:
    for statement in statements:
        line = resolve_start(statement)
        if line is not None:
            return line
    return None


def _alternate_targets(node: SyntaxNode) -> List[SyntaxNode]:
    kind = kind_of(node)

    if kind is NodeKind.IF_STATEMENT:
        targets = [node.require("consequent")]
        if node.get("alternate") is not None:
            targets.append(node.get("alternate"))
        return targets
    if kind in (NodeKind.WHILE_STATEMENT, NodeKind.DO_WHILE_STATEMENT):
        return [node.require("body")]
    if kind is NodeKind.SWITCH_STATEMENT:
        return list(node.nodes("cases"))

    return []


def branch_info(node: SyntaxNode) -> Optional[BranchInfo]:
    """Get the branch recorded at a node, if it is a branch point."""
    alternates = [
        line
        for line in (resolve_start(target) for target in _alternate_targets(node))
        if line is not None
    ]
    if not alternates:
        return None
    return BranchInfo(point=node.line, alternates=tuple(alternates))


def branches(tree: SyntaxNode) -> List[BranchInfo]:
    """Collect every branch in preorder, nested branches included."""
    found = []
    for node in iter_preorder(tree.nodes("body")):
        info = branch_info(node)
        if info is not None:
            found.append(info)
    return found
