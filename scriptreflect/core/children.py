"""
Child resolution shared by every collector.

Each node kind knows which of its sub-nodes the collectors descend
into. Kinds without a resolver are leaves.
"""

from typing import Callable, Dict, Iterable, Iterator, List

from scriptreflect.core.kinds import NodeKind, kind_of
from scriptreflect.parsers.base import SyntaxNode

ChildResolver = Callable[[SyntaxNode], List[SyntaxNode]]

# Registry of child resolvers by node kind
_resolvers: Dict[NodeKind, ChildResolver] = {}


def resolves(*kinds: NodeKind):
    """Decorator to register the child resolver for node kinds."""
    def decorator(func: ChildResolver) -> ChildResolver:
        for kind in kinds:
            _resolvers[kind] = func
        return func
    return decorator


def children_of(node: SyntaxNode) -> List[SyntaxNode]:
    """Get the ordered sub-nodes of a node to recurse into."""
    kind = kind_of(node)
    if kind is None or kind not in _resolvers:
        return []
    return _resolvers[kind](node)


def iter_preorder(nodes: Iterable[SyntaxNode]) -> Iterator[SyntaxNode]:
    """Iterate depth-first over nodes, each before its descendants."""
    for node in nodes:
        yield node
        yield from iter_preorder(children_of(node))


@resolves(
    NodeKind.LABELED_STATEMENT,
    NodeKind.WITH_STATEMENT,
    NodeKind.LET_STATEMENT,
    NodeKind.FOR_IN_STATEMENT,
    NodeKind.FOR_OF_STATEMENT,
    NodeKind.FUNCTION_DECLARATION,
    NodeKind.FUNCTION_EXPRESSION,
    NodeKind.ARROW_FUNCTION_EXPRESSION,
    NodeKind.CATCH_CLAUSE,
)
def _single_body(node: SyntaxNode) -> List[SyntaxNode]:
    return [node.require("body")]


@resolves(NodeKind.WHILE_STATEMENT, NodeKind.DO_WHILE_STATEMENT)
def _loop(node: SyntaxNode) -> List[SyntaxNode]:
    return [node.require("body"), node.require("test")]


@resolves(NodeKind.FOR_STATEMENT)
def _for(node: SyntaxNode) -> List[SyntaxNode]:
    children = [
        node.get(name)
        for name in ("init", "test", "update")
        if node.get(name) is not None
    ]
    children.append(node.require("body"))
    return children


@resolves(NodeKind.BLOCK_STATEMENT)
def _block(node: SyntaxNode) -> List[SyntaxNode]:
    return list(node.nodes("body"))


@resolves(NodeKind.THROW_STATEMENT, NodeKind.RETURN_STATEMENT)
def _argument(node: SyntaxNode) -> List[SyntaxNode]:
    argument = node.get("argument")
    return [argument] if argument is not None else []


@resolves(NodeKind.EXPRESSION_STATEMENT)
def _expression(node: SyntaxNode) -> List[SyntaxNode]:
    return [node.require("expression")]


@resolves(NodeKind.OBJECT_EXPRESSION)
def _object(node: SyntaxNode) -> List[SyntaxNode]:
    # Spread elements carry no value
    return [
        prop.get("value")
        for prop in node.nodes("properties")
        if prop.get("value") is not None
    ]


@resolves(NodeKind.CALL_EXPRESSION, NodeKind.NEW_EXPRESSION)
def _call(node: SyntaxNode) -> List[SyntaxNode]:
    # Arguments first, the callee last
    children = list(node.nodes("arguments"))
    children.append(node.require("callee"))
    return children


@resolves(NodeKind.IF_STATEMENT)
def _if(node: SyntaxNode) -> List[SyntaxNode]:
    children = [node.require("test"), node.require("consequent")]
    if node.get("alternate") is not None:
        children.append(node.get("alternate"))
    return children


@resolves(NodeKind.TRY_STATEMENT)
def _try(node: SyntaxNode) -> List[SyntaxNode]:
    children = [node.require("block")]
    for name in ("handler", "finalizer"):
        if node.get(name) is not None:
            children.append(node.get(name))
    return children


@resolves(NodeKind.SWITCH_STATEMENT)
def _switch(node: SyntaxNode) -> List[SyntaxNode]:
    # Case tests are not children, only the statements under each case
    children: List[SyntaxNode] = []
    for case in node.nodes("cases"):
        children.extend(case.nodes("consequent"))
    return children


@resolves(NodeKind.VARIABLE_DECLARATION)
def _declaration(node: SyntaxNode) -> List[SyntaxNode]:
    return [
        declarator.get("init")
        for declarator in node.nodes("declarations")
        if declarator.get("init") is not None
    ]
