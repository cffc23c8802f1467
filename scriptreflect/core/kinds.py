"""
Node kind taxonomy.

Every node kind the reflection core knows about is a ``NodeKind``
member. A type string outside the taxonomy maps to ``None`` and is
treated as a leaf that is neither executable, branching nor a function.
"""

from enum import Enum
from typing import Dict, Optional

from scriptreflect.parsers.base import SyntaxNode


class NodeKind(Enum):
    """ESTree node kinds, plus the legacy SpiderMonkey ones."""
    # Program structure
    PROGRAM = "Program"
    SWITCH_CASE = "SwitchCase"
    CATCH_CLAUSE = "CatchClause"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    PROPERTY = "Property"
    SPREAD_ELEMENT = "SpreadElement"
    REST_ELEMENT = "RestElement"
    TEMPLATE_ELEMENT = "TemplateElement"
    SUPER = "Super"
    META_PROPERTY = "MetaProperty"
    IMPORT = "Import"

    # Statements
    BLOCK_STATEMENT = "BlockStatement"
    BREAK_STATEMENT = "BreakStatement"
    CONTINUE_STATEMENT = "ContinueStatement"
    DEBUGGER_STATEMENT = "DebuggerStatement"
    DO_WHILE_STATEMENT = "DoWhileStatement"
    EMPTY_STATEMENT = "EmptyStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    FOR_STATEMENT = "ForStatement"
    FOR_IN_STATEMENT = "ForInStatement"
    FOR_OF_STATEMENT = "ForOfStatement"
    IF_STATEMENT = "IfStatement"
    LABELED_STATEMENT = "LabeledStatement"
    LET_STATEMENT = "LetStatement"
    RETURN_STATEMENT = "ReturnStatement"
    SWITCH_STATEMENT = "SwitchStatement"
    THROW_STATEMENT = "ThrowStatement"
    TRY_STATEMENT = "TryStatement"
    WHILE_STATEMENT = "WhileStatement"
    WITH_STATEMENT = "WithStatement"

    # Declarations
    CLASS_DECLARATION = "ClassDeclaration"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    VARIABLE_DECLARATION = "VariableDeclaration"
    IMPORT_DECLARATION = "ImportDeclaration"
    EXPORT_ALL_DECLARATION = "ExportAllDeclaration"
    EXPORT_DEFAULT_DECLARATION = "ExportDefaultDeclaration"
    EXPORT_NAMED_DECLARATION = "ExportNamedDeclaration"
    IMPORT_SPECIFIER = "ImportSpecifier"
    IMPORT_DEFAULT_SPECIFIER = "ImportDefaultSpecifier"
    IMPORT_NAMESPACE_SPECIFIER = "ImportNamespaceSpecifier"
    EXPORT_SPECIFIER = "ExportSpecifier"

    # Classes
    CLASS_BODY = "ClassBody"
    METHOD_DEFINITION = "MethodDefinition"

    # Expressions
    ARRAY_EXPRESSION = "ArrayExpression"
    ARROW_FUNCTION_EXPRESSION = "ArrowFunctionExpression"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    AWAIT_EXPRESSION = "AwaitExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    CALL_EXPRESSION = "CallExpression"
    CLASS_EXPRESSION = "ClassExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    FUNCTION_EXPRESSION = "FunctionExpression"
    LOGICAL_EXPRESSION = "LogicalExpression"
    MEMBER_EXPRESSION = "MemberExpression"
    NEW_EXPRESSION = "NewExpression"
    OBJECT_EXPRESSION = "ObjectExpression"
    SEQUENCE_EXPRESSION = "SequenceExpression"
    TAGGED_TEMPLATE_EXPRESSION = "TaggedTemplateExpression"
    THIS_EXPRESSION = "ThisExpression"
    UNARY_EXPRESSION = "UnaryExpression"
    UPDATE_EXPRESSION = "UpdateExpression"
    YIELD_EXPRESSION = "YieldExpression"

    # Patterns
    ARRAY_PATTERN = "ArrayPattern"
    OBJECT_PATTERN = "ObjectPattern"
    ASSIGNMENT_PATTERN = "AssignmentPattern"

    # Leaves
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    LITERAL_EXPRESSION = "LiteralExpression"
    TEMPLATE_LITERAL = "TemplateLiteral"

    @classmethod
    def of(cls, type_name: str) -> Optional["NodeKind"]:
        """Look up the kind for a node type string, ``None`` if unknown."""
        type_name = LEGACY_ALIASES.get(type_name, type_name)
        try:
            return cls(type_name)
        except ValueError:
            return None


# Older SpiderMonkey Reflect.parse spellings
LEGACY_ALIASES: Dict[str, str] = {
    "LabelledStatement": "LabeledStatement",
    "ArrowExpression": "ArrowFunctionExpression",
}


def kind_of(node: SyntaxNode) -> Optional[NodeKind]:
    """Get the kind of a node."""
    return NodeKind.of(node.type)


# Whether a node of each kind is an execution point on its own.
#
# Expressions, declarations, statements, clauses, literals and
# identifiers are; function declarations, block statements and literal
# expressions are structural and are not. Everything else is not.
EXECUTABLE_KINDS: Dict[NodeKind, bool] = {
    NodeKind.PROGRAM: False,
    NodeKind.SWITCH_CASE: False,
    NodeKind.CATCH_CLAUSE: True,
    NodeKind.VARIABLE_DECLARATOR: False,
    NodeKind.PROPERTY: False,
    NodeKind.SPREAD_ELEMENT: False,
    NodeKind.REST_ELEMENT: False,
    NodeKind.TEMPLATE_ELEMENT: False,
    NodeKind.SUPER: False,
    NodeKind.META_PROPERTY: False,
    NodeKind.IMPORT: False,

    NodeKind.BLOCK_STATEMENT: False,
    NodeKind.BREAK_STATEMENT: True,
    NodeKind.CONTINUE_STATEMENT: True,
    NodeKind.DEBUGGER_STATEMENT: True,
    NodeKind.DO_WHILE_STATEMENT: True,
    NodeKind.EMPTY_STATEMENT: True,
    NodeKind.EXPRESSION_STATEMENT: True,
    NodeKind.FOR_STATEMENT: True,
    NodeKind.FOR_IN_STATEMENT: True,
    NodeKind.FOR_OF_STATEMENT: True,
    NodeKind.IF_STATEMENT: True,
    NodeKind.LABELED_STATEMENT: True,
    NodeKind.LET_STATEMENT: True,
    NodeKind.RETURN_STATEMENT: True,
    NodeKind.SWITCH_STATEMENT: True,
    NodeKind.THROW_STATEMENT: True,
    NodeKind.TRY_STATEMENT: True,
    NodeKind.WHILE_STATEMENT: True,
    NodeKind.WITH_STATEMENT: True,

    NodeKind.CLASS_DECLARATION: True,
    NodeKind.FUNCTION_DECLARATION: False,
    NodeKind.VARIABLE_DECLARATION: True,
    NodeKind.IMPORT_DECLARATION: True,
    NodeKind.EXPORT_ALL_DECLARATION: True,
    NodeKind.EXPORT_DEFAULT_DECLARATION: True,
    NodeKind.EXPORT_NAMED_DECLARATION: True,
    NodeKind.IMPORT_SPECIFIER: False,
    NodeKind.IMPORT_DEFAULT_SPECIFIER: False,
    NodeKind.IMPORT_NAMESPACE_SPECIFIER: False,
    NodeKind.EXPORT_SPECIFIER: False,

    NodeKind.CLASS_BODY: False,
    NodeKind.METHOD_DEFINITION: False,

    NodeKind.ARRAY_EXPRESSION: True,
    NodeKind.ARROW_FUNCTION_EXPRESSION: True,
    NodeKind.ASSIGNMENT_EXPRESSION: True,
    NodeKind.AWAIT_EXPRESSION: True,
    NodeKind.BINARY_EXPRESSION: True,
    NodeKind.CALL_EXPRESSION: True,
    NodeKind.CLASS_EXPRESSION: True,
    NodeKind.CONDITIONAL_EXPRESSION: True,
    NodeKind.FUNCTION_EXPRESSION: True,
    NodeKind.LOGICAL_EXPRESSION: True,
    NodeKind.MEMBER_EXPRESSION: True,
    NodeKind.NEW_EXPRESSION: True,
    NodeKind.OBJECT_EXPRESSION: True,
    NodeKind.SEQUENCE_EXPRESSION: True,
    NodeKind.TAGGED_TEMPLATE_EXPRESSION: True,
    NodeKind.THIS_EXPRESSION: True,
    NodeKind.UNARY_EXPRESSION: True,
    NodeKind.UPDATE_EXPRESSION: True,
    NodeKind.YIELD_EXPRESSION: True,

    NodeKind.ARRAY_PATTERN: False,
    NodeKind.OBJECT_PATTERN: False,
    NodeKind.ASSIGNMENT_PATTERN: False,

    NodeKind.IDENTIFIER: True,
    NodeKind.LITERAL: True,
    NodeKind.LITERAL_EXPRESSION: False,
    NodeKind.TEMPLATE_LITERAL: True,
}


def is_executable(kind: Optional[NodeKind]) -> bool:
    """Check whether nodes of a kind are executable on their own."""
    if kind is None:
        return False
    return EXECUTABLE_KINDS[kind]
