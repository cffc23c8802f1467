"""
Base parser class and the normalized syntax node it produces.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from scriptreflect.errors import MalformedNodeError


# Keys of an ESTree dict that never become node fields
_LOCATION_KEYS = ("type", "loc", "range")


@dataclass(frozen=True, eq=False)
class SyntaxNode:
    """
    Immutable syntax tree node.

    Wraps one ESTree node: ``type`` is the kind tag, ``start_line`` the
    line the node starts on (``None`` when the parser gave no location)
    and ``fields`` a read-only mapping of every category-specific
    attribute. Child nodes are ``SyntaxNode`` instances and node lists
    are tuples. Nodes compare by identity, so two statements on the
    same line stay distinct.
    """
    type: str
    start_line: Optional[int] = None
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __repr__(self) -> str:
        return f"SyntaxNode(type={self.type!r}, line={self.start_line})"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SyntaxNode":
        """Build a node tree from an ESTree dictionary."""
        if "type" not in data:
            raise MalformedNodeError("<unknown>", "type")

        fields = {
            key: _convert(value)
            for key, value in data.items()
            if key not in _LOCATION_KEYS
        }
        return cls(type=data["type"], start_line=_start_line(data), fields=fields)

    @property
    def line(self) -> int:
        """The start line, which every inspected node must carry."""
        if self.start_line is None:
            raise MalformedNodeError(self.type, "loc")
        return self.start_line

    def get(self, name: str) -> Any:
        """Get an optional field, ``None`` when absent."""
        return self.fields.get(name)

    def require(self, name: str) -> Any:
        """Get a field the analysis cannot do without."""
        value = self.fields.get(name)
        if value is None:
            raise MalformedNodeError(self.type, name, self.start_line)
        return value

    def nodes(self, name: str) -> Tuple["SyntaxNode", ...]:
        """Get a required list-of-nodes field."""
        return tuple(self.require(name))


def _convert(value: Any) -> Any:
    if isinstance(value, dict):
        if "type" in value:
            return SyntaxNode.from_dict(value)
        return MappingProxyType({key: _convert(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_convert(item) for item in value)
    return value


def _start_line(data: Mapping[str, Any]) -> Optional[int]:
    loc = data.get("loc")
    if not isinstance(loc, dict):
        return None
    start = loc.get("start")
    if not isinstance(start, dict):
        return None
    return start.get("line")


class BaseParser(ABC):
    """
    Base class for language parsers.

    A parser turns source text into the program ``SyntaxNode`` whose
    ``body`` field holds the top-level statements.
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """Return the language this parser handles."""
        pass

    @abstractmethod
    def parse(self, source: str, file_path: str = "<unknown>") -> SyntaxNode:
        """
        Parse source code into a syntax tree.

        Args:
            source: The source code to parse.
            file_path: The file path (for error messages).

        Returns:
            The root (program) SyntaxNode.

        Raises:
            ParseError: If the source is not valid for this language.
        """
        pass
