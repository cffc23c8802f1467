"""
Language parsers producing syntax trees for reflection.

The analysis core never parses source text itself; it works on the
``SyntaxNode`` tree a registered parser hands back.
"""

from typing import Any, Dict, List, Type

from scriptreflect.parsers.base import BaseParser, SyntaxNode

# Registry of available parsers
_parsers: Dict[str, Type[BaseParser]] = {}

# Aliases
_aliases = {
    "js": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "gjs": "javascript",
}


def register_parser(language: str):
    """Decorator to register a parser for a language."""
    def decorator(cls: Type[BaseParser]) -> Type[BaseParser]:
        _parsers[language.lower()] = cls
        return cls
    return decorator


def get_parser(language: str = "javascript", **options: Any) -> BaseParser:
    """Get a parser instance for a language."""
    language = language.lower()
    language = _aliases.get(language, language)

    if language not in _parsers:
        raise ValueError(f"No parser registered for language: {language}")

    return _parsers[language](**options)


def list_supported_languages() -> List[str]:
    """List all languages with registered parsers."""
    return list(_parsers.keys())


# Import parsers to register them
from scriptreflect.parsers.javascript_parser import JavaScriptParser  # noqa: E402

__all__ = [
    "BaseParser",
    "SyntaxNode",
    "get_parser",
    "register_parser",
    "list_supported_languages",
    "JavaScriptParser",
]
