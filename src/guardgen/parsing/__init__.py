"""Tree-sitter parsing for TypeScript sources."""

from guardgen.parsing.treesitter import (
    ParseResult,
    TreeSitterParser,
    detect_pack,
    node_text,
)

__all__ = [
    "TreeSitterParser",
    "ParseResult",
    "detect_pack",
    "node_text",
]
