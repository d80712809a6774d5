"""Tree-sitter parsing for TypeScript sources.

This module supplies the parse capability the generator consumes: source
text goes in, a concrete syntax tree comes out. Every node can be read back
as a source-accurate text span via ``node_text``.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any

import tree_sitter

from guardgen.parsing.packs import DEFAULT_PACK, LanguagePack, get_pack_for_ext


@dataclass
class ParseResult:
    """Result of parsing one source text."""

    tree: Any  # Tree-sitter Tree (not serializable)
    language: str
    error_count: int
    total_nodes: int
    root_node: Any  # Tree-sitter Node
    file_name: str = ""

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0


def node_text(node: Any) -> str:
    """Decode the source text spanned by a node."""
    return node.text.decode("utf-8") if node is not None and node.text else ""


def detect_pack(file_name: str) -> LanguagePack:
    """Pick the grammar for a file name, falling back to plain TypeScript."""
    if not file_name:
        return DEFAULT_PACK
    return get_pack_for_ext(PurePath(file_name).suffix) or DEFAULT_PACK


@dataclass
class TreeSitterParser:
    """
    Tree-sitter parser for TypeScript / TSX.

    Usage::

        parser = TreeSitterParser()
        result = parser.parse(source_text, "index.ts")
        for child in result.root_node.named_children:
            ...
    """

    _parser: Any = field(default=None, repr=False)
    _languages: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Initialize the parser."""
        self._parser = tree_sitter.Parser()
        self._languages = {}

    def _get_language(self, pack: LanguagePack) -> Any:
        """Get or load a Tree-sitter language for a pack."""
        if pack.grammar_name in self._languages:
            return self._languages[pack.grammar_name]

        try:
            mod = importlib.import_module(pack.grammar_module)
            lang_fn = getattr(mod, pack.language_func or "language")
            lang = tree_sitter.Language(lang_fn())
        except (ImportError, AttributeError) as err:
            raise ValueError(f"Language not available: {pack.grammar_name}") from err

        self._languages[pack.grammar_name] = lang
        return lang

    def parse(self, text: str, file_name: str = "") -> ParseResult:
        """
        Parse source text with Tree-sitter.

        Args:
            text: Source text
            file_name: Used only for language detection (may be empty)

        Returns:
            ParseResult with tree, language, and error info.
        """
        pack = detect_pack(file_name)
        self._parser.language = self._get_language(pack)
        tree = self._parser.parse(text.encode("utf-8"))

        error_count = 0
        total_nodes = 0

        def count_nodes(node: Any) -> None:
            nonlocal error_count, total_nodes
            total_nodes += 1
            if node.type == "ERROR" or node.is_missing:
                error_count += 1
            for child in node.children:
                count_nodes(child)

        count_nodes(tree.root_node)

        return ParseResult(
            tree=tree,
            language=pack.name,
            error_count=error_count,
            total_nodes=total_nodes,
            root_node=tree.root_node,
            file_name=file_name,
        )
