"""LanguagePack registry for the grammars guardgen can read.

Each pack consolidates the grammar install metadata and file detection for one
tree-sitter grammar. The PACKS registry is the canonical lookup:
``PACKS["typescript"]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguagePack:
    """Tree-sitter configuration for a single language."""

    # -- Identity --
    name: str  # Canonical language name ("typescript", "tsx")
    grammar_name: str  # tree-sitter grammar key

    # -- Grammar install --
    grammar_package: str  # PyPI package ("tree-sitter-typescript")
    grammar_module: str  # Python import ("tree_sitter_typescript")
    min_version: str
    # Non-standard function name (e.g. "language_typescript", "language_tsx")
    language_func: str | None = None

    # -- File detection --
    extensions: frozenset[str] = field(default_factory=frozenset)


TYPESCRIPT_PACK = LanguagePack(
    name="typescript",
    grammar_name="typescript",
    grammar_package="tree-sitter-typescript",
    grammar_module="tree_sitter_typescript",
    min_version="0.23.0",
    language_func="language_typescript",
    extensions=frozenset({"ts", "mts", "cts"}),
)

TSX_PACK = LanguagePack(
    name="tsx",
    grammar_name="tsx",
    grammar_package="tree-sitter-typescript",
    grammar_module="tree_sitter_typescript",
    min_version="0.23.0",
    language_func="language_tsx",
    extensions=frozenset({"tsx"}),
)

PACKS: dict[str, LanguagePack] = {
    TYPESCRIPT_PACK.name: TYPESCRIPT_PACK,
    TSX_PACK.name: TSX_PACK,
}

# Inputs with no file name (or an unrecognized one) are read as plain TypeScript
DEFAULT_PACK = TYPESCRIPT_PACK

_EXT_INDEX: dict[str, LanguagePack] = {ext: pack for pack in PACKS.values() for ext in pack.extensions}


def get_pack(name: str) -> LanguagePack | None:
    return PACKS.get(name)


def get_pack_for_ext(ext: str) -> LanguagePack | None:
    """Look up a pack by file extension, with or without the leading dot."""
    return _EXT_INDEX.get(ext.lower().lstrip("."))
