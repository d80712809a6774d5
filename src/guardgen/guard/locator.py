"""Locate the target class among the top-level declarations of a parse tree."""

from __future__ import annotations

from typing import Any

from guardgen.parsing.treesitter import node_text

CLASS_NODE_TYPES = frozenset({"class_declaration", "abstract_class_declaration"})

# Wrappers the grammar puts around a top-level declaration
# (`export class ...`, `declare class ...`, `export declare class ...`)
_WRAPPER_NODE_TYPES = frozenset({"export_statement", "ambient_declaration"})


def _unwrap_declaration(node: Any) -> Any:
    while node is not None and node.type in _WRAPPER_NODE_TYPES:
        inner = node.child_by_field_name("declaration")
        if inner is None:
            inner = next(
                (c for c in node.named_children if c.type in CLASS_NODE_TYPES | _WRAPPER_NODE_TYPES),
                None,
            )
        node = inner
    return node


def class_name_of(node: Any) -> str | None:
    """Identifier text of a class declaration node, or None."""
    if node is None or node.type not in CLASS_NODE_TYPES:
        return None
    name = node.child_by_field_name("name")
    if name is None or name.type not in ("type_identifier", "identifier"):
        return None
    return node_text(name)


def iter_top_level_classes(root_node: Any) -> list[Any]:
    """Class declarations that are direct children of the unit, in source order."""
    classes = []
    for child in root_node.named_children:
        candidate = _unwrap_declaration(child)
        if class_name_of(candidate) is not None:
            classes.append(candidate)
    return classes


def find_class_node(root_node: Any, target_class_name: str) -> Any | None:
    """Return the first top-level class named exactly ``target_class_name``.

    Nested classes, class expressions and classes inside namespaces are not
    searched.
    """
    for candidate in iter_top_level_classes(root_node):
        if class_name_of(candidate) == target_class_name:
            return candidate
    return None
