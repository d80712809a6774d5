"""Method signature extraction from a class declaration node.

Only public method members are described. Constructors, get/set accessors,
`#private` methods, fields, index signatures and static blocks are skipped without being reported.
"""

from __future__ import annotations

from typing import Any

from guardgen.guard.models import DEFAULT_RETURN_TYPE, MethodArgument, MethodSignature
from guardgen.parsing.treesitter import node_text

METHOD_NODE_TYPES = frozenset(
    {
        "method_definition",
        "method_signature",  # overload heads and `declare class` members
        "abstract_method_signature",
    }
)

PARAMETER_NODE_TYPES = frozenset({"required_parameter", "optional_parameter"})

_ACCESSOR_KEYWORDS = frozenset({"get", "set"})

# `#name` members are invisible outside the class and cannot appear in an interface
_PRIVATE_NAME_TYPES = frozenset({"private_property_identifier"})


def annotation_text(annotation: Any) -> str:
    """Text of the type inside a ``: T`` annotation node, or ``""``."""
    if annotation is None:
        return ""
    inner = annotation.named_children
    if inner:
        return node_text(inner[0])
    return node_text(annotation).lstrip(":").strip()


def _is_accessor(method_node: Any, name_node: Any) -> bool:
    for child in method_node.children:
        if child == name_node:
            break
        if not child.is_named and child.type in _ACCESSOR_KEYWORDS:
            return True
    return False


def _is_optional_method(method_node: Any, name_node: Any) -> bool:
    seen_name = False
    for child in method_node.children:
        if seen_name:
            return not child.is_named and child.type == "?"
        seen_name = child == name_node
    return False


def extract_argument(parameter: Any) -> MethodArgument | None:
    """Describe one formal parameter, or None if it is not simply named.

    Destructured patterns and the ``this`` pseudo-parameter yield None.
    """
    if parameter is None or parameter.type not in PARAMETER_NODE_TYPES:
        return None

    pattern = parameter.child_by_field_name("pattern")
    if pattern is None:
        return None

    rest = False
    if pattern.type == "rest_pattern":
        inner = pattern.named_children
        if len(inner) != 1 or inner[0].type != "identifier":
            return None
        pattern = inner[0]
        rest = True
    elif pattern.type != "identifier":
        return None

    optional = parameter.type == "optional_parameter" or parameter.child_by_field_name("value") is not None

    return MethodArgument(
        name=node_text(pattern),
        type=annotation_text(parameter.child_by_field_name("type")),
        optional=optional and not rest,
        rest=rest,
    )


def extract_method(member: Any) -> MethodSignature | None:
    """Describe one class member, or None if it is not a method."""
    if member is None or member.type not in METHOD_NODE_TYPES:
        return None

    name_node = member.child_by_field_name("name")
    if name_node is None or name_node.type in _PRIVATE_NAME_TYPES or _is_accessor(member, name_node):
        return None

    name = node_text(name_node)
    if name == "constructor":
        return None

    args: list[MethodArgument] = []
    parameters = member.child_by_field_name("parameters")
    if parameters is not None:
        for parameter in parameters.named_children:
            arg = extract_argument(parameter)
            if arg is not None:
                args.append(arg)

    return_type = annotation_text(member.child_by_field_name("return_type")) or DEFAULT_RETURN_TYPE

    return MethodSignature(
        name=name,
        return_type=return_type,
        args=tuple(args),
        optional=_is_optional_method(member, name_node),
    )


def extract_methods(class_node: Any) -> list[MethodSignature]:
    """All method signatures of a class declaration, in declaration order."""
    body = class_node.child_by_field_name("body")
    if body is None:
        return []
    methods = []
    for member in body.named_children:
        method = extract_method(member)
        if method is not None:
            methods.append(method)
    return methods
