"""Render an ``OutputUnit`` to TypeScript text.

Printing is a pure function of the unit and the indent: the same unit
always prints to the same text.
"""

from __future__ import annotations

from guardgen.guard.models import (
    DelegatingCall,
    GuardClassDeclaration,
    GuardMethod,
    ImportDeclaration,
    InterfaceDeclaration,
    OutputUnit,
    QueueDispatch,
)

DEFAULT_INDENT = "    "


def print_import(decl: ImportDeclaration) -> str:
    return f"import {{ {', '.join(decl.names)} }} from '{decl.module}';"


def print_expression(expr: DelegatingCall | QueueDispatch) -> str:
    if isinstance(expr, QueueDispatch):
        return f"this.{expr.queue_field}.{expr.entry_point}(() => {print_expression(expr.call)})"
    method = expr.method
    # an optional member may be absent on the source object
    call = "?.(" if method.optional else "("
    return f"this.{expr.target_ref}{method.member_access}{call}{method.call_arguments})"


def print_interface(decl: InterfaceDeclaration, indent: str = DEFAULT_INDENT) -> list[str]:
    lines = [f"export interface {decl.name} {{"]
    lines.extend(f"{indent}{m.declaration_text};" for m in decl.members)
    lines.append("}")
    return lines


def print_guard_method(method: GuardMethod, indent: str = DEFAULT_INDENT) -> list[str]:
    return [
        f"{indent}{method.signature.declaration_text} {{",
        f"{indent * 2}return {print_expression(method.body)};",
        f"{indent}}}",
    ]


def print_guard_class(decl: GuardClassDeclaration, indent: str = DEFAULT_INDENT) -> list[str]:
    lines = [
        f"export class {decl.name} implements {decl.implements} {{",
        f"{indent}public readonly {decl.queue_field}: {decl.queue_type} = new {decl.queue_type}();",
        "",
        f"{indent}constructor(public readonly {decl.source_ref}: {decl.implements}) {{",
        f"{indent}}}",
    ]
    for method in decl.methods:
        lines.append("")
        lines.extend(print_guard_method(method, indent))
    lines.append("}")
    return lines


def print_unit(unit: OutputUnit, indent: str = DEFAULT_INDENT) -> str:
    """Print imports, then the interface, then the guard class."""
    blocks: list[list[str]] = []
    if unit.imports:
        blocks.append([print_import(i) for i in unit.imports])
    blocks.append(print_interface(unit.interface, indent))
    blocks.append(print_guard_class(unit.guard, indent))
    return "\n\n".join("\n".join(block) for block in blocks) + "\n"
