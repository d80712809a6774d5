"""Data model for guard generation.

Two groups of records live here:

- The structural description of the target class, read from the input tree
  (``MethodArgument``, ``MethodSignature``, ``ClassTransformUnit``).
- The output unit the emitter builds and the printer renders
  (``OutputUnit`` and the declarations it owns).

Everything is immutable and produced fresh per generation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_RETURN_TYPE = "any"


class DispatchStrategy(Enum):
    """How a guard method routes its delegated call."""

    STREAM = "stream"  # queue stream entry point (Observable results)
    DEFERRED = "deferred"  # queue deferred entry point (Promise results)
    DIRECT = "direct"  # plain delegation, no queue


@dataclass(frozen=True)
class MethodArgument:
    """One simple named formal parameter."""

    name: str
    type: str = ""  # verbatim annotation text, empty when unannotated
    optional: bool = False  # `x?: T` or `x: T = default`
    rest: bool = False  # `...xs: T[]`

    def render_declaration(self) -> str:
        head = f"...{self.name}" if self.rest else self.name
        if self.optional:
            head += "?"
        return f"{head}: {self.type}" if self.type else head

    def render_call(self) -> str:
        return f"...{self.name}" if self.rest else self.name


@dataclass(frozen=True)
class MethodSignature:
    """A method member of the target class, in declaration order."""

    name: str  # verbatim name text: `bar`, `'q-r'`, `[Symbol.iterator]`
    return_type: str = DEFAULT_RETURN_TYPE
    args: tuple[MethodArgument, ...] = ()
    optional: bool = False  # `bar?(): T`

    @property
    def declaration_text(self) -> str:
        """Canonical method head: ``name(arg: type, ...): returnType``."""
        params = ", ".join(a.render_declaration() for a in self.args)
        marker = "?" if self.optional else ""
        return f"{self.name}{marker}({params}): {self.return_type}"

    @property
    def member_access(self) -> str:
        """How a call site reaches the method: ``.name`` or ``[key]``."""
        if self.name.startswith("["):
            return self.name
        if self.name.replace("$", "_").isidentifier():
            return f".{self.name}"
        return f"[{self.name}]"

    @property
    def call_arguments(self) -> str:
        return ", ".join(a.render_call() for a in self.args)


@dataclass(frozen=True)
class ClassTransformUnit:
    """Names derived from the target class by plain concatenation.

    No collision check is made against identifiers already in the input.
    """

    original_class_name: str
    interface_name: str
    guard_class_name: str

    @classmethod
    def for_class(
        cls,
        class_name: str,
        interface_suffix: str = "Like",
        guard_suffix: str = "Guard",
    ) -> ClassTransformUnit:
        return cls(
            original_class_name=class_name,
            interface_name=class_name + interface_suffix,
            guard_class_name=class_name + guard_suffix,
        )


# =========================================================================
# Output unit
# =========================================================================


@dataclass(frozen=True)
class ImportDeclaration:
    names: tuple[str, ...]
    module: str


@dataclass(frozen=True)
class InterfaceDeclaration:
    name: str
    members: tuple[MethodSignature, ...] = ()


@dataclass(frozen=True)
class DelegatingCall:
    """``this.<target_ref>.<method>(<args>)``"""

    target_ref: str
    method: MethodSignature


@dataclass(frozen=True)
class QueueDispatch:
    """``this.<queue_field>.<entry_point>(() => <call>)``"""

    queue_field: str
    entry_point: str
    call: DelegatingCall


@dataclass(frozen=True)
class GuardMethod:
    signature: MethodSignature
    strategy: DispatchStrategy
    body: DelegatingCall | QueueDispatch


@dataclass(frozen=True)
class GuardClassDeclaration:
    name: str
    implements: str
    queue_field: str
    queue_type: str
    source_ref: str
    methods: tuple[GuardMethod, ...] = ()


@dataclass(frozen=True)
class OutputUnit:
    """The generated file: imports, one interface, one guard class."""

    interface: InterfaceDeclaration
    guard: GuardClassDeclaration
    imports: tuple[ImportDeclaration, ...] = ()
    file_name: str = ""
    transform: ClassTransformUnit | None = field(default=None, compare=False)
