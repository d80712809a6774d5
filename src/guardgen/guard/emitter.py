"""Build the output unit for a guard: one interface, one guard class."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from guardgen.config.models import EmitConfig, QueueConfig
from guardgen.guard.classify import classify
from guardgen.guard.models import (
    ClassTransformUnit,
    DelegatingCall,
    DispatchStrategy,
    GuardClassDeclaration,
    GuardMethod,
    ImportDeclaration,
    InterfaceDeclaration,
    MethodSignature,
    OutputUnit,
    QueueDispatch,
)

log = structlog.get_logger()


def build_guard_method(
    method: MethodSignature,
    source_ref: str,
    queue: QueueConfig,
) -> GuardMethod:
    """Pick the dispatch strategy for a method and build its body."""
    strategy = classify(method.return_type)
    call = DelegatingCall(target_ref=source_ref, method=method)

    body: DelegatingCall | QueueDispatch
    if strategy is DispatchStrategy.STREAM:
        body = QueueDispatch(queue_field=queue.field_name, entry_point=queue.stream_method, call=call)
    elif strategy is DispatchStrategy.DEFERRED:
        body = QueueDispatch(queue_field=queue.field_name, entry_point=queue.deferred_method, call=call)
    else:
        body = call

    log.debug("dispatch_selected", method=method.name, return_type=method.return_type, strategy=strategy.value)
    return GuardMethod(signature=method, strategy=strategy, body=body)


def build_imports(emit: EmitConfig, queue: QueueConfig) -> tuple[ImportDeclaration, ...]:
    if not emit.include_imports:
        return ()
    return (
        ImportDeclaration(names=(emit.stream_type_name,), module=emit.stream_type_module),
        ImportDeclaration(names=(queue.type_name,), module=queue.import_module),
    )


def emit_guard(
    class_name: str,
    methods: Sequence[MethodSignature],
    *,
    emit: EmitConfig | None = None,
    queue: QueueConfig | None = None,
    output_file_name: str = "",
) -> OutputUnit:
    """Build the ``<Name>Like`` interface and ``<Name>Guard`` class.

    Method order and method heads are taken unchanged from ``methods``.
    Nothing passed in is mutated.
    """
    emit = emit or EmitConfig()
    queue = queue or QueueConfig()

    transform = ClassTransformUnit.for_class(
        class_name,
        interface_suffix=emit.interface_suffix,
        guard_suffix=emit.guard_suffix,
    )
    members = tuple(methods)

    interface = InterfaceDeclaration(name=transform.interface_name, members=members)
    guard = GuardClassDeclaration(
        name=transform.guard_class_name,
        implements=transform.interface_name,
        queue_field=queue.field_name,
        queue_type=queue.type_name,
        source_ref=emit.source_ref_name,
        methods=tuple(build_guard_method(m, emit.source_ref_name, queue) for m in members),
    )

    return OutputUnit(
        interface=interface,
        guard=guard,
        imports=build_imports(emit, queue),
        file_name=output_file_name,
        transform=transform,
    )
