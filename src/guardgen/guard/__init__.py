"""Guard class generation for method-queue wrappers."""

from guardgen.guard.classify import classify
from guardgen.guard.emitter import emit_guard
from guardgen.guard.extractor import extract_methods
from guardgen.guard.locator import find_class_node
from guardgen.guard.models import (
    ClassTransformUnit,
    DispatchStrategy,
    MethodArgument,
    MethodSignature,
    OutputUnit,
)
from guardgen.guard.pipeline import GenerateOptions, extract_target, generate, generate_ast
from guardgen.guard.printer import print_unit

__all__ = [
    "ClassTransformUnit",
    "DispatchStrategy",
    "GenerateOptions",
    "MethodArgument",
    "MethodSignature",
    "OutputUnit",
    "classify",
    "emit_guard",
    "extract_methods",
    "extract_target",
    "find_class_node",
    "generate",
    "generate_ast",
    "print_unit",
]
