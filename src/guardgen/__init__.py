"""guardgen - generate queue-serialized guard classes for TypeScript classes."""

from guardgen.core.errors import GuardGenError, TargetNotFoundError
from guardgen.guard.pipeline import GenerateOptions, generate, generate_ast

__version__ = "0.1.0"

__all__ = [
    "GenerateOptions",
    "GuardGenError",
    "TargetNotFoundError",
    "generate",
    "generate_ast",
    "__version__",
]
