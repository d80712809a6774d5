"""Guard generation pipeline: parse, locate, extract, emit, print.

Each call is independent: nothing is cached between invocations, and the
only failure raised is ``TargetNotFoundError``.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from guardgen.config.models import GuardGenConfig
from guardgen.core.errors import TargetNotFoundError
from guardgen.guard.emitter import emit_guard
from guardgen.guard.extractor import extract_methods
from guardgen.guard.locator import find_class_node
from guardgen.guard.models import MethodSignature, OutputUnit
from guardgen.guard.printer import print_unit
from guardgen.parsing.treesitter import TreeSitterParser

log = structlog.get_logger()

# Name used to pick a grammar for re-parsing output when none was given
_DEFAULT_OUTPUT_NAME = "guard.ts"


@dataclass(frozen=True)
class GenerateOptions:
    """Inputs of one generation run."""

    input_file_text: str
    input_file_target_class: str
    input_file_name: str = ""
    output_file_name: str = ""


def extract_target(
    options: GenerateOptions,
    parser: TreeSitterParser | None = None,
) -> list[MethodSignature]:
    """Parse the input and describe the target class's methods.

    Raises:
        TargetNotFoundError: No top-level class has the requested name.
    """
    parser = parser or TreeSitterParser()
    result = parser.parse(options.input_file_text, options.input_file_name)
    if result.has_errors:
        log.debug("input_has_syntax_errors", input_file_name=options.input_file_name, errors=result.error_count)

    class_node = find_class_node(result.root_node, options.input_file_target_class)
    if class_node is None:
        log.warning(
            "target_class_not_found",
            input_file_name=options.input_file_name,
            target_class=options.input_file_target_class,
        )
        raise TargetNotFoundError.for_target(options.input_file_name, options.input_file_target_class)

    methods = extract_methods(class_node)
    log.debug("methods_extracted", target_class=options.input_file_target_class, count=len(methods))
    return methods


def generate_ast(
    options: GenerateOptions,
    config: GuardGenConfig | None = None,
    parser: TreeSitterParser | None = None,
) -> OutputUnit:
    """Build the output unit for ``options`` without printing it.

    1. Find the target class declaration in the input text
    2. Extract the signatures of its methods
    3. Emit a ``<Name>Like`` interface and a ``<Name>Guard`` class that
       routes each call through the queue according to its return type
    """
    config = config or GuardGenConfig()

    log.info(
        "generate",
        input_file_name=options.input_file_name,
        input_file_size=len(options.input_file_text),
        input_file_target_class=options.input_file_target_class,
        output_file_name=options.output_file_name,
    )

    methods = extract_target(options, parser)
    return emit_guard(
        options.input_file_target_class,
        methods,
        emit=config.emit,
        queue=config.queue,
        output_file_name=options.output_file_name,
    )


def generate(
    options: GenerateOptions,
    config: GuardGenConfig | None = None,
    parser: TreeSitterParser | None = None,
) -> str:
    """Generate the guard file text for ``options``."""
    config = config or GuardGenConfig()
    parser = parser or TreeSitterParser()

    unit = generate_ast(options, config, parser)
    text = print_unit(unit, indent=config.emit.indent)

    check = parser.parse(text, options.output_file_name or _DEFAULT_OUTPUT_NAME)
    if check.has_errors:
        log.warning(
            "generated_output_has_syntax_errors",
            input_file_name=options.input_file_name,
            target_class=options.input_file_target_class,
            errors=check.error_count,
        )
    return text
