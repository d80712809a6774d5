"""End-to-end tests for guard/pipeline.py."""

from __future__ import annotations

import re
from unittest.mock import patch

import pytest
from structlog.testing import capture_logs

from guardgen import GenerateOptions, TargetNotFoundError, generate, generate_ast
from guardgen.config.models import EmitConfig, GuardGenConfig, QueueConfig
from guardgen.guard.models import DispatchStrategy
from guardgen.guard.pipeline import extract_target
from guardgen.parsing.treesitter import TreeSitterParser

FOO_SOURCE = """\
import { Observable, of } from 'rxjs';

export class Foo extends Base {
  bar(x: number): Promise<string> {
    return Promise.resolve(String(x));
  }

  baz(): Observable<number> {
    return of(1);
  }

  qux(): void {
    console.log('qux');
  }
}
"""


def _foo(**kwargs) -> GenerateOptions:
    return GenerateOptions(input_file_text=FOO_SOURCE, input_file_target_class="Foo", **kwargs)


def _method_names(text: str, block_start: str) -> list[str]:
    block = text[text.index(block_start) :]
    block = block[: block.index("\n}\n")]
    return re.findall(r"^    (\w+)\(", block, flags=re.MULTILINE)


class TestGenerate:
    """End-to-end scenario from a small class."""

    def test_interface_members(self) -> None:
        text = generate(_foo())
        assert "export interface FooLike {\n" in text
        assert "    bar(x: number): Promise<string>;\n" in text
        assert "    baz(): Observable<number>;\n" in text
        assert "    qux(): void;\n" in text

    def test_guard_bodies(self) -> None:
        text = generate(_foo())
        assert "export class FooGuard implements FooLike {" in text
        assert "return this.queue.add(() => this.source.bar(x));" in text
        assert "return this.queue.observe(() => this.source.baz());" in text
        assert "return this.source.qux();" in text

    def test_interface_precedes_class(self) -> None:
        text = generate(_foo())
        assert text.count("export interface ") == 1
        assert text.count("export class ") == 1
        assert text.index("export interface FooLike") < text.index("export class FooGuard")

    def test_method_order_preserved(self) -> None:
        text = generate(_foo())
        assert _method_names(text, "export interface FooLike") == ["bar", "baz", "qux"]
        assert _method_names(text, "export class FooGuard") == ["constructor", "bar", "baz", "qux"]

    def test_deterministic(self) -> None:
        assert generate(_foo()) == generate(_foo())

    def test_output_parses_cleanly(self) -> None:
        assert TreeSitterParser().parse(generate(_foo()), "guard.ts").error_count == 0

    def test_custom_config(self) -> None:
        config = GuardGenConfig(
            queue=QueueConfig(type_name="SerialQueue", import_module="./serial-queue", deferred_method="enqueue"),
            emit=EmitConfig(indent="  ", source_ref_name="plugin"),
        )
        text = generate(_foo(), config)
        assert "import { SerialQueue } from './serial-queue';" in text
        assert "  public readonly queue: SerialQueue = new SerialQueue();" in text
        assert "  constructor(public readonly plugin: FooLike) {" in text
        assert "    return this.queue.enqueue(() => this.plugin.bar(x));" in text

    def test_shared_parser(self) -> None:
        parser = TreeSitterParser()
        assert generate(_foo(), parser=parser) == generate(_foo(), parser=parser)

    def test_plugin_source(self, plugin_source: str) -> None:
        text = generate(GenerateOptions(plugin_source, "Camera", "camera/index.ts", "camera/guard.ts"))
        assert "export interface CameraLike {" in text
        assert "return this.queue.add(() => this.source.getPicture(options));" in text
        assert "return this.queue.observe(() => this.source.watchPictures(interval, ...tags));" in text
        assert "return this.source.batch();" in text
        assert "untyped(value): any {" in text
        assert "constructor()" not in text
        assert "ready" not in text


class TestGenerateAst:
    """Tests for the unprinted output unit."""

    def test_strategies(self) -> None:
        unit = generate_ast(_foo())
        assert [(m.signature.name, m.strategy) for m in unit.guard.methods] == [
            ("bar", DispatchStrategy.DEFERRED),
            ("baz", DispatchStrategy.STREAM),
            ("qux", DispatchStrategy.DIRECT),
        ]

    def test_output_file_name(self) -> None:
        assert generate_ast(_foo(output_file_name="foo.guard.ts")).file_name == "foo.guard.ts"


class TestTargetNotFound:
    """The single failure mode of the pipeline."""

    def test_missing_class(self) -> None:
        with pytest.raises(TargetNotFoundError) as exc_info:
            generate(GenerateOptions(FOO_SOURCE, "Missing", input_file_name="foo.ts"))
        assert exc_info.value.details == {"input_file_name": "foo.ts", "target_class": "Missing"}

    def test_case_sensitive(self) -> None:
        with pytest.raises(TargetNotFoundError):
            generate_ast(GenerateOptions(FOO_SOURCE, "foo"))

    def test_nested_class_is_not_a_target(self) -> None:
        source = "export namespace Outer {\n  export class Inner { run(): void {} }\n}\n"
        with pytest.raises(TargetNotFoundError):
            extract_target(GenerateOptions(source, "Inner"))

    def test_empty_input(self) -> None:
        with pytest.raises(TargetNotFoundError):
            generate(GenerateOptions("", "Foo"))


class TestExtractTarget:
    """Tests for extract_target."""

    def test_signatures(self) -> None:
        methods = extract_target(_foo())
        assert [m.declaration_text for m in methods] == [
            "bar(x: number): Promise<string>",
            "baz(): Observable<number>",
            "qux(): void",
        ]

    def test_input_with_syntax_errors_still_extracts(self) -> None:
        source = "export class Foo {\n  ok(): void {}\n}\nconst broken = ;\n"
        assert [m.name for m in extract_target(GenerateOptions(source, "Foo"))] == ["ok"]


class TestMemberNames:
    """Members whose names are not plain identifiers."""

    SOURCE = "class Foo { ['x-y'](): void {} #p(): void {} 'q-r'(): void {} a?(): Promise<void>; }"

    def test_output_parses_cleanly(self) -> None:
        text = generate(GenerateOptions(self.SOURCE, "Foo", "x.ts"))
        assert TreeSitterParser().parse(text, "guard.ts").error_count == 0

    def test_bracket_access_and_private_skipped(self) -> None:
        text = generate(GenerateOptions(self.SOURCE, "Foo", "x.ts"))
        assert "return this.source['x-y']();" in text
        assert "return this.source['q-r']();" in text
        assert "#p" not in text

    def test_optional_method_kept_optional(self) -> None:
        text = generate(GenerateOptions(self.SOURCE, "Foo", "x.ts"))
        assert "    a?(): Promise<void>;\n" in text
        assert "return this.queue.add(() => this.source.a?.());" in text


class TestWarnings:
    """Warnings logged by the pipeline."""

    def test_target_class_not_found(self) -> None:
        with capture_logs() as logs, pytest.raises(TargetNotFoundError):
            generate(GenerateOptions(FOO_SOURCE, "Missing", input_file_name="foo.ts"))
        (entry,) = [e for e in logs if e["event"] == "target_class_not_found"]
        assert entry["log_level"] == "warning"
        assert entry["target_class"] == "Missing"
        assert entry["input_file_name"] == "foo.ts"

    def test_unparseable_output_is_reported(self) -> None:
        with (
            patch("guardgen.guard.pipeline.print_unit", return_value="export class {\n"),
            capture_logs() as logs,
        ):
            text = generate(_foo(input_file_name="foo.ts"))
        assert text == "export class {\n"
        (entry,) = [e for e in logs if e["event"] == "generated_output_has_syntax_errors"]
        assert entry["log_level"] == "warning"
        assert entry["target_class"] == "Foo"
        assert entry["errors"] > 0

    def test_clean_output_has_no_warning(self) -> None:
        with capture_logs() as logs:
            generate(_foo())
        assert not [e for e in logs if e["log_level"] == "warning"]
