"""
Tests for instruction execution.

This module tests each variant's execute behavior:
- Container folding, ordering and nesting transparency
- File reads and their failure modes
- Print pass-through and its type check
"""

import pytest

from tagflow.core.types import UNIT, Text
from tagflow.exceptions import FileReadError, ValueTypeError
from tagflow.execution import (
    InputScope,
    PrintValue,
    ReadFile,
    RootPipeline,
    StepScope,
)


class TestPrintValue:
    """PrintValue writes the value and passes it through unchanged."""

    @pytest.mark.parametrize("text", ["hello", "", "two\nlines", 'say "hi"', "naïve ☃"])
    def test_returns_input_unchanged(self, text, capsys):
        value = Text(text=text)
        assert PrintValue(label="ignored").execute(value) is value
        assert len(capsys.readouterr().out.splitlines()) == 1

    def test_prints_quoted_form(self, capsys):
        PrintValue().execute(Text(text="hello"))
        assert capsys.readouterr().out == '"hello"\n'

    def test_escapes_quotes_and_newlines(self, capsys):
        PrintValue().execute(Text(text='a "b"\nc'))
        assert capsys.readouterr().out == '"a \\"b\\"\\nc"\n'

    def test_non_ascii_kept(self, capsys):
        PrintValue().execute(Text(text="naïve"))
        assert capsys.readouterr().out == '"naïve"\n'

    def test_empty_string(self, capsys):
        assert PrintValue().execute(Text(text="")) == Text(text="")
        assert capsys.readouterr().out == '""\n'

    def test_label_not_printed(self, capsys):
        PrintValue(label="label").execute(Text(text="value"))
        assert "label" not in capsys.readouterr().out

    def test_unit_rejected(self, capsys):
        with pytest.raises(ValueTypeError) as exc_info:
            PrintValue().execute(UNIT)
        assert exc_info.value.actual == "unit"
        assert capsys.readouterr().out == ""

    def test_raw_string_not_converted(self):
        with pytest.raises(ValueTypeError) as exc_info:
            PrintValue().execute("plain str")
        assert exc_info.value.actual == "str"


class TestReadFile:
    """ReadFile replaces the accumulator with a file's contents."""

    def test_reads_file(self, greeting_file):
        assert ReadFile(path=str(greeting_file)).execute(UNIT) == Text(text="hello")

    def test_ignores_input(self, greeting_file):
        result = ReadFile(path=str(greeting_file)).execute(Text(text="previous"))
        assert result == Text(text="hello")

    def test_line_endings_preserved(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"a\r\nb\r\n")
        assert ReadFile(path=str(path)).execute(UNIT) == Text(text="a\r\nb\r\n")

    def test_encoding(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("café".encode("latin-1"))
        node = ReadFile(path=str(path), encoding="latin-1")
        assert node.execute(UNIT) == Text(text="café")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("café".encode("latin-1"))
        with pytest.raises(FileReadError):
            ReadFile(path=str(path)).execute(UNIT)

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.txt"
        with pytest.raises(FileReadError) as exc_info:
            ReadFile(path=str(missing)).execute(UNIT)
        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_empty_path_fails(self):
        with pytest.raises(FileReadError):
            ReadFile().execute(UNIT)

    def test_relative_path_with_base_dir(self, greeting_file):
        node = ReadFile(path="greeting.txt", base_dir=str(greeting_file.parent))
        assert node.resolved_path() == greeting_file
        assert node.execute(UNIT) == Text(text="hello")

    def test_absolute_path_ignores_base_dir(self, greeting_file, tmp_path):
        node = ReadFile(path=str(greeting_file), base_dir=str(tmp_path / "elsewhere"))
        assert node.resolved_path() == greeting_file


class TestScopes:
    """Container variants fold the accumulator through their children."""

    def test_empty_scope_returns_input(self):
        value = Text(text="v")
        assert InputScope().execute(value) is value
        assert StepScope().execute(value) is value

    def test_scope_threads_caller_value(self, capsys):
        scope = StepScope(children=(PrintValue(label="x"), PrintValue(label="x")))
        assert scope.execute(Text(text="a")) == Text(text="a")
        assert capsys.readouterr().out == '"a"\n"a"\n'

    def test_children_run_in_document_order(self, tmp_path, capsys):
        children = []
        for marker in ["first", "second", "third"]:
            path = tmp_path / f"{marker}.txt"
            path.write_text(marker, encoding="utf-8")
            children += [ReadFile(path=str(path)), PrintValue()]

        result = InputScope(children=tuple(children)).execute(UNIT)

        assert result == Text(text="third")
        assert capsys.readouterr().out == '"first"\n"second"\n"third"\n'

    @pytest.mark.parametrize("scope_type", [InputScope, StepScope])
    def test_nesting_is_transparent(self, scope_type, greeting_file, capsys):
        children = (PrintValue(), ReadFile(path=str(greeting_file)), PrintValue())
        value = Text(text="start")

        direct = value
        for child in children:
            direct = child.execute(direct)
        direct_out = capsys.readouterr().out

        wrapped = scope_type(children=children).execute(value)
        wrapped_out = capsys.readouterr().out

        assert wrapped == direct
        assert wrapped_out == direct_out

    def test_root_pipeline_ignores_input(self):
        with pytest.raises(ValueTypeError):
            RootPipeline(children=(PrintValue(),)).execute(Text(text="ignored"))

    def test_root_pipeline_starts_from_unit(self):
        assert RootPipeline().execute() == UNIT
        assert RootPipeline().execute(Text(text="x")) == UNIT

    def test_failure_stops_pipeline(self, tmp_path, capsys):
        pipeline = RootPipeline(
            children=(
                ReadFile(path=str(tmp_path / "missing.txt")),
                PrintValue(),
            )
        )
        with pytest.raises(FileReadError):
            pipeline.execute()
        assert capsys.readouterr().out == ""

    def test_output_before_failure_is_kept(self, greeting_file, tmp_path, capsys):
        pipeline = RootPipeline(
            children=(
                ReadFile(path=str(greeting_file)),
                PrintValue(),
                ReadFile(path=str(tmp_path / "missing.txt")),
                PrintValue(),
            )
        )
        with pytest.raises(FileReadError):
            pipeline.execute()
        assert capsys.readouterr().out == '"hello"\n'
