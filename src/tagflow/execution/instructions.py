"""
Instruction variants and their execution behavior.

The instruction set is closed: three container variants that fold an
accumulator through their children, and two leaf variants that read a file
and print a value. Each variant's `kind` equals the tag it is parsed from.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Literal

from tagflow.core.tree_node import Instruction
from tagflow.core.types import UNIT, Text, Value
from tagflow.exceptions import FileReadError, ValueTypeError

logger = logging.getLogger(__name__)


class Scope(Instruction):
    """Base for instructions that own an ordered child sequence."""

    children: tuple[Instruction, ...] = ()

    def run_children(self, value: Value) -> Value:
        """
        Thread a value through every child in document order.

        Params:
            value: Initial accumulator

        Returns:
            The accumulator after the last child, or `value` if there are none
        """
        accumulator = value
        for index, child in enumerate(self.children):
            logger.debug("<%s> step %d: <%s>", self.kind, index, child.kind)
            accumulator = child.execute(accumulator)
        return accumulator


class RootPipeline(Scope):
    """The program: always starts from `UNIT`, whatever it is given."""

    kind: Literal["pipeline"] = "pipeline"

    def execute(self, value: Value = UNIT) -> Value:
        return self.run_children(UNIT)


class InputScope(Scope):
    """Nested pipeline that threads the caller's value."""

    kind: Literal["input"] = "input"

    def execute(self, value: Value) -> Value:
        return self.run_children(value)


class StepScope(Scope):
    """Nested pipeline that threads the caller's value."""

    kind: Literal["step"] = "step"

    def execute(self, value: Value) -> Value:
        return self.run_children(value)


class ReadFile(Instruction):
    """
    Replace the accumulator with the contents of a file.

    The upstream value is ignored. `path` is kept exactly as written in the
    document; `base_dir` is only consulted when `path` is relative.
    """

    kind: Literal["file"] = "file"
    path: str = ""
    encoding: str = "utf-8"
    base_dir: str | None = None

    def resolved_path(self) -> Path:
        path = Path(self.path)
        if self.base_dir is not None and not path.is_absolute():
            return Path(self.base_dir) / path
        return path

    def execute(self, value: Value) -> Value:
        target = self.resolved_path()
        logger.debug("Reading %s", target)
        try:
            # newline="" keeps line endings as stored on disk
            with target.open(encoding=self.encoding, newline="") as f:
                contents = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(self.path, str(e)) from e
        return Text(text=contents)


class PrintValue(Instruction):
    """
    Write the accumulator to standard output and pass it on unchanged.

    The accumulator must be `Text`. It is written as a double-quoted string
    literal, one line per call. `label` is carried from the document but has
    no effect on execution.
    """

    kind: Literal["print"] = "print"
    label: str = ""

    def execute(self, value: Value) -> Value:
        if not isinstance(value, Text):
            actual = getattr(value, "kind", type(value).__name__)
            raise ValueTypeError(self.kind, "text", actual)
        print(json.dumps(value.text, ensure_ascii=False), file=sys.stdout, flush=True)
        return value

