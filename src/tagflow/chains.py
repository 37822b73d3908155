"""Chain construction helpers for running instruction trees as LangChain runnables.

This module turns a parsed instruction tree into a `Runnable` so a program can
be composed with other runnables (mapping, logging, batching) before it is
invoked. Responsibilities are intentionally limited to:
    - Wrapping each leaf instruction's `execute` in a `RunnableLambda`
    - Composing container children with `|` in document order
    - Resetting the input to `UNIT` at every `<pipeline>` boundary

Invoking a chain returns the same value as calling `execute` on the tree.
"""

import operator
from functools import reduce

from langchain_core.runnables import Runnable, RunnableLambda, RunnablePassthrough

from tagflow.core.tree_node import Instruction
from tagflow.core.types import UNIT, Value, coerce_value
from tagflow.execution.instructions import RootPipeline, Scope


def _reset_to_unit(_: Value) -> Value:
    return UNIT


def _build_runnable(instruction: Instruction) -> Runnable:
    if isinstance(instruction, Scope):
        steps = [_build_runnable(child) for child in instruction.children]
        body = reduce(operator.or_, steps) if steps else RunnablePassthrough()
        if isinstance(instruction, RootPipeline):
            return RunnableLambda(_reset_to_unit, name=instruction.kind) | body
        return body
    return RunnableLambda(instruction.execute, name=instruction.kind)


def build_chain(instruction: Instruction) -> Runnable:
    """
    Assemble a runnable that executes an instruction tree.

    The chain accepts a `Value` or a plain `str`/`None`, which is converted
    with `coerce_value` before the first step.

    Params:
        instruction: Root of the instruction tree (usually a `RootPipeline`)

    Returns:
        A composed `Runnable` ready for additional mapping or direct invocation
    """
    return RunnableLambda(coerce_value, name="coerce") | _build_runnable(instruction)
