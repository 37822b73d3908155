"""
Instruction base class for the tagflow engine.

Every node of a parsed program derives from `Instruction`. Nodes are frozen
pydantic models, so a tree is immutable once the builder has produced it.
"""

from pydantic import BaseModel, ConfigDict

from tagflow.core.types import Value


class Instruction(BaseModel):
    """
    Base class for all instruction node types.

    Subclasses declare a `kind` literal equal to the tag they are parsed from
    and implement `execute`, which maps the upstream value to a new one.
    """

    model_config = ConfigDict(frozen=True)

    def execute(self, value: Value) -> Value:
        raise NotImplementedError(f"{type(self).__name__} does not implement execute")
