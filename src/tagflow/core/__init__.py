"""
Core tagflow components.

This package provides the pipeline value types and the instruction base class
shared by the parser and the execution layer.
"""

from tagflow.core.tree_node import Instruction
from tagflow.core.types import UNIT, Text, Unit, Value, coerce_value

__all__ = [
    "Instruction",
    "Value",
    "Unit",
    "Text",
    "UNIT",
    "coerce_value",
]
