"""
tagflow execution components.

This package provides the instruction variants that a parsed document is made
of, together with their execution behavior.
"""

from tagflow.execution.instructions import (
    InputScope,
    PrintValue,
    ReadFile,
    RootPipeline,
    Scope,
    StepScope,
)

__all__ = [
    "Scope",
    "RootPipeline",
    "InputScope",
    "StepScope",
    "ReadFile",
    "PrintValue",
]
