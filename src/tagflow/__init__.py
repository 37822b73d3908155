"""
tagflow - A minimal XML pipeline language

tagflow parses an XML vocabulary into an instruction tree and runs it as a
pipeline, each instruction's output becoming the next one's input.
"""

from importlib.metadata import version

from tagflow.core import UNIT, Instruction, Text, Unit, Value
from tagflow.parsing import parse_document, parse_file
from tagflow.runner import run_file
from tagflow.settings import EngineSettings

__version__ = version("tagflow")

__all__ = [
    "__version__",
    "Instruction",
    "Value",
    "Unit",
    "Text",
    "UNIT",
    "EngineSettings",
    "parse_document",
    "parse_file",
    "run_file",
]
