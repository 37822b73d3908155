"""
tagflow exception classes.

This package provides all exception types used throughout tagflow for
consistent error handling and reporting.
"""

from tagflow.exceptions.core import (
    DocumentError,
    DocumentReadError,
    EmptyDocumentError,
    ErrorContext,
    ErrorLevel,
    FileReadError,
    InstructionExecutionError,
    MalformedDocumentError,
    RootTagError,
    TagflowError,
    UnknownTagError,
    ValueTypeError,
)

__all__ = [
    "TagflowError",
    "DocumentError",
    "DocumentReadError",
    "MalformedDocumentError",
    "UnknownTagError",
    "RootTagError",
    "EmptyDocumentError",
    "InstructionExecutionError",
    "FileReadError",
    "ValueTypeError",
    "ErrorContext",
    "ErrorLevel",
]
