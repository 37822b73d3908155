"""
Exception classes for tagflow document parsing and pipeline execution.

This module defines specific exception types for the fatal conditions that can
occur while building an instruction tree from XML and while running it.
Parse-time errors derive from `DocumentError`; run-time errors derive from
`InstructionExecutionError`.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Document line and tag only
    DEVELOPER = "developer"  # Adds the resolved source file path


@dataclass
class ErrorContext:
    """
    Location of an error inside a program document.

    Params:
        source: Path of the program file, if the document came from disk
        line: Line number of the offending element (as reported by lxml)
        tag: Tag name of the offending element
        parent_tag: Tag name of the enclosing element
    """

    source: str | None = None
    line: int | None = None
    tag: str | None = None
    parent_tag: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.line is not None:
            if self.source:
                lines.append(f"  at {Path(self.source).name}:{self.line}")
            else:
                lines.append(f"  at line {self.line}")
        elif self.source:
            lines.append(f"  in {Path(self.source).name}")

        if self.tag:
            if self.parent_tag:
                lines.append(f"  in <{self.parent_tag}> -> <{self.tag}>")
            else:
                lines.append(f"  in <{self.tag}>")

        if error_level == ErrorLevel.DEVELOPER and self.source:
            lines.append(f"  file: {Path(self.source).resolve()}")

        return "\n".join(lines)


class TagflowError(Exception):
    """Base exception for all tagflow errors."""

    pass


class DocumentError(TagflowError):
    """Base exception for failures while turning a document into instructions."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            message: Primary error message
            context: Optional location of the error in the document
            error_level: Level of detail to show in error message
        """
        self.context = context
        self.error_level = error_level

        if context:
            location_info = context.format_location(error_level)
            full_message = f"{message}\n{location_info}" if location_info else message
        else:
            full_message = message

        super().__init__(full_message)


class DocumentReadError(DocumentError):
    """Raised when the program file cannot be read."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The program file path
            reason: The underlying reason for the failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read program file '{path}': {reason}")


class MalformedDocumentError(DocumentError):
    """Raised when the document is not well-formed XML."""

    def __init__(self, reason: str, context: ErrorContext | None = None):
        self.reason = reason
        super().__init__(f"Malformed document: {reason}", context)


class UnknownTagError(DocumentError):
    """Raised when an element's tag has no instruction mapped to it."""

    def __init__(
        self,
        tag: str,
        valid_tags: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        """
        Initialize the exception.

        Params:
            tag: The unrecognized tag name
            valid_tags: Tag names the parser accepts, listed in the message
            context: Location of the element in the document
        """
        self.tag = tag
        message = f"Unknown tag <{tag}>"
        if valid_tags:
            message += f". Valid tags are: {', '.join(sorted(valid_tags))}"
        super().__init__(message, context)


class RootTagError(DocumentError):
    """Raised when the outermost element is not a pipeline."""

    def __init__(self, tag: str, context: ErrorContext | None = None):
        self.tag = tag
        super().__init__(
            f"Root element must be <pipeline>, got <{tag}>", context
        )


class EmptyDocumentError(DocumentError):
    """Raised when the top-level pipeline has no instructions."""

    def __init__(self, tag: str, context: ErrorContext | None = None):
        self.tag = tag
        super().__init__(f"Empty document: <{tag}> contains no instructions", context)


class InstructionExecutionError(TagflowError):
    """Base exception for failures while running an instruction."""

    pass


class FileReadError(InstructionExecutionError):
    """Raised when a file instruction cannot read its target."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The file path owned by the instruction
            reason: The underlying reason for the failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read file '{path}': {reason}")


class ValueTypeError(InstructionExecutionError):
    """Raised when an instruction receives a value of the wrong kind."""

    def __init__(self, instruction: str, expected: str, actual: str):
        """
        Initialize the exception.

        Params:
            instruction: Tag of the instruction that rejected the value
            expected: Kind of value the instruction requires
            actual: Kind of value it received
        """
        self.instruction = instruction
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"<{instruction}> expects a {expected} value, got {actual}"
        )
