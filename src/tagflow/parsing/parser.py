"""
Tree builder for tagflow XML documents.

This module walks an lxml element tree and maps every element to an
instruction node. Container tags are parsed recursively into nested
pipelines; leaf tags take their configuration from their own text.

Recursion follows document nesting with no limit of its own, so an extremely
deep document is bounded by the interpreter's recursion limit.

Entities declared in a DTD are never expanded. A <file> or <print> body that
references one is rejected rather than silently truncated.
"""

import logging
from pathlib import Path

from lxml import etree

from tagflow.core.tree_node import Instruction
from tagflow.exceptions import (
    DocumentReadError,
    EmptyDocumentError,
    ErrorContext,
    MalformedDocumentError,
    RootTagError,
    UnknownTagError,
)
from tagflow.execution.instructions import (
    InputScope,
    PrintValue,
    ReadFile,
    RootPipeline,
    Scope,
    StepScope,
)
from tagflow.settings import EngineSettings

logger = logging.getLogger(__name__)

# Tag names are matched exactly and case-sensitively
INSTRUCTION_TAGS: dict[str, type[Instruction]] = {
    "input": InputScope,
    "step": StepScope,
    "file": ReadFile,
    "print": PrintValue,
    "pipeline": RootPipeline,
}

ROOT_TAG = "pipeline"


class DocumentParser:
    """Builds instruction trees from tagflow XML documents."""

    def __init__(
        self,
        settings: EngineSettings | None = None,
        source: str | Path | None = None,
    ):
        """
        Initialize the parser.

        Params:
            settings: Engine settings; defaults are used when omitted
            source: Path of the document being parsed, used for error context
                and for resolving <file> paths relative to the document
        """
        self.settings = settings or EngineSettings()
        self.source = str(source) if source is not None else None

        self._base_dir: str | None = None
        if self.settings.paths_relative_to_document and self.source is not None:
            self._base_dir = str(Path(self.source).resolve().parent)

    def parse(self, text: str) -> Instruction:
        """
        Parse a whole document into its single top-level instruction.

        Params:
            text: The document's XML text

        Returns:
            The instruction built from the root element

        Raises:
            MalformedDocumentError: If the text is not well-formed XML
            RootTagError: If the root element is not <pipeline> and the
                settings require it
            UnknownTagError: If any element has an unrecognized tag
            EmptyDocumentError: If the root pipeline has no instructions
        """
        # Decode with the codec used to encode, overriding any XML declaration
        xml_parser = etree.XMLParser(
            encoding=self.settings.encoding, resolve_entities=False, no_network=True
        )
        try:
            root = etree.fromstring(text.encode(self.settings.encoding), xml_parser)
        except etree.XMLSyntaxError as e:
            raise MalformedDocumentError(
                e.msg, ErrorContext(source=self.source, line=e.lineno)
            ) from e
        except ValueError as e:
            raise MalformedDocumentError(str(e), ErrorContext(source=self.source)) from e

        if self.settings.require_pipeline_root and root.tag != ROOT_TAG:
            raise RootTagError(str(root.tag), self._context(root))

        instruction = self.build_instruction(root)

        if isinstance(instruction, Scope) and not instruction.children:
            raise EmptyDocumentError(root.tag, self._context(root))

        logger.debug(
            "Parsed document %s: <%s> with %d top-level instructions",
            self.source or "<string>",
            root.tag,
            len(getattr(instruction, "children", ())),
        )
        return instruction

    def parse_children(self, element: etree._Element) -> list[Instruction]:
        """
        Build one instruction per element child, in document order.

        Text, comments and processing instructions are skipped.

        Params:
            element: The element whose children are parsed

        Returns:
            Ordered list of instructions

        Raises:
            UnknownTagError: If any descendant has an unrecognized tag
        """
        instructions = []
        for child in element:
            if not isinstance(child.tag, str):
                continue
            instructions.append(self.build_instruction(child))
        return instructions

    def build_instruction(self, element: etree._Element) -> Instruction:
        """
        Map a single element to its instruction, recursing into containers.

        Params:
            element: An element with one of the tags in `INSTRUCTION_TAGS`

        Returns:
            The instruction node for the element

        Raises:
            UnknownTagError: If the element's tag is not recognized
            MalformedDocumentError: If a leaf body contains an entity reference
        """
        tag = element.tag
        node_type = INSTRUCTION_TAGS.get(tag)
        if node_type is None:
            raise UnknownTagError(
                str(tag), list(INSTRUCTION_TAGS), self._context(element)
            )

        if issubclass(node_type, Scope):
            instruction = node_type(children=tuple(self.parse_children(element)))
        elif node_type is ReadFile:
            instruction = ReadFile(
                path=self._leaf_text(element),
                encoding=self.settings.encoding,
                base_dir=self._base_dir,
            )
        else:
            instruction = node_type(label=self._leaf_text(element))

        logger.debug("Built <%s> at line %s", tag, element.sourceline)
        return instruction

    def _leaf_text(self, element: etree._Element) -> str:
        for child in element:
            if child.tag is etree.Entity:
                raise MalformedDocumentError(
                    f"entity reference {child.text} in <{element.tag}> is not expanded",
                    self._context(element),
                )
        text = element.text or ""
        if self.settings.strip_text:
            text = text.strip()
        return text

    def _context(self, element: etree._Element) -> ErrorContext:
        parent = element.getparent()
        return ErrorContext(
            source=self.source,
            line=element.sourceline,
            tag=str(element.tag),
            parent_tag=str(parent.tag) if parent is not None else None,
        )


def parse_children(
    element: etree._Element,
    settings: EngineSettings | None = None,
    source: str | Path | None = None,
) -> list[Instruction]:
    """
    Convenience function to build the instructions for an element's children.

    Params:
        element: The element whose children are parsed
        settings: Optional engine settings
        source: Optional document path for error context

    Returns:
        Ordered list of instructions

    Raises:
        UnknownTagError: If any descendant has an unrecognized tag
    """
    return DocumentParser(settings, source).parse_children(element)


def parse_document(
    text: str,
    settings: EngineSettings | None = None,
    source: str | Path | None = None,
) -> Instruction:
    """
    Convenience function to parse document text.

    Params:
        text: The document's XML text
        settings: Optional engine settings
        source: Optional document path for error context

    Returns:
        The document's top-level instruction

    Raises:
        DocumentError: If the document cannot be turned into instructions
    """
    return DocumentParser(settings, source).parse(text)


def parse_file(
    path: str | Path, settings: EngineSettings | None = None
) -> Instruction:
    """
    Read a program file and parse it.

    Params:
        path: Path of the program file
        settings: Optional engine settings

    Returns:
        The document's top-level instruction

    Raises:
        DocumentReadError: If the file cannot be read
        DocumentError: If the document cannot be turned into instructions
    """
    settings = settings or EngineSettings()
    try:
        text = Path(path).read_text(encoding=settings.encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(str(path), str(e)) from e
    return DocumentParser(settings, path).parse(text)
