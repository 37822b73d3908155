"""Top-level helpers that parse a program file and run it."""

import logging
from pathlib import Path

from tagflow.core.types import UNIT, Value
from tagflow.parsing.parser import parse_file
from tagflow.settings import EngineSettings

logger = logging.getLogger(__name__)


def run_file(path: str | Path, settings: EngineSettings | None = None) -> Value:
    """
    Parse a program file and execute its root pipeline.

    Parsing completes before anything runs, so a document error never
    produces partial output.

    Params:
        path: Path of the program file
        settings: Optional engine settings

    Returns:
        The value left in the root pipeline's accumulator

    Raises:
        DocumentError: If the program cannot be parsed
        InstructionExecutionError: If an instruction fails while running
    """
    program = parse_file(path, settings)
    logger.debug("Running %s", path)
    return program.execute(UNIT)
