"""Command-line entry point: ``tagflow PROGRAM.xml``."""

import argparse
import logging
import sys

import yaml

from tagflow.exceptions import DocumentError, InstructionExecutionError
from tagflow.runner import run_file
from tagflow.settings import EngineSettings

EXIT_OK = 0
EXIT_EXECUTION_ERROR = 1
EXIT_DOCUMENT_ERROR = 2


def _error(message: str) -> None:
    print(f"tagflow: error: {message}", file=sys.stderr)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="tagflow",
        description="Run a tagflow XML pipeline program.",
    )
    parser.add_argument("program", help="Path to the XML program file")
    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        default=None,
        help="YAML file with engine settings (encoding, strip_text, ...)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing and execution steps to stderr",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    settings = EngineSettings()
    if args.config_path:
        try:
            settings = EngineSettings.from_yaml(args.config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            _error(f"cannot load settings '{args.config_path}': {e}")
            return EXIT_DOCUMENT_ERROR

    try:
        run_file(args.program, settings)
    except DocumentError as e:
        _error(str(e))
        return EXIT_DOCUMENT_ERROR
    except InstructionExecutionError as e:
        _error(str(e))
        return EXIT_EXECUTION_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
