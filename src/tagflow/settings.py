"""
Engine configuration for tagflow.

This module provides the settings that control how documents are read and how
leaf payloads are interpreted by the parser.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any


@dataclass
class EngineSettings:
    """Configuration for parsing and running tagflow programs.

    Settings missing from a config mapping keep their defaults. Values are
    checked on construction, so a bad config fails before any program is read.

    Examples:
        # All defaults
        settings = EngineSettings()

        # Only strip leaf text
        settings = EngineSettings.from_dict({"strip_text": True})

        # From a YAML settings file
        settings = EngineSettings.from_yaml("tagflow.yaml")
    """

    # Encoding of the program file and of every <file> target
    encoding: str = "utf-8"

    # Strip surrounding whitespace from <file> and <print> text
    strip_text: bool = False

    # Resolve relative <file> paths against the program file's directory
    # instead of the working directory
    paths_relative_to_document: bool = False

    # Reject documents whose outermost element is not <pipeline>
    require_pipeline_root: bool = True

    def __post_init__(self):
        if not isinstance(self.encoding, str):
            raise ValueError(
                f"encoding must be a string, got {type(self.encoding).__name__}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding '{self.encoding}'") from e

        for name in ("strip_text", "paths_relative_to_document", "require_pipeline_root"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> EngineSettings:
        """Build settings from a config mapping.

        Keys that are not setting names are ignored.

        Args:
            config: Mapping of setting name to value

        Returns:
            EngineSettings with the given values applied over the defaults

        Raises:
            ValueError: If a value has the wrong type or names an unknown encoding
        """
        known = {f.name for f in dataclass_fields(cls)}
        return cls(**{k: v for k, v in config.items() if k in known})

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> EngineSettings:
        """Load settings from a YAML file holding a single mapping.

        An empty file yields the defaults.

        Args:
            yaml_path: Path of the settings file

        Returns:
            EngineSettings built with `from_dict`

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not a mapping or holds invalid values

        Example YAML:
            encoding: latin-1
            strip_text: true
            paths_relative_to_document: true
        """
        import yaml

        path = Path(yaml_path)
        with path.open(encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(f"Invalid settings file (expected mapping): {path}")

        return cls.from_dict(config)
