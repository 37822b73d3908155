"""
Core value types for the tagflow pipeline engine.

Every instruction consumes and produces a `Value`. The set of variants is
closed: a pipeline starts from `Unit` and file reads produce `Text`.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class Unit(BaseModel):
    """The empty value a root pipeline starts from."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unit"] = "unit"

    def __str__(self) -> str:
        return "()"


class Text(BaseModel):
    """A string flowing between pipeline stages."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str

    def __str__(self) -> str:
        return self.text


Value = Unit | Text

UNIT = Unit()


def coerce_value(obj: Any) -> Value:
    """Convert a plain Python object into a pipeline `Value`.

    Params:
        obj: `None`, a `str`, or an existing `Unit`/`Text`

    Returns:
        The matching `Value`

    Raises:
        TypeError: If the object has no pipeline representation
    """
    if isinstance(obj, (Unit, Text)):
        return obj
    if obj is None:
        return UNIT
    if isinstance(obj, str):
        return Text(text=obj)
    raise TypeError(f"Cannot use {type(obj).__name__} as a pipeline value")
