"""
CSS values and declarations.
A value is one of Keyword, Length or Color; all of them are immutable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Unit(Enum):
    """Length units."""
    PX = "px"
    EM = "em"
    REM = "rem"


@dataclass(frozen=True)
class Keyword:
    """An identifier value such as ``block`` or ``auto``."""
    text: str

    def to_px(self) -> float:
        return 0.0

    def to_css(self) -> str:
        return self.text


@dataclass(frozen=True)
class Length:
    """A numeric magnitude with a unit."""
    magnitude: float
    unit: Unit = Unit.PX

    def to_px(self) -> float:
        """The magnitude of a px length; relative units resolve to 0 here."""
        if self.unit == Unit.PX:
            return float(self.magnitude)
        return 0.0

    def to_css(self) -> str:
        return f"{self.magnitude:g}{self.unit.value}"


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def to_px(self) -> float:
        return 0.0

    def to_css(self) -> str:
        if self.a == 255:
            return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a / 255:.3g})"


Value = Union[Keyword, Length, Color]


@dataclass(frozen=True)
class Declaration:
    """A property name paired with its value, e.g. ``color: red``."""
    name: str
    value: Value
