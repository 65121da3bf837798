"""Length model: a magnitude tagged with a CSS unit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

Dpi = int


class Unit(StrEnum):
    """Unit tag of a :class:`Number`. The value is the CSS suffix."""

    NUM = ""
    PX = "px"
    EM = "em"
    PERCENT = "%"
    PC = "pc"
    MM = "mm"
    CM = "cm"
    POINT = "pt"
    INCHES = "in"


# Units whose value depends on font size or viewport, not on DPI.
RELATIVE_UNITS = frozenset({Unit.EM, Unit.PERCENT})

# Units that are converted through inches, hence depend on DPI.
PHYSICAL_UNITS = frozenset({Unit.PC, Unit.MM, Unit.CM, Unit.POINT, Unit.INCHES})


@dataclass(frozen=True)
class Number:
    """A length, possibly expressed in a device dependent unit.

    ``Percent`` values are stored as fractions: ``Number.percent(0.5)`` is
    50%.
    """

    value: float
    unit: Unit = Unit.NUM

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", Unit(self.unit))

    # --- Factory classmethods ---

    @classmethod
    def num(cls, value: float) -> Number:
        """Coordinate in the current user coordinate system."""
        return cls(value, Unit.NUM)

    @classmethod
    def px(cls, value: float) -> Number:
        return cls(value, Unit.PX)

    @classmethod
    def em(cls, value: float) -> Number:
        return cls(value, Unit.EM)

    @classmethod
    def percent(cls, value: float) -> Number:
        return cls(value, Unit.PERCENT)

    @classmethod
    def pc(cls, value: float) -> Number:
        return cls(value, Unit.PC)

    @classmethod
    def mm(cls, value: float) -> Number:
        return cls(value, Unit.MM)

    @classmethod
    def cm(cls, value: float) -> Number:
        return cls(value, Unit.CM)

    @classmethod
    def point(cls, value: float) -> Number:
        return cls(value, Unit.POINT)

    @classmethod
    def inches(cls, value: float) -> Number:
        return cls(value, Unit.INCHES)

    # --- Helpers ---

    @property
    def is_relative(self) -> bool:
        """True for units resolved against font size or viewport (em, %)."""
        return self.unit in RELATIVE_UNITS

    @property
    def is_physical(self) -> bool:
        """True for units converted through the DPI setting."""
        return self.unit in PHYSICAL_UNITS

    def map(self, fn: Callable[[float], float]) -> Number:
        """Return a new number with *fn* applied to the magnitude."""
        return map_number(fn, self)


def map_number(fn: Callable[[float], float], number: Number) -> Number:
    """Apply *fn* to the magnitude of *number*, keeping its unit."""
    return Number(fn(number.value), number.unit)
