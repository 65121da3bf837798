"""Conversion of device dependent lengths into user units."""

from __future__ import annotations

from collections.abc import Iterable

from svgcss.model.number import Dpi, Number, Unit

__all__ = ["to_user_unit", "resolve_all"]

POINTS_PER_INCH = 72.0
PICAS_PER_INCH = 6.0
MM_PER_INCH = 25.4
CM_PER_INCH = 2.54


def to_user_unit(dpi: Dpi, number: Number) -> Number:
    """Replace every device dependent unit of *number* with user units.

    Physical units (pc, mm, cm, pt) go through inches, and inches are
    scaled by *dpi*. Pixels are taken as user units. ``em`` and percent
    values are returned unchanged: they depend on font size and viewport,
    which the caller must supply.
    """
    unit = number.unit
    value = number.value
    if unit is Unit.NUM:
        return number
    if unit is Unit.PX:
        return to_user_unit(dpi, Number.num(value))
    if unit is Unit.EM or unit is Unit.PERCENT:
        return number
    if unit is Unit.PC:
        return to_user_unit(dpi, Number.inches(12 * value / POINTS_PER_INCH))
    if unit is Unit.MM:
        return to_user_unit(dpi, Number.inches(value / MM_PER_INCH))
    if unit is Unit.CM:
        return to_user_unit(dpi, Number.inches(value / CM_PER_INCH))
    if unit is Unit.POINT:
        return to_user_unit(dpi, Number.inches(value / POINTS_PER_INCH))
    if unit is Unit.INCHES:
        return Number.num(value * dpi)
    raise TypeError(f"Unknown unit: {unit!r}")


def resolve_all(dpi: Dpi, numbers: Iterable[Number]) -> list[Number]:
    """Resolve each of *numbers* with :func:`to_user_unit`."""
    return [to_user_unit(dpi, n) for n in numbers]
