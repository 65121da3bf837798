"""CLI command: svgcss resolve -- convert lengths to user units."""

from __future__ import annotations

import re

import click

from svgcss.model.number import Number, Unit
from svgcss.serialize import serialize_number
from svgcss.units import to_user_unit

# A number followed by an optional unit suffix, e.g. "12pt", "-2.5e1mm", "50%".
_LENGTH_RE = re.compile(
    r"^\s*(?P<value>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(?P<unit>[a-zA-Z%]*)\s*$"
)

_SUFFIXES = {unit.value: unit for unit in Unit}


class LengthType(click.ParamType):
    """Click parameter type for a CSS length literal."""

    name = "length"

    def convert(self, value, param, ctx) -> Number:
        if isinstance(value, Number):
            return value
        match = _LENGTH_RE.match(value)
        if not match:
            self.fail(f"{value!r} is not a length", param, ctx)
        unit = _SUFFIXES.get(match.group("unit").lower())
        if unit is None:
            self.fail(f"unknown unit {match.group('unit')!r} in {value!r}", param, ctx)
        magnitude = float(match.group("value"))
        if unit is Unit.PERCENT:
            magnitude /= 100
        return Number(magnitude, unit)


LENGTH = LengthType()


@click.command()
@click.argument("lengths", nargs=-1, required=True, type=LENGTH)
@click.option("--dpi", type=click.IntRange(min=1), default=None, help="Dots per inch.")
@click.pass_obj
def resolve(config, lengths: tuple[Number, ...], dpi: int | None) -> None:
    """Convert LENGTHS (e.g. 12pt 2.5in 10mm) to user units.

    Relative lengths (em, %) are printed unchanged.
    """
    dpi = dpi or config.dpi
    for length in lengths:
        resolved = to_user_unit(dpi, length)
        click.echo(f"{serialize_number(length)} -> {serialize_number(resolved)}")
