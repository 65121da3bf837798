"""CLI command: svgcss units -- list the supported length units."""

from __future__ import annotations

import click

from svgcss.model.number import Number, Unit
from svgcss.serialize import serialize_number
from svgcss.units import to_user_unit

_DESCRIPTIONS = {
    Unit.NUM: "user unit",
    Unit.PX: "pixel (one user unit)",
    Unit.EM: "font size relative",
    Unit.PERCENT: "viewport relative",
    Unit.PC: "pica, 1/6 inch",
    Unit.MM: "millimeter",
    Unit.CM: "centimeter",
    Unit.POINT: "point, 1/72 inch",
    Unit.INCHES: "inch",
}


@click.command()
@click.option("--dpi", type=click.IntRange(min=1), default=None, help="Dots per inch.")
@click.pass_obj
def units(config, dpi: int | None) -> None:
    """List supported units and the user-unit size of one of each."""
    dpi = dpi or config.dpi
    click.echo(f"DPI: {dpi}")
    for unit in Unit:
        one = Number(1.0, unit)
        suffix = unit.value or "(none)"
        if one.is_relative:
            size = "caller resolved"
        else:
            size = serialize_number(to_user_unit(dpi, one))
        click.echo(f"  {suffix:<7} {_DESCRIPTIONS[unit]:<24} {size}")
