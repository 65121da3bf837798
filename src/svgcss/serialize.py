"""Render model entities back to CSS text.

The output is meant for debugging and export. It is exact down to the
separators, but pseudo class function syntax is not reconstructed, so it
is not guaranteed to be parseable by every CSS parser.
"""

from __future__ import annotations

import io
import math
from collections.abc import Iterable
from typing import Any

from svgcss.model.number import Number, Unit
from svgcss.model.selector import (
    AllOf,
    AnyElem,
    CssRule,
    DirectChildren,
    Nearby,
    OfClass,
    OfId,
    OfName,
    OfPseudoClass,
    WithAttrib,
)
from svgcss.model.values import (
    CssColor,
    CssDeclaration,
    CssFunction,
    CssIdent,
    CssNumber,
    CssOpComma,
    CssOpSlash,
    CssReference,
    CssString,
)

__all__ = ["format_double", "serialize_number", "serialize", "serialize_rules"]


def format_double(value: float) -> str:
    """Format a magnitude with at most four decimals, trailing zeros removed."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def serialize_number(number: Number) -> str:
    """Encode *number* for use in CSS or SVG attributes.

    Percentages are stored as fractions and printed as the floor of the
    percentage, without decimals: ``Number.percent(0.509)`` gives ``50%``.
    """
    if number.unit is Unit.PERCENT:
        percent = 100 * number.value
        if not math.isfinite(percent):
            return format_double(percent) + "%"
        return f"{math.floor(percent)}%"
    return format_double(number.value) + number.unit.value


def serialize(entity: Any) -> str:
    """Serialize any descriptor, selector, rule, declaration, value or number.

    A tuple or list is taken as a selector rule and space joined.
    """
    out = io.StringIO()
    _write(out, entity)
    return out.getvalue()


def serialize_rules(rules: Iterable[CssRule]) -> str:
    """Serialize a whole stylesheet, one rule block after the other."""
    out = io.StringIO()
    for rule in rules:
        _write(out, rule)
    return out.getvalue()


def _write_joined(out: io.StringIO, items: Iterable[Any], sep: str) -> None:
    for i, item in enumerate(items):
        if i:
            out.write(sep)
        _write(out, item)


def _write(out: io.StringIO, entity: Any) -> None:
    # descriptors
    if isinstance(entity, OfClass):
        out.write("." + entity.name)
    elif isinstance(entity, OfName):
        out.write(entity.name)
    elif isinstance(entity, OfId):
        out.write("#" + entity.name)
    elif isinstance(entity, OfPseudoClass):
        out.write(":" + entity.name)
    elif isinstance(entity, AnyElem):
        out.write("*")
    elif isinstance(entity, WithAttrib):
        out.write(f"[{entity.name}={entity.value}]")
    # selectors
    elif isinstance(entity, Nearby):
        out.write("+")
    elif isinstance(entity, DirectChildren):
        out.write(">")
    elif isinstance(entity, AllOf):
        _write_joined(out, entity.descriptors, "")
    elif isinstance(entity, (tuple, list)):
        _write_joined(out, entity, " ")
    # rules
    elif isinstance(entity, CssRule):
        _write_joined(out, entity.selectors, ",\n")
        out.write(" {\n")
        for declaration in entity.declarations:
            out.write("  ")
            _write(out, declaration)
            out.write(";\n")
        out.write("}\n")
    elif isinstance(entity, CssDeclaration):
        out.write(entity.property + ": ")
        _write_joined(out, entity.elements(), " ")
    # values
    elif isinstance(entity, CssIdent):
        out.write(entity.name)
    elif isinstance(entity, CssString):
        out.write(f'"{entity.text}"')
    elif isinstance(entity, CssReference):
        out.write("#" + entity.name)
    elif isinstance(entity, CssNumber):
        out.write(serialize_number(entity.number))
    elif isinstance(entity, Number):
        out.write(serialize_number(entity))
    elif isinstance(entity, CssColor):
        color = entity.color
        out.write(f"#{color.r:02X}{color.g:02X}{color.b:02X}")
    elif isinstance(entity, CssFunction):
        out.write(entity.name + "(")
        _write_joined(out, entity.args, ", ")
        out.write(")")
    elif isinstance(entity, CssOpComma):
        out.write(",")
    elif isinstance(entity, CssOpSlash):
        out.write("/")
    else:
        raise TypeError(f"Cannot serialize {type(entity).__name__}: {entity!r}")
