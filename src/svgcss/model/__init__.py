"""svgcss model layer -- public type re-exports."""

from svgcss.model.number import Dpi, Number, Unit, map_number
from svgcss.model.selector import (
    DIRECT_CHILDREN,
    NEARBY,
    AllOf,
    AnyElem,
    CssDescriptor,
    CssRule,
    CssSelector,
    CssSelectorRule,
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
    CssElement,
    CssFunction,
    CssIdent,
    CssNumber,
    CssOpComma,
    CssOpSlash,
    CssReference,
    CssString,
    Rgba,
)

__all__ = [
    # number
    "Dpi",
    "Number",
    "Unit",
    "map_number",
    # values
    "Rgba",
    "CssIdent",
    "CssString",
    "CssReference",
    "CssNumber",
    "CssColor",
    "CssFunction",
    "CssOpComma",
    "CssOpSlash",
    "CssElement",
    "CssDeclaration",
    # selectors
    "OfClass",
    "OfName",
    "OfId",
    "OfPseudoClass",
    "AnyElem",
    "WithAttrib",
    "CssDescriptor",
    "Nearby",
    "DirectChildren",
    "AllOf",
    "NEARBY",
    "DIRECT_CHILDREN",
    "CssSelector",
    "CssSelectorRule",
    "CssRule",
]
