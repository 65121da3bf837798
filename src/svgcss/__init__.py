"""svgcss: CSS selector matching, unit resolution and serialization for SVG trees."""

from svgcss.config import CssConfig
from svgcss.matching import (
    CssContext,
    CssMatcheable,
    find_matching_declarations,
    is_described_by,
    is_matching,
)
from svgcss.resolve import ResolvedStyle, StyleResolver
from svgcss.serialize import serialize, serialize_number, serialize_rules
from svgcss.tree import StyleElement, context_for, iter_contexts
from svgcss.units import to_user_unit

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CssConfig",
    "CssContext",
    "CssMatcheable",
    "is_described_by",
    "is_matching",
    "find_matching_declarations",
    "to_user_unit",
    "serialize",
    "serialize_number",
    "serialize_rules",
    "StyleElement",
    "context_for",
    "iter_contexts",
    "ResolvedStyle",
    "StyleResolver",
]
