"""Selector model: descriptors, combinators, selector rules and rules.

A selector rule is written ancestor first, as in source CSS::

    g.layer > rect + circle

    (AllOf((OfName("g"), OfClass("layer"))), DIRECT_CHILDREN,
     AllOf((OfName("rect"),)), NEARBY, AllOf((OfName("circle"),)))

An ``AllOf`` not preceded by a combinator stands for the descendant
relation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from svgcss.model.values import CssDeclaration

# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OfClass:
    """``.name``"""

    name: str


@dataclass(frozen=True)
class OfName:
    """Tag name, e.g. ``rect``."""

    name: str


@dataclass(frozen=True)
class OfId:
    """``#name``"""

    name: str


@dataclass(frozen=True)
class OfPseudoClass:
    """``:name``. Never matches; function syntax is not kept."""

    name: str


@dataclass(frozen=True)
class AnyElem:
    """``*``"""


@dataclass(frozen=True)
class WithAttrib:
    """``[name=value]``, exact value match."""

    name: str
    value: str


CssDescriptor = OfClass | OfName | OfId | OfPseudoClass | AnyElem | WithAttrib

# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Nearby:
    """Adjacent sibling combinator ``+``."""


@dataclass(frozen=True)
class DirectChildren:
    """Child combinator ``>``."""


@dataclass(frozen=True)
class AllOf:
    """Conjunction of descriptors, all of which must hold on one element."""

    descriptors: tuple[CssDescriptor, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "descriptors", tuple(self.descriptors))


CssSelector = Nearby | DirectChildren | AllOf

CssSelectorRule = tuple[CssSelector, ...]

NEARBY = Nearby()
DIRECT_CHILDREN = DirectChildren()


@dataclass(frozen=True)
class CssRule:
    """Alternative selector rules sharing one list of declarations.

    If any alternative matches an element, all the declarations apply.
    """

    selectors: tuple[CssSelectorRule, ...] = field(default_factory=tuple)
    declarations: tuple[CssDeclaration, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "selectors", tuple(tuple(rule) for rule in self.selectors)
        )
        object.__setattr__(self, "declarations", tuple(self.declarations))
