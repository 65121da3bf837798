"""Style resolution: apply a rule set to every element of a tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from svgcss.config import CssConfig
from svgcss.matching import CssContext, find_matching_declarations
from svgcss.model.number import Dpi, Number
from svgcss.model.selector import CssRule
from svgcss.model.values import CssDeclaration, CssNumber
from svgcss.tree import StyleElement, iter_contexts
from svgcss.units import to_user_unit

__all__ = ["ResolvedStyle", "StyleResolver"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedStyle:
    """Declarations applying to one element, in matching order."""

    element: StyleElement
    declarations: tuple[CssDeclaration, ...]
    dpi: Dpi

    def lookup(self, prop: str) -> CssDeclaration | None:
        """Return the last declaration of *prop*, or None.

        Later declarations win; no specificity is taken into account.
        """
        for declaration in reversed(self.declarations):
            if declaration.property == prop:
                return declaration
        return None

    def length(self, prop: str) -> Number | None:
        """Return the first length of *prop* converted to user units.

        ``em`` and percent lengths are returned as is.
        """
        declaration = self.lookup(prop)
        if declaration is None:
            return None
        for element in declaration.elements():
            if isinstance(element, CssNumber):
                return to_user_unit(self.dpi, element.number)
        return None


class StyleResolver:
    """Match a fixed rule set against elements.

    Rules are kept as given; the resolver holds no per element state and
    can be shared between threads.
    """

    def __init__(
        self, rules: Iterable[CssRule], config: CssConfig | None = None
    ) -> None:
        self.rules: tuple[CssRule, ...] = tuple(rules)
        self.config = config or CssConfig()

    def declarations_for(self, context: CssContext) -> list[CssDeclaration]:
        return find_matching_declarations(self.rules, context)

    def resolve_tree(self, root: StyleElement) -> list[ResolvedStyle]:
        """Resolve the style of every element under *root*, document order."""
        styles: list[ResolvedStyle] = []
        for element, context in iter_contexts(root):
            declarations = self.declarations_for(context)
            logger.debug(
                "%r: %d declaration(s) from %d rule(s)",
                element,
                len(declarations),
                len(self.rules),
            )
            styles.append(
                ResolvedStyle(
                    element=element,
                    declarations=tuple(declarations),
                    dpi=self.config.dpi,
                )
            )
        return styles
