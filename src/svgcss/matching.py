"""Selector matching against an element and its ancestor/sibling context.

A context is a list of levels, innermost first::

    [[target, previous_sibling, ...],
     [parent, parent_previous_sibling, ...],
     [grand_parent, ...],
     ...]

Matching is anchored at the target and walks outward, so selector rules
(written ancestor first) are reversed before being handed to
:func:`is_matching`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from svgcss.model.selector import (
    AllOf,
    AnyElem,
    CssDescriptor,
    CssRule,
    CssSelector,
    DirectChildren,
    Nearby,
    OfClass,
    OfId,
    OfName,
    OfPseudoClass,
    WithAttrib,
)
from svgcss.model.values import CssDeclaration

__all__ = [
    "CssMatcheable",
    "CssContext",
    "is_described_by",
    "is_matching",
    "find_matching_declarations",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class CssMatcheable(Protocol):
    """An element that can be matched against CSS selectors."""

    def css_id(self) -> str | None:
        """Return the element's id attribute, if any."""
        ...

    def css_classes(self) -> Sequence[str]:
        """Return all the class names of the element."""
        ...

    def css_name(self) -> str:
        """Return the tag name of the element."""
        ...

    def css_attrib(self, name: str) -> str | None:
        """Return the value of attribute *name*, if present."""
        ...


CssContext = Sequence[Sequence[CssMatcheable]]


def _describes(descriptor: CssDescriptor, element: CssMatcheable) -> bool:
    if isinstance(descriptor, OfClass):
        return descriptor.name in element.css_classes()
    if isinstance(descriptor, OfId):
        return element.css_id() == descriptor.name
    if isinstance(descriptor, OfName):
        return element.css_name() == descriptor.name
    if isinstance(descriptor, OfPseudoClass):
        return False
    if isinstance(descriptor, WithAttrib):
        return element.css_attrib(descriptor.name) == descriptor.value
    if isinstance(descriptor, AnyElem):
        return True
    raise TypeError(f"Unknown CSS descriptor: {descriptor!r}")


def is_described_by(
    element: CssMatcheable, descriptors: Iterable[CssDescriptor]
) -> bool:
    """Return True if every descriptor holds for *element*.

    An empty descriptor list is vacuously true. Pseudo classes never match.
    """
    return all(_describes(d, element) for d in descriptors)


def is_matching(context: CssContext, selectors: Sequence[CssSelector]) -> bool:
    """Match a *reversed* selector rule (target first) against *context*.

    Cases, first applicable wins:

    1. no selector left: match.
    2. context exhausted: no match.
    3. ``+`` with a non empty level: step to the previous sibling.
    4. ``>`` followed by ``AllOf``: the current element must satisfy it,
       then continue on the parent level. No backtracking.
    5. any other ``>``: no match.
    6. ``AllOf`` with a non empty level: consume it if the current element
       satisfies it, and in either case continue on the parent level
       (greedy nearest ancestor for the descendant relation).
    7. otherwise skip to the parent level.
    """
    depth = 0  # index of the current level
    offset = 0  # sibling hops taken inside the current level
    index = 0  # next selector to satisfy
    while True:
        if index >= len(selectors):
            return True
        if depth >= len(context):
            return False

        level = context[depth]
        has_element = offset < len(level)
        selector = selectors[index]

        if isinstance(selector, Nearby) and has_element:
            offset += 1
            index += 1
            continue

        if isinstance(selector, DirectChildren):
            following = selectors[index + 1] if index + 1 < len(selectors) else None
            if (
                has_element
                and isinstance(following, AllOf)
                and is_described_by(level[offset], following.descriptors)
            ):
                depth, offset, index = depth + 1, 0, index + 2
                continue
            return False

        if isinstance(selector, AllOf) and has_element:
            if is_described_by(level[offset], selector.descriptors):
                index += 1
            depth, offset = depth + 1, 0
            continue

        depth, offset = depth + 1, 0


def find_matching_declarations(
    rules: Iterable[CssRule], context: CssContext
) -> list[CssDeclaration]:
    """Collect the declarations of every rule matching *context*.

    Declarations come in rule order, then selector alternative order; a
    rule with several matching alternatives contributes its declarations
    once per alternative. No specificity ordering is applied.
    """
    found: list[CssDeclaration] = []
    for rule in rules:
        for selector_rule in rule.selectors:
            if is_matching(context, selector_rule[::-1]):
                logger.debug(
                    "Selector %r matched, adding %d declaration(s)",
                    selector_rule,
                    len(rule.declarations),
                )
                found.extend(rule.declarations)
    return found
