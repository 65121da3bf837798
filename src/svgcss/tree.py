"""A minimal styleable element tree and context construction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from svgcss.matching import CssContext

__all__ = ["StyleElement", "iter_contexts", "context_for"]


@dataclass(frozen=True, eq=False)
class StyleElement:
    """An element of a document tree, matchable by CSS selectors.

    Elements compare by identity: two equal looking nodes at different
    places of a tree are different elements.
    """

    name: str
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[StyleElement, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Element name must be a non-empty string")
        if isinstance(self.classes, str):
            object.__setattr__(self, "classes", tuple(self.classes.split()))
        else:
            object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "children", tuple(self.children))

    # --- CssMatcheable ---

    def css_id(self) -> str | None:
        return self.id

    def css_classes(self) -> Sequence[str]:
        return self.classes

    def css_name(self) -> str:
        return self.name

    def css_attrib(self, name: str) -> str | None:
        if name == "id":
            return self.id
        if name == "class" and self.classes:
            return " ".join(self.classes)
        return self.attributes.get(name)

    def __repr__(self) -> str:
        parts = [self.name]
        if self.id:
            parts.append("#" + self.id)
        parts.extend("." + c for c in self.classes)
        return f"StyleElement({''.join(parts)})"


def context_for(
    path: Iterable[tuple[StyleElement, Sequence[StyleElement]]],
) -> CssContext:
    """Build a context from a root-to-target path.

    Each step of *path* is an element with its preceding siblings in
    document order. The resulting levels are innermost first, each with the
    nearest sibling right after its element.
    """
    levels = [[element, *reversed(preceding)] for element, preceding in path]
    levels.reverse()
    return levels


def iter_contexts(
    root: StyleElement,
) -> Iterator[tuple[StyleElement, CssContext]]:
    """Yield ``(element, context)`` for every element under *root*.

    Elements come in document order (depth first, pre-order), root
    included. Ancestor levels are shared between the yielded contexts
    and must not be mutated.
    """
    # Stack of (element, preceding siblings, levels of its parent).
    stack: list[tuple[StyleElement, tuple[StyleElement, ...], list[list[StyleElement]]]]
    stack = [(root, (), [])]
    while stack:
        element, preceding, outer = stack.pop()
        context = [[element, *reversed(preceding)], *outer]
        yield element, context
        children = element.children
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], children[:i], context))
