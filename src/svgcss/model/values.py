"""CSS value atoms and declarations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from svgcss.model.number import Number


@dataclass(frozen=True)
class Rgba:
    """An 8-bit per channel color."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel!r}")


@dataclass(frozen=True)
class CssIdent:
    """A bare identifier, e.g. ``bold``."""

    name: str


@dataclass(frozen=True)
class CssString:
    """A quoted string."""

    text: str


@dataclass(frozen=True)
class CssReference:
    """A ``#name`` reference."""

    name: str


@dataclass(frozen=True)
class CssNumber:
    number: Number


@dataclass(frozen=True)
class CssColor:
    color: Rgba


@dataclass(frozen=True)
class CssFunction:
    """A function call such as ``url(#grad)`` or ``rgb(1, 2, 3)``."""

    name: str
    args: tuple[CssElement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class CssOpComma:
    """Literal ``,`` kept to preserve punctuation in value lists."""


@dataclass(frozen=True)
class CssOpSlash:
    """Literal ``/`` as found in shorthand values."""


CssElement = (
    CssIdent
    | CssString
    | CssReference
    | CssNumber
    | CssColor
    | CssFunction
    | CssOpComma
    | CssOpSlash
)


@dataclass(frozen=True)
class CssDeclaration:
    """A property assignment, e.g. ``stroke-width: 2px``.

    ``values`` holds the comma separated groups of the value, each group
    being the space separated terms in source order.
    """

    property: str
    values: tuple[tuple[CssElement, ...], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "values", tuple(tuple(group) for group in self.values)
        )

    def elements(self) -> Iterator[CssElement]:
        """Iterate over all value terms, groups flattened."""
        for group in self.values:
            yield from group

    @classmethod
    def of(cls, prop: str, *elements: CssElement) -> CssDeclaration:
        """Build a declaration with a single value group."""
        return cls(prop, (elements,))

    @classmethod
    def grouped(
        cls, prop: str, groups: Iterable[Iterable[CssElement]]
    ) -> CssDeclaration:
        return cls(prop, tuple(tuple(g) for g in groups))
