"""Tests for the number, value and selector model."""

import dataclasses

import pytest

from svgcss.model import (
    AllOf,
    CssDeclaration,
    CssFunction,
    CssIdent,
    CssNumber,
    CssOpComma,
    CssRule,
    Number,
    OfClass,
    OfName,
    Rgba,
    Unit,
    map_number,
)


# ---------------------------------------------------------------------------
# Number
# ---------------------------------------------------------------------------


class TestNumberFactories:
    @pytest.mark.parametrize(
        "factory, unit",
        [
            (Number.num, Unit.NUM),
            (Number.px, Unit.PX),
            (Number.em, Unit.EM),
            (Number.percent, Unit.PERCENT),
            (Number.pc, Unit.PC),
            (Number.mm, Unit.MM),
            (Number.cm, Unit.CM),
            (Number.point, Unit.POINT),
            (Number.inches, Unit.INCHES),
        ],
    )
    def test_factory_sets_unit(self, factory, unit):
        n = factory(2.0)
        assert n.unit is unit
        assert n.value == 2.0

    def test_default_unit_is_user_unit(self):
        assert Number(4).unit is Unit.NUM

    def test_unit_suffixes(self):
        assert [u.value for u in Unit] == ["", "px", "em", "%", "pc", "mm", "cm", "pt", "in"]

    def test_suffix_string_coerced_to_unit(self):
        n = Number(2.0, "px")
        assert n.unit is Unit.PX
        assert n == Number.px(2)

    def test_unknown_suffix_rejected(self):
        with pytest.raises(ValueError):
            Number(1.0, "furlong")


class TestNumberImmutability:
    def test_number_is_frozen(self):
        n = Number.px(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            n.unit = Unit.EM  # type: ignore[misc]

    def test_map_returns_new_number(self):
        n = Number.mm(2)
        doubled = n.map(lambda v: v * 2)
        assert doubled == Number.mm(4)
        assert n == Number.mm(2)

    def test_map_number_keeps_unit(self):
        assert map_number(abs, Number.em(-1.5)) == Number.em(1.5)


class TestNumberKinds:
    def test_relative_units(self):
        assert Number.em(1).is_relative
        assert Number.percent(0.5).is_relative
        assert not Number.px(1).is_relative
        assert not Number.inches(1).is_relative

    def test_physical_units(self):
        assert Number.cm(1).is_physical
        assert Number.point(1).is_physical
        assert not Number.px(1).is_physical
        assert not Number.num(1).is_physical


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class TestRgba:
    def test_default_alpha_opaque(self):
        assert Rgba(1, 2, 3).a == 255

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
    def test_out_of_range_channel(self, channels):
        with pytest.raises(ValueError, match="out of range"):
            Rgba(*channels)


class TestDeclaration:
    def test_of_builds_single_group(self):
        decl = CssDeclaration.of("fill", CssIdent("none"))
        assert decl.values == ((CssIdent("none"),),)

    def test_lists_are_frozen_to_tuples(self):
        decl = CssDeclaration("font-family", [[CssIdent("a"), CssOpComma()], [CssIdent("b")]])
        assert decl.values == ((CssIdent("a"), CssOpComma()), (CssIdent("b"),))
        hash(decl)

    def test_elements_flatten_groups(self):
        decl = CssDeclaration.grouped("x", [[CssIdent("a")], [CssIdent("b"), CssIdent("c")]])
        assert list(decl.elements()) == [CssIdent("a"), CssIdent("b"), CssIdent("c")]

    def test_function_args_frozen(self):
        fn = CssFunction("rgb", [CssNumber(Number.num(1))])
        assert fn.args == (CssNumber(Number.num(1)),)

    def test_separators_compare_equal(self):
        assert CssOpComma() == CssOpComma()


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelectorModel:
    def test_all_of_freezes_descriptors(self):
        sel = AllOf([OfName("rect"), OfClass("a")])
        assert sel.descriptors == (OfName("rect"), OfClass("a"))
        assert sel == AllOf((OfName("rect"), OfClass("a")))

    def test_rule_freezes_nested_sequences(self):
        rule = CssRule(selectors=[[AllOf([OfName("g")])]], declarations=[])
        assert rule.selectors == ((AllOf((OfName("g"),)),),)
        assert rule.declarations == ()
        hash(rule)
