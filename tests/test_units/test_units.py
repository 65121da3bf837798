"""Tests for user unit resolution."""

import pytest

from svgcss.model import Number, Unit
from svgcss.units import resolve_all, to_user_unit

DPIS = [72, 96, 300]


class TestPhysicalUnits:
    @pytest.mark.parametrize("dpi", DPIS)
    def test_inch_scales_by_dpi(self, dpi):
        assert to_user_unit(dpi, Number.inches(2)) == Number.num(2 * dpi)

    @pytest.mark.parametrize("dpi", DPIS)
    def test_six_picas_is_one_inch(self, dpi):
        assert to_user_unit(dpi, Number.pc(6)) == to_user_unit(dpi, Number.inches(1))

    @pytest.mark.parametrize("dpi", DPIS)
    def test_millimeters(self, dpi):
        assert to_user_unit(dpi, Number.mm(25.4)) == to_user_unit(dpi, Number.inches(1))

    @pytest.mark.parametrize("dpi", DPIS)
    def test_centimeters(self, dpi):
        assert to_user_unit(dpi, Number.cm(2.54)) == to_user_unit(dpi, Number.inches(1))

    @pytest.mark.parametrize("dpi", DPIS)
    def test_points(self, dpi):
        assert to_user_unit(dpi, Number.point(72)) == to_user_unit(dpi, Number.inches(1))

    def test_unit_given_as_suffix(self):
        assert to_user_unit(96, Number(1.0, "in")) == Number.num(96)

    def test_fractional_conversion(self):
        result = to_user_unit(96, Number.mm(10))
        assert result.unit is Unit.NUM
        assert result.value == pytest.approx(37.795275590551185)


class TestUserUnits:
    def test_user_unit_unchanged(self):
        n = Number.num(12.5)
        assert to_user_unit(96, n) is n

    def test_pixel_is_one_user_unit(self):
        assert to_user_unit(300, Number.px(3)) == Number.num(3)

    @pytest.mark.parametrize("dpi", DPIS)
    def test_resolution_is_idempotent(self, dpi):
        once = to_user_unit(dpi, Number.inches(1.5))
        assert to_user_unit(dpi, once) == once


class TestRelativeUnits:
    @pytest.mark.parametrize("dpi", DPIS)
    def test_em_preserved(self, dpi):
        assert to_user_unit(dpi, Number.em(1.2)) == Number.em(1.2)

    @pytest.mark.parametrize("dpi", DPIS)
    def test_percent_preserved(self, dpi):
        assert to_user_unit(dpi, Number.percent(0.3)) == Number.percent(0.3)


class TestResolveAll:
    def test_resolves_each_in_order(self):
        numbers = [Number.inches(1), Number.em(2), Number.px(4)]
        assert resolve_all(96, numbers) == [Number.num(96), Number.em(2), Number.num(4)]

    def test_empty(self):
        assert resolve_all(96, []) == []
