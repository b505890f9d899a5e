"""Tests for the CGST/SGST vs IGST breakdown."""

import math

import pytest
from pydantic import ValidationError

from app.domain.services.gst_breakdown import calculate_gst_breakdown, tax_components


class TestIntraState:

    def test_118_at_18(self):
        bd = calculate_gst_breakdown(118, 18, True)
        assert bd.taxable_value == pytest.approx(100)
        assert bd.total_gst == pytest.approx(18)
        assert bd.cgst == pytest.approx(9)
        assert bd.sgst == pytest.approx(9)
        assert bd.igst == 0
        assert bd.cgst_rate == bd.sgst_rate == 9
        assert bd.igst_rate == 0
        assert bd.total == 118
        assert bd.is_same_state is True

    def test_halves_are_equal(self):
        bd = calculate_gst_breakdown(99.99, 12, True)
        assert bd.cgst == bd.sgst == bd.total_gst / 2


class TestInterState:

    def test_118_at_18(self):
        bd = calculate_gst_breakdown(118, 18, False)
        assert bd.igst == pytest.approx(18)
        assert bd.cgst == 0
        assert bd.sgst == 0
        assert bd.igst_rate == 18
        assert bd.cgst_rate == bd.sgst_rate == 0
        assert bd.is_same_state is False

    def test_default_is_inter_state(self):
        bd = calculate_gst_breakdown(118, 18)
        assert bd.is_same_state is False
        assert bd.igst == pytest.approx(18)


class TestInvariants:

    @pytest.mark.parametrize("same_state", [True, False])
    @pytest.mark.parametrize("price,rate", [(118, 18), (1, 5), (99.99, 12), (1280, 28), (10.5, 3), (7, 0.25)])
    def test_split_invariant(self, price, rate, same_state):
        bd = calculate_gst_breakdown(price, rate, same_state)
        assert abs(bd.cgst + bd.sgst + bd.igst - bd.total_gst) < 1e-9
        assert bd.taxable_value + bd.total_gst == pytest.approx(price)
        if same_state:
            assert bd.cgst > 0 and bd.sgst > 0 and bd.igst == 0
        else:
            assert bd.igst > 0 and bd.cgst == 0 and bd.sgst == 0

    @pytest.mark.parametrize("same_state", [True, False])
    @pytest.mark.parametrize("price", [0, 1, 59, 12345.67])
    def test_zero_rate(self, price, same_state):
        bd = calculate_gst_breakdown(price, 0, same_state)
        assert bd.taxable_value == price
        assert bd.total_gst == 0
        assert bd.cgst == bd.sgst == bd.igst == 0

    def test_negative_price_does_not_raise(self):
        bd = calculate_gst_breakdown(-118, 18, True)
        assert bd.taxable_value == pytest.approx(-100)
        assert bd.cgst == pytest.approx(-9)

    @pytest.mark.parametrize("same_state", [True, False])
    def test_minus_hundred_rate_does_not_raise(self, same_state):
        bd = calculate_gst_breakdown(100, -100, same_state)
        assert not math.isfinite(bd.taxable_value)
        assert not math.isfinite(bd.total_gst)
        assert bd.total == 100

    def test_breakdown_is_immutable(self):
        bd = calculate_gst_breakdown(118, 18, True)
        with pytest.raises(ValidationError):
            bd.cgst = 0


class TestTaxComponents:

    def test_intra_state_components(self):
        bd = calculate_gst_breakdown(118, 18, True)
        comps = tax_components(bd, quantity=3)
        assert [c.tax_name for c in comps] == ["CGST", "SGST"]
        assert [c.tax_rate for c in comps] == [9, 9]
        assert [c.tax_amount for c in comps] == [27.0, 27.0]

    def test_inter_state_component(self):
        bd = calculate_gst_breakdown(59, 5, False)
        comps = tax_components(bd)
        assert len(comps) == 1
        assert comps[0].tax_name == "IGST"
        assert comps[0].tax_rate == 5
        assert comps[0].tax_amount == 2.81
