"""Tests for the notified GST rate set."""

import pytest

from app.domain.models.tax_rate_config import GSTRateConfig
from app.domain.services.tax_rate_defaults import default_gst_rates


class TestDefaultRates:

    def test_source(self):
        assert default_gst_rates().source == "hardcoded"

    def test_matches_config_defaults(self):
        assert default_gst_rates().valid_rates == GSTRateConfig().valid_rates

    @pytest.mark.parametrize("rate", [0, 0.1, 0.25, 3, 5, 12, 18, 28])
    def test_notified_rates_are_valid(self, rate):
        assert default_gst_rates().is_valid_rate(rate)

    @pytest.mark.parametrize("rate", [2, 10, 17.99, 30, -18])
    def test_other_rates_are_not(self, rate):
        assert not default_gst_rates().is_valid_rate(rate)

    def test_float_noise_tolerated(self):
        assert default_gst_rates().is_valid_rate(0.1 + 0.2 - 0.2)
