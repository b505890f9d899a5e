# app/domain/services/tax_rate_defaults.py
"""
Hardcoded GST rate fallback.

Used by the invoice builder to flag line items carrying a rate that is not
one of the notified GST rates.
"""

from __future__ import annotations

from app.domain.models.tax_rate_config import GSTRateConfig


def default_gst_rates() -> GSTRateConfig:
    """Return the hardcoded GST rate set."""
    return GSTRateConfig(source="hardcoded")
