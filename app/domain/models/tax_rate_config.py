# app/domain/models/tax_rate_config.py
"""
GST rate configuration.

GSTRateConfig: set of GST rates notified for goods/services. The breakdown
math accepts any rate; this set only decides which rates are worth a
warning on an invoice.
"""

from __future__ import annotations

from dataclasses import dataclass, field

_NOTIFIED_RATES = [0, 0.1, 0.25, 1.5, 3, 5, 6, 7.5, 12, 14, 18, 28]


@dataclass
class GSTRateConfig:
    """Valid GST rate set for anomaly detection / validation."""

    valid_rates: set[float] = field(default_factory=lambda: set(_NOTIFIED_RATES))
    source: str = "hardcoded"

    def is_valid_rate(self, rate: float) -> bool:
        return any(abs(rate - valid) < 1e-9 for valid in self.valid_rates)
