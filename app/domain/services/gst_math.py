# app/domain/services/gst_math.py
"""
GST arithmetic on a single (price, rate) pair.

Rates are percentages (18 means 18%). Nothing here rounds unless the
function name says so, and nothing here validates: a NaN price yields a
NaN result. Only the ``format_*`` display helpers guard against bad input.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from app.domain.models.gst import GstDetails

_RUPEE = Decimal("1")
_PAISE = Decimal("0.01")


def gst_amount_from_exclusive(base_price: float, rate: float) -> float:
    """GST payable on a price that does not yet include it."""
    return base_price * rate / 100


def base_price_from_inclusive(inclusive_price: float, rate: float) -> float:
    """Taxable value contained in a GST-inclusive price.

    A rate of -100 has no taxable value: the result is signed infinity,
    or NaN for a zero price.
    """
    divisor = 1 + rate / 100
    if divisor == 0:
        if inclusive_price == 0 or math.isnan(inclusive_price):
            return math.nan
        return math.copysign(math.inf, inclusive_price)
    return inclusive_price / divisor


def gst_amount_from_inclusive(inclusive_price: float, rate: float) -> float:
    """GST contained in a GST-inclusive price."""
    return inclusive_price - base_price_from_inclusive(inclusive_price, rate)


def inclusive_from_exclusive(base_price: float, rate: float) -> float:
    """Price after adding GST to a base price."""
    return base_price + gst_amount_from_exclusive(base_price, rate)


def split_cgst_sgst(gst_amount: float) -> tuple[float, float]:
    """Split an intra-state GST amount into equal (CGST, SGST) halves."""
    half = gst_amount / 2
    return half, half


def gst_details(base_price: float, rate: float) -> GstDetails:
    gst_amount = gst_amount_from_exclusive(base_price, rate)
    return GstDetails(
        base_price=base_price,
        gst_rate=rate,
        gst_amount=gst_amount,
        total_price=base_price + gst_amount,
    )


def gst_details_from_inclusive(inclusive_price: float, rate: float) -> GstDetails:
    base_price = base_price_from_inclusive(inclusive_price, rate)
    return GstDetails(
        base_price=base_price,
        gst_rate=rate,
        gst_amount=inclusive_price - base_price,
        total_price=inclusive_price,
    )


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def quantize_half_up(value: Decimal, step: Decimal) -> Decimal:
    """Quantize with enough precision for any magnitude, halves away from zero."""
    digits = max(value.adjusted(), 0) - step.as_tuple().exponent + 2
    return value.quantize(step, rounding=ROUND_HALF_UP, context=Context(prec=max(28, digits)))


def _round(value: float, step: Decimal) -> float:
    if not math.isfinite(value):
        return value
    # str() gives the shortest repr, so 2.675 rounds as written, not as stored
    return float(quantize_half_up(Decimal(str(value)), step))


def round_rupee(value: float) -> float:
    """Round to the nearest whole rupee, halves away from zero."""
    return _round(value, _RUPEE)


def round_paise(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    return _round(value, _PAISE)


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------

def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _format_rate(rate: Any) -> str:
    if not _is_number(rate):
        return "0"
    return f"{rate:g}"


def _zero_breakdown(rate: Any) -> str:
    return f"₹0.00 (₹0.00 + ₹0.00 GST @ {_format_rate(rate)}%)"


def format_price_with_gst_breakdown(base_price: Any, rate: Any) -> str:
    """``"₹118.00 (₹100.00 + ₹18.00 GST @ 18%)"`` for an exclusive price."""
    if not _is_number(base_price) or not _is_number(rate):
        return _zero_breakdown(rate)

    gst_amount = gst_amount_from_exclusive(base_price, rate)
    total = base_price + gst_amount
    return (
        f"₹{round_paise(total):.2f} (₹{round_paise(base_price):.2f} + "
        f"₹{round_paise(gst_amount):.2f} GST @ {_format_rate(rate)}%)"
    )


def format_gst_inclusive_price_breakdown(inclusive_price: Any, rate: Any) -> str:
    """Same display as :func:`format_price_with_gst_breakdown` for an inclusive price."""
    if not _is_number(inclusive_price) or not _is_number(rate):
        return _zero_breakdown(rate)

    base_price = base_price_from_inclusive(inclusive_price, rate)
    gst_amount = inclusive_price - base_price
    return (
        f"₹{round_paise(inclusive_price):.2f} (₹{round_paise(base_price):.2f} + "
        f"₹{round_paise(gst_amount):.2f} GST @ {_format_rate(rate)}%)"
    )
