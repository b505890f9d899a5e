# app/domain/services/gst_breakdown.py
"""
CGST/SGST vs IGST breakdown of a GST-inclusive price.

Intra-state supply: GST is split in half between CGST and SGST.
Inter-state supply: the whole GST is IGST.
When the caller cannot tell which applies it should pass
``is_same_state=False``; IGST is the safe default for an invoice.
"""

from __future__ import annotations

from app.domain.models.gst import GstBreakdown, TaxComponent
from app.domain.services.gst_math import base_price_from_inclusive, round_paise, split_cgst_sgst


def calculate_gst_breakdown(
    inclusive_price: float,
    gst_rate: float,
    is_same_state: bool = False,
) -> GstBreakdown:
    """Break an inclusive price into taxable value and GST components.

    Never raises for numeric input. A zero rate gives
    ``taxable_value == inclusive_price`` and all-zero tax.
    """
    taxable_value = base_price_from_inclusive(inclusive_price, gst_rate)
    total_gst = inclusive_price - taxable_value

    if is_same_state:
        cgst, sgst = split_cgst_sgst(total_gst)
        return GstBreakdown(
            taxable_value=taxable_value,
            gst_rate=gst_rate,
            total_gst=total_gst,
            cgst=cgst,
            cgst_rate=gst_rate / 2,
            sgst=sgst,
            sgst_rate=gst_rate / 2,
            total=inclusive_price,
            is_same_state=True,
        )

    return GstBreakdown(
        taxable_value=taxable_value,
        gst_rate=gst_rate,
        total_gst=total_gst,
        igst=total_gst,
        igst_rate=gst_rate,
        total=inclusive_price,
        is_same_state=False,
    )


def tax_components(breakdown: GstBreakdown, quantity: float = 1) -> list[TaxComponent]:
    """Invoice tax columns for a breakdown, scaled by quantity, rounded to paise."""
    if breakdown.is_same_state:
        return [
            TaxComponent(
                tax_name="CGST",
                tax_rate=breakdown.cgst_rate,
                tax_amount=round_paise(breakdown.cgst * quantity),
            ),
            TaxComponent(
                tax_name="SGST",
                tax_rate=breakdown.sgst_rate,
                tax_amount=round_paise(breakdown.sgst * quantity),
            ),
        ]
    return [
        TaxComponent(
            tax_name="IGST",
            tax_rate=breakdown.igst_rate,
            tax_amount=round_paise(breakdown.igst * quantity),
        ),
    ]
