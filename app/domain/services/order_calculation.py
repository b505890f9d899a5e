# app/domain/services/order_calculation.py
"""
Order / invoice aggregation.

All prices (items and delivery) are GST-inclusive. For each line the unit
price is broken down with ``calculate_gst_breakdown`` and scaled by the
quantity; delivery is a single charge for the whole order. Totals are
summed from the unrounded figures and every reported field is rounded
once, to the nearest rupee (halves away from zero).

Intra-state CGST and SGST are reported as half of the rounded GST, so they
are always equal and always add up to the GST total even when that total
is an odd number of rupees.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from app.domain.models.gst import (
    AddressPair,
    DeliveryBreakdown,
    DeliveryCharge,
    GstTypeInfo,
    InvoiceTotals,
    LineItem,
    LineItemBreakdown,
    OrderCalculation,
)
from app.domain.services.amount_words import convert_amount_to_words
from app.domain.services.gst_breakdown import calculate_gst_breakdown
from app.domain.services.gst_jurisdiction import resolve_gst_type
from app.domain.services.gst_math import round_rupee

logger = logging.getLogger("order_calculation")


def _rounded_heads(gst: float, is_same_state: bool) -> tuple[float, float, float, float]:
    """Round a GST amount and split it: (total, cgst, sgst, igst)."""
    total = round_rupee(gst)
    if is_same_state:
        half = total / 2
        return total, half, half, 0.0
    return total, 0.0, 0.0, total


def _line_item(item: LineItem, is_same_state: bool) -> LineItemBreakdown:
    unit = calculate_gst_breakdown(item.inclusive_price, item.gst_rate, is_same_state)
    gst, cgst, sgst, igst = _rounded_heads(unit.total_gst * item.quantity, is_same_state)
    return LineItemBreakdown(
        product_id=item.product_id,
        name=item.name,
        hsn_code=item.hsn_code,
        quantity=item.quantity,
        inclusive_price=item.inclusive_price,
        gst_rate=item.gst_rate,
        mrp=item.mrp,
        discount=item.discount,
        unit=unit,
        line_taxable_value=round_rupee(unit.taxable_value * item.quantity),
        line_gst_amount=gst,
        line_cgst=cgst,
        line_sgst=sgst,
        line_igst=igst,
        line_total=round_rupee(item.inclusive_price * item.quantity),
    )


def _delivery(delivery: DeliveryCharge, is_same_state: bool) -> DeliveryBreakdown:
    breakdown = calculate_gst_breakdown(delivery.inclusive_charges, delivery.gst_rate, is_same_state)
    gst, cgst, sgst, igst = _rounded_heads(breakdown.total_gst, is_same_state)
    return DeliveryBreakdown(
        inclusive_charges=delivery.inclusive_charges,
        gst_rate=delivery.gst_rate,
        breakdown=breakdown,
        taxable_value=round_rupee(breakdown.taxable_value),
        gst_amount=gst,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
    )


def calculate_invoice_totals(
    items: Sequence[LineItem],
    delivery: DeliveryCharge,
    is_same_state: bool,
    gst_info: Optional[GstTypeInfo] = None,
) -> OrderCalculation:
    """Aggregate line items and delivery into invoice totals.

    ``is_same_state`` comes from the jurisdiction resolver; pass False when
    it could not be determined. Zero, negative or fractional quantities and
    prices are computed as given, never rejected.
    """
    lines = [_line_item(item, is_same_state) for item in items]
    delivery_bd = _delivery(delivery, is_same_state)

    items_subtotal = sum(item.inclusive_price * item.quantity for item in items)
    taxable = sum(line.unit.taxable_value * line.quantity for line in lines)
    gst = sum(line.unit.total_gst * line.quantity for line in lines)

    taxable += delivery_bd.breakdown.taxable_value
    gst += delivery_bd.breakdown.total_gst

    total_gst, total_cgst, total_sgst, total_igst = _rounded_heads(gst, is_same_state)
    grand_total = round_rupee(items_subtotal + delivery.inclusive_charges)

    totals = InvoiceTotals(
        items_subtotal=round_rupee(items_subtotal),
        delivery_charges=round_rupee(delivery.inclusive_charges),
        total_taxable_value=round_rupee(taxable),
        total_cgst=total_cgst,
        total_sgst=total_sgst,
        total_igst=total_igst,
        total_gst=total_gst,
        grand_total=grand_total,
        amount_in_words=convert_amount_to_words(grand_total),
        cgst_rate=delivery.gst_rate / 2 if is_same_state else 0.0,
        sgst_rate=delivery.gst_rate / 2 if is_same_state else 0.0,
        igst_rate=0.0 if is_same_state else delivery.gst_rate,
    )

    logger.debug(
        "Invoice totals: lines=%d, taxable=%.2f, gst=%.2f (%s), grand_total=%.2f",
        len(lines),
        totals.total_taxable_value,
        totals.total_gst,
        "CGST+SGST" if is_same_state else "IGST",
        totals.grand_total,
    )

    return OrderCalculation(
        items=lines,
        delivery=delivery_bd,
        totals=totals,
        is_same_state=is_same_state,
        gst_info=gst_info,
    )


def calculate_order(
    items: Sequence[LineItem],
    delivery: DeliveryCharge,
    address: AddressPair,
) -> OrderCalculation:
    """Resolve the seller/buyer jurisdiction, then aggregate the order."""
    gst_info = resolve_gst_type(address)
    return calculate_invoice_totals(items, delivery, gst_info.is_same_state, gst_info=gst_info)


def format_for_storage(calculation: OrderCalculation) -> dict[str, Any]:
    """Flatten a calculation into order-level and item-level field dicts."""
    totals = calculation.totals
    delivery = calculation.delivery
    info = calculation.gst_info

    order_fields = {
        "total": totals.grand_total,
        "delivery_taxable_value": delivery.taxable_value,
        "delivery_gst_amount": delivery.gst_amount,
        "delivery_cgst_amount": delivery.cgst,
        "delivery_sgst_amount": delivery.sgst,
        "delivery_igst_amount": delivery.igst,
        "delivery_gst_rate": delivery.gst_rate,
        "total_taxable_value": totals.total_taxable_value,
        "total_cgst": totals.total_cgst,
        "total_sgst": totals.total_sgst,
        "total_igst": totals.total_igst,
        "is_same_state": calculation.is_same_state,
        "place_of_supply": info.place_of_supply if info else None,
        "seller_state": info.seller_state if info else None,
        "buyer_state": info.buyer_state if info else None,
        "amount_in_words": totals.amount_in_words,
    }

    items_fields = [
        {
            "product_id": line.product_id,
            "quantity": line.quantity,
            "price": line.inclusive_price,
            "taxable_value": line.line_taxable_value,
            "gst_amount": line.line_gst_amount,
            "cgst_amount": line.line_cgst,
            "sgst_amount": line.line_sgst,
            "igst_amount": line.line_igst,
            "gst_rate": line.gst_rate,
            "cgst_rate": line.unit.cgst_rate,
            "sgst_rate": line.unit.sgst_rate,
            "igst_rate": line.unit.igst_rate,
            "hsn_code": line.hsn_code,
        }
        for line in calculation.items
    ]

    return {"order_fields": order_fields, "items_fields": items_fields}
