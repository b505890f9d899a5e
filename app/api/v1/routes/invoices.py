# app/api/v1/routes/invoices.py
"""
Invoice calculation endpoints: GST breakdown, order totals, tax invoice
data and amount in words.

Stateless: nothing is read from or written to storage here.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from app.api.v1.envelope import ok
from app.api.v1.schemas.invoices import CalculateInvoiceRequest, TaxInvoiceRequest
from app.domain.services.amount_words import convert_amount_to_words
from app.domain.services.gst_breakdown import calculate_gst_breakdown
from app.domain.services.invoice_service import build_tax_invoice
from app.domain.services.order_calculation import calculate_invoice_totals, calculate_order

logger = logging.getLogger("api.v1.invoices")

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get("/gst-breakdown", response_model=dict)
async def gst_breakdown(
    price: float = Query(..., ge=0, description="GST-inclusive price"),
    rate: float = Query(..., ge=0, le=100, description="GST rate in percent"),
    same_state: bool = Query(default=False, description="Seller and buyer in the same state"),
):
    """Split an inclusive price into taxable value and CGST/SGST or IGST."""
    breakdown = calculate_gst_breakdown(price, rate, same_state)
    return ok(data=breakdown.model_dump())


@router.get("/amount-in-words", response_model=dict)
async def amount_in_words(
    amount: float = Query(..., ge=0, description="Amount in rupees"),
):
    """Spell a rupee amount in Indian-English words."""
    return ok(data={"amount": amount, "words": convert_amount_to_words(amount)})


@router.post("/calculate", response_model=dict)
async def calculate_invoice(body: CalculateInvoiceRequest):
    """
    Compute line-wise GST and invoice totals.

    ``address`` takes precedence over ``is_same_state``; with neither the
    order is treated as inter-state (IGST).
    """
    items = [item.to_domain() for item in body.items]
    delivery = body.delivery.to_domain()

    if body.address is not None:
        calculation = calculate_order(items, delivery, body.address.to_domain())
    else:
        if body.is_same_state is None:
            logger.info("calculate_invoice: no jurisdiction given, using IGST")
        calculation = calculate_invoice_totals(items, delivery, bool(body.is_same_state))

    return ok(data=calculation.model_dump())


@router.post("/tax-invoice", response_model=dict)
async def tax_invoice(body: TaxInvoiceRequest):
    """Build the tax-invoice record (seller, buyer, items, tax columns, totals)."""
    invoice = build_tax_invoice(
        body.to_domain(),
        delivery_gst_rate=body.delivery_gst_rate,
        invoice_date=body.invoice_date,
    )
    return ok(data=invoice.model_dump())
