# app/domain/services/invoice_service.py
"""
Tax invoice builder.

Turns an order snapshot (items at the GST-inclusive price actually paid,
plus the order total) into the record the invoice renderer consumes:
per-item taxable value and CGST/SGST or IGST columns, delivery tax,
totals and the amount in words.

Delivery is not stored on the order; it is whatever the order total holds
beyond the item prices. A negative difference means the order record is
inconsistent upstream; it is logged and computed as is.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Optional

from app.config.settings import settings
from app.domain.models.gst import AddressPair
from app.domain.models.invoice import (
    BuyerInfo,
    InvoiceDelivery,
    InvoiceItem,
    InvoiceOrderInfo,
    OrderSnapshot,
    SellerInfo,
    TaxInvoice,
    TaxInvoiceGstInfo,
    TaxInvoiceTotals,
)
from app.domain.services.amount_words import convert_amount_to_words
from app.domain.services.gst_breakdown import calculate_gst_breakdown, tax_components
from app.domain.services.gst_jurisdiction import resolve_gst_type, state_from_gstin
from app.domain.services.gst_math import round_paise, round_rupee
from app.domain.services.tax_rate_defaults import default_gst_rates

logger = logging.getLogger("invoice_service")

DEFAULT_BUYER_PINCODE = "000000"
DEFAULT_HSN_CODE = "0000"


def default_seller() -> SellerInfo:
    """Seller block built from settings."""
    return SellerInfo(
        business_name=settings.SELLER_BUSINESS_NAME,
        address=settings.SELLER_ADDRESS,
        gstin=settings.SELLER_GSTIN,
        pincode=settings.SELLER_PINCODE,
        state=settings.SELLER_STATE,
    )


def parse_shipping_details(raw: Any) -> dict[str, Any]:
    """Shipping details as a dict. Bad JSON is logged and treated as empty."""
    if not raw:
        return {}
    if isinstance(raw, dict):
        return raw
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        logger.error("invoice_service: unparseable shipping details: %r", raw)
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def _address_line(shipping: dict[str, Any]) -> str:
    return ", ".join(
        str(shipping.get(key) or "")
        for key in ("address", "city", "state", "zipCode")
    )


def build_tax_invoice(
    order: OrderSnapshot,
    seller: Optional[SellerInfo] = None,
    delivery_gst_rate: Optional[float] = None,
    default_gst_rate: Optional[float] = None,
    invoice_date: Optional[date] = None,
) -> TaxInvoice:
    """Build the tax invoice record for one order."""
    seller = seller or default_seller()
    if delivery_gst_rate is None:
        delivery_gst_rate = settings.DEFAULT_DELIVERY_GST_RATE
    if default_gst_rate is None:
        default_gst_rate = settings.DEFAULT_PRODUCT_GST_RATE
    invoice_date = invoice_date or date.today()

    shipping = parse_shipping_details(order.shipping_details)
    buyer_pincode = str(
        shipping.get("zipCode") or shipping.get("pincode") or DEFAULT_BUYER_PINCODE
    )

    gst_info = resolve_gst_type(
        AddressPair(
            seller_pincode=seller.pincode,
            seller_state=seller.state or state_from_gstin(seller.gstin),
            buyer_pincode=buyer_pincode,
            buyer_state=shipping.get("state"),
        )
    )
    is_same_state = gst_info.is_same_state

    items_total = sum(line.price * line.quantity for line in order.items)
    delivery_charges = order.order_total - items_total
    if delivery_charges < 0:
        logger.warning(
            "invoice_service: order %s total %.2f is below its items total %.2f",
            order.order_id, order.order_total, items_total,
        )

    rate_config = default_gst_rates()
    items: list[InvoiceItem] = []
    taxable_sum = 0.0
    tax_sum = 0.0
    for index, line in enumerate(order.items):
        gst_rate = default_gst_rate if line.gst_rate is None else line.gst_rate
        if not rate_config.is_valid_rate(gst_rate):
            logger.warning(
                "invoice_service: order %s item %r has non-standard GST rate %s%%",
                order.order_id, line.product_name, gst_rate,
            )

        mrp = line.mrp or line.price
        breakdown = calculate_gst_breakdown(line.price, gst_rate, is_same_state)
        taxable_sum += breakdown.taxable_value * line.quantity
        tax_sum += breakdown.total_gst * line.quantity

        items.append(
            InvoiceItem(
                sr_no=index + 1,
                description=line.product_name,
                hsn_code=line.hsn_code or line.sku or DEFAULT_HSN_CODE,
                quantity=line.quantity,
                mrp=round_rupee(mrp * line.quantity),
                discount=round_rupee((mrp - line.price) * line.quantity),
                taxable_value=round_paise(breakdown.taxable_value * line.quantity),
                tax_components=tax_components(breakdown, line.quantity),
                total=round_rupee(line.price * line.quantity),
            )
        )

    delivery_breakdown = calculate_gst_breakdown(delivery_charges, delivery_gst_rate, is_same_state)
    delivery_components = tax_components(delivery_breakdown) if delivery_charges > 0 else []
    delivery = InvoiceDelivery(
        charges=delivery_charges,
        taxable_value=round_paise(delivery_breakdown.taxable_value),
        gst_amount=round_paise(delivery_breakdown.total_gst),
        tax_components=delivery_components,
    )

    # Totals come from the unrounded figures so that taxable value plus tax
    # stays within a paisa of the grand total; column sums may drift further.
    taxable_sum += delivery_breakdown.taxable_value
    tax_sum += delivery_breakdown.total_gst

    totals = TaxInvoiceTotals(
        total_gross_amount=sum(item.mrp for item in items),
        total_discount=sum(item.discount for item in items),
        total_taxable_value=round_paise(taxable_sum),
        total_tax_amount=round_paise(tax_sum),
        grand_total=order.order_total,
        amount_in_words=convert_amount_to_words(order.order_total),
    )

    buyer_address = _address_line(shipping)
    buyer = BuyerInfo(
        name=shipping.get("name") or order.buyer_name or "Customer",
        billing_address=buyer_address,
        shipping_address=buyer_address,
        pincode=buyer_pincode,
        state=gst_info.buyer_state or "Unknown",
    )

    logger.info(
        "Tax invoice built: order=%s, items=%d, taxable=%.2f, tax=%.2f, total=%.2f (%s)",
        order.order_id, len(items), totals.total_taxable_value,
        totals.total_tax_amount, totals.grand_total, gst_info.gst_type,
    )

    return TaxInvoice(
        order=InvoiceOrderInfo(
            id=order.order_id,
            order_number=f"ORD-{order.order_id}",
            order_date=_format_date(order.order_date),
            invoice_number=f"INV-{order.order_id}",
            invoice_date=_format_date(invoice_date),
        ),
        seller=seller,
        buyer=buyer,
        items=items,
        delivery=delivery,
        totals=totals,
        gst_info=TaxInvoiceGstInfo(
            is_same_state=is_same_state,
            gst_type=gst_info.gst_type,
            place_of_supply=gst_info.place_of_supply or gst_info.buyer_state or "Unknown",
        ),
    )
