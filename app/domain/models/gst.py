# app/domain/models/gst.py
"""
Value types for GST breakdown and invoice aggregation.

Every record is frozen: a calculation never mutates its inputs, it builds
new records from them.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

GstType = Literal["CGST_SGST", "IGST"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class GstBreakdown(_Frozen):
    """GST split of a single inclusive price. Fractional, never rounded."""

    taxable_value: float
    gst_rate: float
    total_gst: float
    cgst: float = 0.0
    cgst_rate: float = 0.0
    sgst: float = 0.0
    sgst_rate: float = 0.0
    igst: float = 0.0
    igst_rate: float = 0.0
    total: float
    is_same_state: bool


class GstDetails(_Frozen):
    base_price: float
    gst_rate: float
    gst_amount: float
    total_price: float


class TaxComponent(_Frozen):
    tax_name: Literal["CGST", "SGST", "IGST"]
    tax_rate: float
    tax_amount: float


# ---------------------------------------------------------------------------
# Aggregator inputs
# ---------------------------------------------------------------------------

class LineItem(_Frozen):
    product_id: int
    name: str
    hsn_code: Optional[str] = None
    quantity: float = Field(default=1, description="Units ordered")
    inclusive_price: float = Field(..., description="GST-inclusive unit price")
    gst_rate: float
    mrp: Optional[float] = None
    discount: Optional[float] = None


class DeliveryCharge(_Frozen):
    inclusive_charges: float = 0.0
    gst_rate: float = 0.0


class AddressPair(_Frozen):
    seller_pincode: str = ""
    seller_state: Optional[str] = None
    buyer_pincode: str = ""
    buyer_state: Optional[str] = None


class GstTypeInfo(_Frozen):
    """Jurisdiction decision for one seller/buyer pair."""

    is_same_state: bool
    gst_type: GstType
    seller_state: Optional[str] = None
    buyer_state: Optional[str] = None
    place_of_supply: Optional[str] = None


# ---------------------------------------------------------------------------
# Aggregator outputs
# ---------------------------------------------------------------------------

class LineItemBreakdown(_Frozen):
    """A line item with its per-unit breakdown and rounded line figures."""

    product_id: int
    name: str
    hsn_code: Optional[str] = None
    quantity: float
    inclusive_price: float
    gst_rate: float
    mrp: Optional[float] = None
    discount: Optional[float] = None

    unit: GstBreakdown

    line_taxable_value: float
    line_gst_amount: float
    line_cgst: float
    line_sgst: float
    line_igst: float
    line_total: float


class DeliveryBreakdown(_Frozen):
    inclusive_charges: float
    gst_rate: float
    breakdown: GstBreakdown
    taxable_value: float
    gst_amount: float
    cgst: float
    sgst: float
    igst: float


class InvoiceTotals(_Frozen):
    items_subtotal: float
    delivery_charges: float
    total_taxable_value: float
    total_cgst: float
    total_sgst: float
    total_igst: float
    total_gst: float
    grand_total: float
    amount_in_words: str
    # Rates quoted on the summary row follow the delivery rate
    cgst_rate: float = 0.0
    sgst_rate: float = 0.0
    igst_rate: float = 0.0


class OrderCalculation(_Frozen):
    items: list[LineItemBreakdown] = Field(default_factory=list)
    delivery: DeliveryBreakdown
    totals: InvoiceTotals
    is_same_state: bool
    gst_info: Optional[GstTypeInfo] = None
