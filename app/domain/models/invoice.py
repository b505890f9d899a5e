# app/domain/models/invoice.py
"""
Tax-invoice snapshot records.

``OrderSnapshot`` is what the order store hands over; ``TaxInvoice`` is what
the renderer receives. Both are plain data, frozen once built.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.domain.models.gst import TaxComponent


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

class OrderLine(_Frozen):
    product_id: Optional[int] = None
    product_name: str
    price: float = Field(..., description="GST-inclusive unit price paid")
    quantity: float = 1
    gst_rate: Optional[float] = None
    mrp: Optional[float] = None
    hsn_code: Optional[str] = None
    sku: Optional[str] = None


class OrderSnapshot(_Frozen):
    order_id: int
    order_date: date
    order_total: float = Field(..., description="Amount charged, delivery included")
    items: list[OrderLine] = Field(default_factory=list)
    # dict, or the JSON string the order store keeps
    shipping_details: Union[dict[str, Any], str, None] = None
    buyer_name: Optional[str] = None


class SellerInfo(_Frozen):
    business_name: str
    address: str
    gstin: str
    pincode: str
    state: Optional[str] = None


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

class InvoiceOrderInfo(_Frozen):
    id: int
    order_number: str
    order_date: str
    invoice_number: str
    invoice_date: str


class BuyerInfo(_Frozen):
    name: str
    billing_address: str
    shipping_address: str
    pincode: str
    state: str


class InvoiceItem(_Frozen):
    sr_no: int
    description: str
    hsn_code: str
    quantity: float
    mrp: float
    discount: float
    taxable_value: float
    tax_components: list[TaxComponent] = Field(default_factory=list)
    total: float


class InvoiceDelivery(_Frozen):
    charges: float
    taxable_value: float
    gst_amount: float
    tax_components: list[TaxComponent] = Field(default_factory=list)


class TaxInvoiceTotals(_Frozen):
    total_gross_amount: float
    total_discount: float
    total_taxable_value: float
    total_tax_amount: float
    grand_total: float
    amount_in_words: str


class TaxInvoiceGstInfo(_Frozen):
    is_same_state: bool
    gst_type: str
    place_of_supply: str


class TaxInvoice(_Frozen):
    order: InvoiceOrderInfo
    seller: SellerInfo
    buyer: BuyerInfo
    items: list[InvoiceItem] = Field(default_factory=list)
    delivery: InvoiceDelivery
    totals: TaxInvoiceTotals
    gst_info: TaxInvoiceGstInfo
