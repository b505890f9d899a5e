# app/api/v1/schemas/invoices.py
"""Request schemas for invoice calculation endpoints.

The domain services compute whatever they are given; the range checks on
quantities, prices and rates live here, at the HTTP boundary.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from app.domain.models.gst import AddressPair, DeliveryCharge, LineItem
from app.domain.models.invoice import OrderLine, OrderSnapshot


class LineItemIn(BaseModel):
    """One order line at its GST-inclusive unit price."""

    product_id: int
    name: str = Field(min_length=1, max_length=255)
    hsn_code: str | None = Field(default=None, max_length=8)
    quantity: int = Field(gt=0)
    inclusive_price: float = Field(ge=0)
    gst_rate: float = Field(ge=0, le=100)
    mrp: float | None = Field(default=None, ge=0)
    discount: float | None = Field(default=None, ge=0)

    def to_domain(self) -> LineItem:
        return LineItem(**self.model_dump())


class DeliveryIn(BaseModel):
    inclusive_charges: float = Field(default=0, ge=0)
    gst_rate: float = Field(default=0, ge=0, le=100)

    def to_domain(self) -> DeliveryCharge:
        return DeliveryCharge(**self.model_dump())


class AddressIn(BaseModel):
    seller_pincode: str = Field(default="", max_length=10)
    seller_state: str | None = Field(default=None, max_length=64)
    buyer_pincode: str = Field(default="", max_length=10)
    buyer_state: str | None = Field(default=None, max_length=64)

    def to_domain(self) -> AddressPair:
        return AddressPair(**self.model_dump())


class CalculateInvoiceRequest(BaseModel):
    """Compute invoice totals.

    Pass ``address`` to let the server decide CGST+SGST vs IGST, or
    ``is_same_state`` if the caller already knows. With neither, IGST.
    """

    items: list[LineItemIn] = Field(min_length=1)
    delivery: DeliveryIn = Field(default_factory=DeliveryIn)
    is_same_state: bool | None = None
    address: AddressIn | None = None


class OrderLineIn(BaseModel):
    product_id: int | None = None
    product_name: str = Field(min_length=1, max_length=255)
    price: float = Field(ge=0)
    quantity: int = Field(gt=0)
    gst_rate: float | None = Field(default=None, ge=0, le=100)
    mrp: float | None = Field(default=None, ge=0)
    hsn_code: str | None = Field(default=None, max_length=8)
    sku: str | None = Field(default=None, max_length=64)


class TaxInvoiceRequest(BaseModel):
    """Build a tax invoice from an order snapshot."""

    order_id: int
    order_date: date
    order_total: float = Field(ge=0)
    items: list[OrderLineIn] = Field(min_length=1)
    shipping_details: dict[str, Any] | str | None = None
    buyer_name: str | None = None
    delivery_gst_rate: float | None = Field(default=None, ge=0, le=100)
    invoice_date: date | None = None

    def to_domain(self) -> OrderSnapshot:
        return OrderSnapshot(
            order_id=self.order_id,
            order_date=self.order_date,
            order_total=self.order_total,
            items=[OrderLine(**line.model_dump()) for line in self.items],
            shipping_details=self.shipping_details,
            buyer_name=self.buyer_name,
        )
