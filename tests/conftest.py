"""Shared test fixtures for the GST invoice engine test suite."""

import pytest

from app.domain.models.gst import AddressPair, DeliveryCharge, LineItem
from app.domain.models.invoice import SellerInfo


@pytest.fixture
def two_line_items() -> list[LineItem]:
    """Two 18% items: 2 x 118 and 1 x 236 (GST-inclusive)."""
    return [
        LineItem(product_id=1, name="Steel Bottle", hsn_code="7323", quantity=2, inclusive_price=118, gst_rate=18),
        LineItem(product_id=2, name="Lunch Box", hsn_code="3924", quantity=1, inclusive_price=236, gst_rate=18),
    ]


@pytest.fixture
def delivery_59() -> DeliveryCharge:
    return DeliveryCharge(inclusive_charges=59, gst_rate=18)


@pytest.fixture
def mumbai_to_pune() -> AddressPair:
    return AddressPair(seller_pincode="400001", buyer_pincode="411001")


@pytest.fixture
def mumbai_to_bengaluru() -> AddressPair:
    return AddressPair(seller_pincode="400001", buyer_pincode="560001")


@pytest.fixture
def mumbai_seller() -> SellerInfo:
    return SellerInfo(
        business_name="LeLeKart",
        address="123 Commerce Street, Mumbai, Maharashtra, 400001",
        gstin="27AABCU9603R1ZX",
        pincode="400001",
        state="Maharashtra",
    )
