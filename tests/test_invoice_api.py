"""Tests for the /api/v1/invoices endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.v1 import v1_router

app = FastAPI()
app.include_router(v1_router)

ITEMS = [
    {"product_id": 1, "name": "Steel Bottle", "quantity": 2, "inclusive_price": 118, "gst_rate": 18},
    {"product_id": 2, "name": "Lunch Box", "quantity": 1, "inclusive_price": 236, "gst_rate": 18},
]
DELIVERY = {"inclusive_charges": 59, "gst_rate": 18}


@pytest.fixture
def client():
    return TestClient(app)


class TestGstBreakdown:

    def test_same_state(self, client):
        resp = client.get("/api/v1/invoices/gst-breakdown", params={"price": 118, "rate": 18, "same_state": True})
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["data"]["cgst"] == pytest.approx(9)
        assert body["data"]["igst"] == 0

    def test_default_inter_state(self, client):
        resp = client.get("/api/v1/invoices/gst-breakdown", params={"price": 118, "rate": 18})
        assert resp.json()["data"]["igst"] == pytest.approx(18)

    def test_negative_price_rejected(self, client):
        resp = client.get("/api/v1/invoices/gst-breakdown", params={"price": -1, "rate": 18})
        assert resp.status_code == 422


class TestAmountInWords:

    def test_words(self, client):
        resp = client.get("/api/v1/invoices/amount-in-words", params={"amount": 100.5})
        assert resp.json()["data"]["words"] == "One Hundred Rupees and Fifty Paise Only"


class TestCalculate:

    def test_with_flag(self, client):
        resp = client.post("/api/v1/invoices/calculate", json={"items": ITEMS, "delivery": DELIVERY, "is_same_state": True})
        assert resp.status_code == 200
        totals = resp.json()["data"]["totals"]
        assert totals["grand_total"] == 531
        assert totals["total_gst"] == 81
        assert totals["total_cgst"] == totals["total_sgst"] == 40.5

    def test_with_address(self, client):
        resp = client.post("/api/v1/invoices/calculate", json={
            "items": ITEMS,
            "delivery": DELIVERY,
            "address": {"seller_pincode": "400001", "buyer_pincode": "560001"},
        })
        data = resp.json()["data"]
        assert data["is_same_state"] is False
        assert data["gst_info"]["place_of_supply"] == "29-Karnataka"
        assert data["totals"]["total_igst"] == 81

    def test_no_jurisdiction_means_igst(self, client):
        resp = client.post("/api/v1/invoices/calculate", json={"items": ITEMS})
        data = resp.json()["data"]
        assert data["is_same_state"] is False
        assert data["totals"]["grand_total"] == 472

    @pytest.mark.parametrize("bad_item", [
        {**ITEMS[0], "quantity": 0},
        {**ITEMS[0], "inclusive_price": -5},
        {**ITEMS[0], "gst_rate": 150},
    ])
    def test_invalid_items_rejected(self, client, bad_item):
        resp = client.post("/api/v1/invoices/calculate", json={"items": [bad_item]})
        assert resp.status_code == 422

    def test_empty_items_rejected(self, client):
        resp = client.post("/api/v1/invoices/calculate", json={"items": []})
        assert resp.status_code == 422


class TestTaxInvoice:

    def test_build(self, client):
        resp = client.post("/api/v1/invoices/tax-invoice", json={
            "order_id": 42,
            "order_date": "2025-01-15",
            "order_total": 295,
            "items": [{"product_name": "Steel Bottle", "price": 118, "quantity": 2, "gst_rate": 18, "mrp": 150}],
            "shipping_details": {"name": "Ravi", "state": "Karnataka", "zipCode": "560001"},
            "invoice_date": "2025-01-20",
        })
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["order"]["invoice_number"] == "INV-42"
        assert data["order"]["invoice_date"] == "20/01/2025"
        assert data["gst_info"]["gst_type"] == "IGST"
        assert data["totals"]["amount_in_words"] == "Two Hundred Ninety Five Rupees Only"
        assert data["items"][0]["tax_components"][0]["tax_name"] == "IGST"


class TestApplication:

    def test_health_and_error_envelope(self):
        from app.main import app as main_app

        client = TestClient(main_app)
        assert client.get("/").json()["status"] == "ok"

        resp = client.post("/api/v1/invoices/calculate", json={"items": []})
        assert resp.status_code == 422
        body = resp.json()
        assert body["status"] == "error"
        assert body["message"] == "Invalid request"
        assert body["errors"]
