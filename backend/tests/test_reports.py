from collections import namedtuple
from decimal import Decimal

from fastapi.testclient import TestClient

from catalog_api.db import SessionLocal, init_db
from catalog_api.main import app
from catalog_api.models.legacy_order import LegacyOrder, LegacyOrderLine
from catalog_api.services.report_service import consolidate

client = TestClient(app)

Row = namedtuple("Row", "product_code product_description distributor_name total_ordered")


def setup_module(module):
    init_db(reset=True)
    db = SessionLocal()
    try:
        d1_a = LegacyOrder(distributor_name="D1")
        d1_a.lines = [
            LegacyOrderLine(code="P1", description="Product one", quantity_ordered=1),
            LegacyOrderLine(code="P2", description="Product two", quantity_ordered=2),
        ]
        d1_b = LegacyOrder(distributor_name="D1")
        d1_b.lines = [LegacyOrderLine(code="P1", description="Product one", quantity_ordered=2)]
        d2 = LegacyOrder(distributor_name="D2")
        d2.lines = [LegacyOrderLine(code="P1", description="Product one", quantity_ordered=5)]
        db.add_all([d1_a, d1_b, d2])
        db.commit()
    finally:
        db.close()


def test_consolidate_groups_by_code_then_distributor():
    rows = [
        Row("P1", "Product one", "D1", 3),
        Row("P1", "Product one", "D2", 5),
        Row("P2", "Product two", "D1", Decimal("2")),
    ]
    assert consolidate(rows) == {
        "P1": {"description": "Product one", "totals": {"D1": 3, "D2": 5}},
        "P2": {"description": "Product two", "totals": {"D1": 2}},
    }


def test_consolidate_is_order_independent():
    rows = [
        Row("P2", "Product two", "D1", 2),
        Row("P1", "Product one", "D2", 5),
        Row("P1", "Product one", "D1", 3),
    ]
    assert consolidate(rows) == consolidate(list(reversed(rows)))


def test_consolidated_orders_endpoint(admin_client):
    res = admin_client.get("/api/consolidated-orders")
    assert res.status_code == 200
    assert res.json() == {
        "P1": {"description": "Product one", "totals": {"D1": 3, "D2": 5}},
        "P2": {"description": "Product two", "totals": {"D1": 2}},
    }


def test_consolidated_orders_requires_admin():
    res = client.get("/api/consolidated-orders")
    assert res.status_code == 401
