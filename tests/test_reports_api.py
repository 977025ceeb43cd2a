"""
매출 리포트 테스트
"""
from pathlib import Path

import pandas as pd
import pytest

from order_management.core.config import Settings
from order_management.core.exceptions import PersistenceError
from order_management.services.report_service import ReportService

REPORT_URL = "/api/v1/reports/sales"


def create_order(client, **body):
    payload = {"customerId": 1, "productId": 1, "quantity": 2, "unitPrice": 10.0}
    payload.update(body)
    return client.post("/api/v1/orders", json=payload).json()


def test_sales_report_empty(client):
    response = client.get(REPORT_URL)
    assert response.status_code == 200
    report = response.json()
    assert report["orders"] == []
    assert report["orderCount"] == 0
    assert report["totalSales"] == 0
    assert report["average"] == 0


def test_sales_report_excludes_pending_and_aggregates(client, test_settings):
    client.post("/api/v1/customers", json={"name": "Alice"})
    client.post("/api/v1/products", json={"name": "Widget", "price": 10.0})

    create_order(client, status="Pending")
    create_order(client, status="Active")
    create_order(client, status="Completed", quantity=3, unitPrice=20.0)

    response = client.get(REPORT_URL)
    assert response.status_code == 200
    report = response.json()
    assert report["orderCount"] == 2
    assert report["totalSales"] == 80.0
    assert report["average"] == 40.0
    assert report["orders"][0]["customer"] == "Alice"
    assert report["orders"][0]["product"] == "Widget"
    assert {line["total"] for line in report["orders"]} == {20.0, 60.0}

    summary = Path(report["reportFile"])
    assert summary.parent == Path(test_settings.REPORTS_DIR)
    assert summary.name == "sales_report_20260310.txt"
    content = summary.read_text(encoding="utf-8")
    assert "Total Sales: 80.00" in content
    assert "Order Count: 2" in content
    assert "Average: 40.00" in content

    detail = pd.read_csv(summary.with_suffix(".csv"))
    assert list(detail.columns) == ["order_id", "date", "total", "customer", "product"]
    assert len(detail) == 2


def test_sales_report_missing_customer_is_blank(client):
    create_order(client, status="Active", customerId=42, productId=42)
    report = client.get(REPORT_URL).json()
    assert report["orders"][0]["customer"] == ""
    assert report["orders"][0]["product"] == ""


def test_report_write_failure_raises_persistence_error(db_session, clock, tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")
    service = ReportService(db_session, settings=Settings(REPORTS_DIR=str(blocker)), clock=clock)
    with pytest.raises(PersistenceError):
        service.generate_sales_report()
