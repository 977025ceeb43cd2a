"""
매출 리포트 서비스
"""
import time
from pathlib import Path
from typing import Dict, Optional

import pandas as pd
from sqlalchemy.orm import Session
import structlog

from order_management.core.clock import Clock, SystemClock
from order_management.core.config import Settings, settings as default_settings
from order_management.core.exceptions import PersistenceError
from order_management.repositories.order_repository import OrderRepository

logger = structlog.get_logger()

REPORT_COLUMNS = ["order_id", "date", "total", "customer", "product"]


class ReportService:
    def __init__(self, db: Session, settings: Settings = default_settings, clock: Optional[Clock] = None):
        self.repository = OrderRepository(db)
        self.settings = settings
        self.clock = clock or SystemClock()

    def generate_sales_report(self) -> Dict:
        """Pending 을 제외한 주문의 매출 집계 및 파일 저장"""
        logger.info("Generating sales report")
        if self.settings.REPORT_DELAY_SECONDS > 0:
            time.sleep(self.settings.REPORT_DELAY_SECONDS)

        orders = self.repository.get_sales_report_data()
        logger.debug("Retrieved non-pending orders for report", count=len(orders))

        lines = []
        total_sales = 0.0
        for order in orders:
            lines.append({
                "order_id": order.id,
                "date": order.date,
                "total": order.total,
                "customer": (order.customer.name or "") if order.customer else "",
                "product": (order.product.name or "") if order.product else "",
            })
            total_sales += order.total

        order_count = len(lines)
        average = round(total_sales / order_count, 2) if order_count > 0 else 0.0
        total_sales = round(total_sales, 2)
        generated_at = self.clock.now()

        report_file = self._write_report(lines, total_sales, order_count, average, generated_at)
        logger.info("Sales report generated", total_sales=total_sales, order_count=order_count,
                    report_file=str(report_file))

        return {
            "orders": lines,
            "total_sales": total_sales,
            "order_count": order_count,
            "average": average,
            "generated_at": generated_at,
            "report_file": str(report_file),
        }

    def _write_report(self, lines, total_sales, order_count, average, generated_at) -> Path:
        """요약(txt) + 주문별 상세(csv) 저장"""
        reports_dir = Path(self.settings.REPORTS_DIR)
        stamp = generated_at.strftime("%Y%m%d")
        summary_path = reports_dir / f"sales_report_{stamp}.txt"
        detail_path = reports_dir / f"sales_report_{stamp}.csv"

        try:
            reports_dir.mkdir(parents=True, exist_ok=True)
            with open(summary_path, "w", encoding="utf-8") as f:
                f.write(f"Sales Report - {generated_at:%Y-%m-%d %H:%M:%S}\n")
                f.write(f"Total Sales: {total_sales:.2f}\n")
                f.write(f"Order Count: {order_count}\n")
                f.write(f"Average: {average:.2f}\n")

            df = pd.DataFrame(lines, columns=REPORT_COLUMNS)
            df.to_csv(detail_path, index=False)
        except OSError as e:
            logger.error("Failed to write sales report", path=str(summary_path), error=str(e))
            raise PersistenceError("An error occurred while writing the sales report") from e

        logger.debug("Sales report written", summary=str(summary_path), detail=str(detail_path))
        return summary_path
