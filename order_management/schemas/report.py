"""
매출 리포트 스키마
"""
from typing import List, Optional
from datetime import datetime
from pydantic import Field

from .common import CamelModel


class SalesReportLine(CamelModel):
    order_id: int
    date: datetime
    total: float
    customer: str = ""
    product: str = ""


class SalesReportResponse(CamelModel):
    """매출 리포트 응답 스키마"""
    orders: List[SalesReportLine]
    total_sales: float = Field(..., description="총 매출")
    order_count: int = Field(..., description="주문 건수")
    average: float = Field(..., description="주문당 평균 매출")
    generated_at: datetime
    report_file: Optional[str] = Field(None, description="요약 파일 경로")
