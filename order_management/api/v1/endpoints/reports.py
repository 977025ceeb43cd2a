"""
리포트 관련 API 엔드포인트
"""
from fastapi import APIRouter, Depends
import structlog

from order_management.api.v1.endpoints.deps import get_report_service
from order_management.services.report_service import ReportService
from order_management.schemas.report import SalesReportResponse

logger = structlog.get_logger()

router = APIRouter()


@router.get("/sales", response_model=SalesReportResponse)
def get_sales_report(report_service: ReportService = Depends(get_report_service)):
    """매출 리포트 생성 (Pending 제외)"""
    logger.info("Get sales report request")
    return report_service.generate_sales_report()
