"""
엔드포인트 공통 의존성
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from order_management.core.clock import Clock, get_clock
from order_management.core.config import Settings, get_settings
from order_management.db.database import get_db
from order_management.services.customer_service import CustomerService
from order_management.services.order_service import OrderService
from order_management.services.product_service import ProductService
from order_management.services.report_service import ReportService


def get_order_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
) -> OrderService:
    return OrderService(db, settings=settings, clock=clock)


def get_customer_service(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)) -> CustomerService:
    return CustomerService(db, clock=clock)


def get_product_service(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)) -> ProductService:
    return ProductService(db, clock=clock)


def get_report_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
) -> ReportService:
    return ReportService(db, settings=settings, clock=clock)
