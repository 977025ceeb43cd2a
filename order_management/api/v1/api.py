"""
API v1 라우터 메인
"""
from fastapi import APIRouter

from order_management.api.v1.endpoints import customers, orders, products, reports

api_router = APIRouter()

# 각 엔드포인트 라우터 등록
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
