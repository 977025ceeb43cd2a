"""
주문 관련 스키마
"""
from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator

from order_management.models.base import MAX_ID

from .common import CamelModel, to_local_naive


class OrderBase(CamelModel):
    """주문 기본 스키마 (0 은 값 없음으로 취급)"""
    customer_id: int = Field(0, ge=0, le=MAX_ID, description="고객 ID")
    product_id: int = Field(0, ge=0, le=MAX_ID, description="상품 ID")
    quantity: int = Field(0, ge=0, le=MAX_ID, description="수량")
    unit_price: float = Field(0, ge=0, description="단가")
    status: Optional[str] = Field(None, max_length=50, description="주문 상태")
    date: Optional[datetime] = Field(None, description="주문 일시")
    notes: Optional[str] = Field(None, max_length=1000, description="메모")

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_local_naive(value)


class OrderCreate(OrderBase):
    """주문 생성 스키마"""
    pass


class OrderUpdate(OrderBase):
    """주문 전체 수정 스키마"""
    pass


class OrderResponse(CamelModel):
    """주문 응답 스키마"""
    id: int = Field(..., description="주문 ID")
    customer_id: int
    product_id: int
    quantity: int
    unit_price: float
    total: float = Field(..., description="수량 x 단가")
    status: Optional[str] = None
    date: datetime
    notes: Optional[str] = None
