"""
상품 관련 스키마
"""
from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator

from .common import CamelModel, to_local_naive


class ProductBase(CamelModel):
    """상품 기본 스키마"""
    name: Optional[str] = Field(None, max_length=200, description="상품명")
    price: float = Field(0, ge=0, description="가격")
    stock: int = Field(0, description="재고 수량")
    category: Optional[str] = Field(None, max_length=100, description="카테고리")
    description: Optional[str] = Field(None, max_length=1000, description="설명")
    is_active: bool = Field(True, description="판매 여부")


class ProductCreate(ProductBase):
    """상품 생성 스키마"""
    last_updated: Optional[datetime] = None

    @field_validator("last_updated")
    @classmethod
    def normalize_last_updated(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_local_naive(value)


class ProductUpdate(ProductBase):
    """상품 수정 스키마"""
    pass


class ProductResponse(ProductBase):
    """상품 응답 스키마"""
    id: int = Field(..., description="상품 ID")
    last_updated: datetime = Field(..., description="수정 일시")
