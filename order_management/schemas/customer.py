"""
고객 관련 스키마
"""
from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator

from .common import CamelModel, to_local_naive


class CustomerBase(CamelModel):
    """고객 기본 스키마"""
    name: Optional[str] = Field(None, max_length=200, description="고객 이름")
    email: Optional[str] = Field(None, max_length=100, description="이메일")
    phone: Optional[str] = Field(None, max_length=20, description="전화번호")
    address: Optional[str] = Field(None, max_length=500, description="주소")
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=50)
    zip_code: Optional[str] = Field(None, max_length=10, description="우편번호")


class CustomerCreate(CustomerBase):
    """고객 생성 스키마"""
    created_date: Optional[datetime] = None

    @field_validator("created_date")
    @classmethod
    def normalize_created_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_local_naive(value)


class CustomerUpdate(CustomerBase):
    """고객 수정 스키마 (created_date 는 변경 불가)"""
    pass


class CustomerResponse(CustomerBase):
    """고객 응답 스키마"""
    id: int = Field(..., description="고객 ID")
    created_date: datetime = Field(..., description="등록 일시")
