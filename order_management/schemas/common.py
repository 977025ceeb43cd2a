"""
공통 스키마 정의
"""
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """타임존이 있는 시각은 로컬 시각으로 변환 후 tzinfo 제거 (DB 는 naive 저장)"""
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class CamelModel(BaseModel):
    """JSON 은 camelCase, 입력은 snake_case 도 허용"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class ErrorResponse(BaseModel):
    """오류 응답 스키마"""
    success: bool = False
    message: str
    details: Optional[Any] = None
