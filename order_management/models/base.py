"""
SQLAlchemy Base 모델
"""
from sqlalchemy.orm import DeclarativeBase

# SQLite INTEGER (64bit) 범위
MAX_ID = 2 ** 63 - 1


def is_storable_id(value: int) -> bool:
    """DB INTEGER 로 바인딩 가능한 ID 인지 확인"""
    return -MAX_ID - 1 <= value <= MAX_ID


class Base(DeclarativeBase):
    """SQLAlchemy Base 클래스"""
    pass
