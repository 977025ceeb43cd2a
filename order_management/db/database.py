"""
데이터베이스 엔진/세션 관리
"""
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from order_management.core.config import settings
from order_management.models import Base


def build_engine(database_url: str) -> Engine:
    """SQLite 는 요청 스레드가 달라도 커넥션을 공유할 수 있도록 설정"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    """요청 단위 DB 세션 의존성"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine = None) -> None:
    """테이블 생성 (이미 있으면 건너뜀)"""
    Base.metadata.create_all(bind=bind or engine)
