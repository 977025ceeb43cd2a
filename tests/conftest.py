"""
pytest 공통 설정: 인메모리 SQLite + 고정 시계
"""
from datetime import datetime
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from order_management.core.clock import get_clock
from order_management.core.config import Settings, get_settings
from order_management.db.database import get_db
from order_management.main import app
from order_management.models import Base

# 테스트 기준 시각: 업무 시간(8~18시) 안
NOW = datetime(2026, 3, 10, 12, 0, 0)


class FixedClock:
    """고정 시각을 반환하는 Clock"""

    def __init__(self, now: datetime):
        self.current = now

    def now(self) -> datetime:
        return self.current


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(REPORTS_DIR=str(tmp_path / "reports"))


@pytest.fixture
def client(session_factory, clock, test_settings) -> Iterator[TestClient]:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_clock] = lambda: clock
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
