"""
Order Management API - 메인 애플리케이션
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
import structlog

from order_management.core.config import settings
from order_management.core.errors import register_exception_handlers
from order_management.core.logging_config import setup_logging
from order_management.api.v1.api import api_router
from order_management.db.database import create_tables

setup_logging(settings.DEBUG)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Order Management API", version=settings.APP_VERSION)
    logger.info("Initializing database", database_url=settings.DATABASE_URL)
    try:
        create_tables()
        logger.info("Database tables initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise
    yield
    logger.info("Shutting down Order Management API")


def create_application() -> FastAPI:
    """FastAPI 애플리케이션 생성"""

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="주문/고객/상품 관리 및 매출 리포트 API",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # API 라우터 등록
    app.include_router(api_router, prefix="/api/v1")

    return app


# 애플리케이션 인스턴스 생성
app = create_application()


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "Documentation disabled in production"
    }


@app.get("/health")
async def health_check():
    """헬스 체크 엔드포인트"""
    return {"status": "healthy", "version": settings.APP_VERSION}
