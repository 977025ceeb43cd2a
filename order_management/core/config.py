"""
애플리케이션 설정 관리
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 애플리케이션 정보
    APP_NAME: str = "Order Management API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # 서버 설정
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # 데이터베이스 설정
    DATABASE_URL: str = Field(
        default="sqlite:///./orders.db",
        description="SQLAlchemy database URL"
    )

    # 매출 리포트 설정
    REPORTS_DIR: str = Field(default="./reports", description="매출 리포트 파일 저장 경로")
    REPORT_DELAY_SECONDS: float = Field(default=0.0, ge=0, description="리포트 생성 지연 시간(초)")

    # 주문 상태 변경 규칙
    MAX_DAYS_FOR_ACTIVATION: int = 30
    BUSINESS_HOURS_START: int = 8
    BUSINESS_HOURS_END: int = 18

    # 주문 생성 시 0 또는 누락 값 대체용 기본값
    DEFAULT_CUSTOMER_ID: int = 1
    DEFAULT_PRODUCT_ID: int = 1
    DEFAULT_QUANTITY: int = 1
    DEFAULT_PRICE: float = 1.0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# 전역 설정 인스턴스
settings = Settings()


def get_settings() -> Settings:
    """설정 의존성 (테스트에서 override)"""
    return settings
