"""
주문 상태 변경 규칙

요청된 상태별로 독립된 가드 블록을 순서대로 검사한다.
Pending -> Active 변경은 주문 경과 일수와 주문 시각(시) 기준의 활성화 규칙을 따른다.

이 모듈의 함수는 예외를 발생시키지 않는다. 거부는 TransitionResult(allowed=False)로 반환되며
호출자(OrderService)가 TransitionRejected 로 변환한다.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from order_management.core.config import Settings
from order_management.models.order import OrderStatus


@dataclass(frozen=True)
class TransitionResult:
    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "TransitionResult":
        return cls(allowed=True)

    @classmethod
    def reject(cls, reason: str) -> "TransitionResult":
        return cls(allowed=False, reason=reason)


@dataclass(frozen=True)
class ActivationPolicy:
    """Pending -> Active 활성화 규칙 상수"""
    max_days_for_activation: int = 30
    business_hours_start: int = 8
    business_hours_end: int = 18

    @classmethod
    def from_settings(cls, settings: Settings) -> "ActivationPolicy":
        return cls(
            max_days_for_activation=settings.MAX_DAYS_FOR_ACTIVATION,
            business_hours_start=settings.BUSINESS_HOURS_START,
            business_hours_end=settings.BUSINESS_HOURS_END,
        )


DEFAULT_ACTIVATION_POLICY = ActivationPolicy()


def days_between(order_date: datetime, now: datetime) -> int:
    """경과 일수 (0 방향으로 버림)"""
    return int((now - order_date) / timedelta(days=1))


def check_activation(order_date: datetime, now: datetime,
                     policy: ActivationPolicy = DEFAULT_ACTIVATION_POLICY) -> TransitionResult:
    """Pending -> Active 활성화 규칙

    시간 검사는 현재 시각이 아니라 주문 시각의 시(hour)를 기준으로 한다.
    """
    days_diff = days_between(order_date, now)
    if days_diff >= policy.max_days_for_activation:
        return TransitionResult.reject("Order too old")
    if days_diff > 0:
        return TransitionResult.allow()

    # 당일 (또는 미래 일자) 주문
    if order_date.hour <= policy.business_hours_start:
        return TransitionResult.reject("Cannot activate before hours")
    if order_date.hour >= policy.business_hours_end:
        return TransitionResult.reject("Cannot activate after hours")
    return TransitionResult.allow()


def validate_transition(current_status: Optional[str], requested_status: str,
                        order_date: datetime, now: datetime,
                        policy: ActivationPolicy = DEFAULT_ACTIVATION_POLICY) -> TransitionResult:
    """current_status -> requested_status 변경 허용 여부

    current_status 는 이미 저장된 값이므로 별도로 검증하지 않는다.
    """
    if requested_status == OrderStatus.ACTIVE:
        if current_status == OrderStatus.COMPLETED:
            return TransitionResult.reject("Cannot reactivate completed order")
        if current_status == OrderStatus.SHIPPED:
            return TransitionResult.reject("Cannot change shipped order")
        if current_status == OrderStatus.PENDING:
            return check_activation(order_date, now, policy)
        return TransitionResult.allow()

    if requested_status == OrderStatus.COMPLETED:
        if current_status == OrderStatus.PENDING:
            return TransitionResult.reject("Cannot complete pending order")
        # Completed -> Completed 는 멱등 요청으로 허용
        if current_status in (OrderStatus.ACTIVE, OrderStatus.SHIPPED, OrderStatus.COMPLETED):
            return TransitionResult.allow()
        return TransitionResult.reject("Invalid status transition")

    if requested_status == OrderStatus.SHIPPED:
        if current_status != OrderStatus.ACTIVE:
            return TransitionResult.reject("Can only ship active orders")
        return TransitionResult.allow()

    if requested_status == OrderStatus.PENDING:
        # Active 만 막는다. Completed/Shipped -> Pending 은 허용됨
        if current_status == OrderStatus.ACTIVE:
            return TransitionResult.reject("Cannot revert to pending")
        return TransitionResult.allow()

    return TransitionResult.reject("Invalid status")
