"""
현재 시각 제공자

주문 상태 변경 규칙은 현재 시각에 의존하므로 시스템 시계를 직접 읽지 않고
Clock 을 주입받는다. 테스트에서는 고정 시각을 반환하는 구현으로 교체한다.
"""
from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        ...


class SystemClock:
    """로컬 시스템 시각 (naive datetime)"""

    def now(self) -> datetime:
        return datetime.now()


_system_clock = SystemClock()


def get_clock() -> Clock:
    """시계 의존성"""
    return _system_clock
