"""
도메인 예외 정의

서비스 계층에서 발생시키고 API 계층의 예외 핸들러(core.errors)가
HTTP 응답으로 변환한다.
"""
from typing import Optional


class OrderManagementError(Exception):
    """모든 도메인 예외의 기반 클래스"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(OrderManagementError):
    """요청 값이 비어 있거나 해석할 수 없음"""

    status_code = 400


class NotFoundError(OrderManagementError):
    """존재하지 않는 ID"""

    status_code = 404

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class TransitionRejected(OrderManagementError):
    """주문 상태 변경 규칙 위반"""

    status_code = 400

    def __init__(self, reason: str, current_status: Optional[str] = None, requested_status: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.current_status = current_status
        self.requested_status = requested_status


class PersistenceError(OrderManagementError):
    """저장소 오류 (원인은 __cause__ 에 보존)"""

    status_code = 500
