"""
주문 관련 API 엔드포인트
"""
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query, Request, Response, status as http_status
import structlog

from order_management.api.v1.endpoints.deps import get_order_service
from order_management.services.order_service import OrderService
from order_management.schemas.order import OrderCreate, OrderUpdate, OrderResponse

logger = structlog.get_logger()

router = APIRouter()


@router.get("", response_model=List[OrderResponse])
def get_orders(
    status: Optional[str] = Query(None, description="주문 상태 필터"),
    customer_id: Optional[str] = Query(None, alias="customerId", description="고객 ID 필터"),
    order_service: OrderService = Depends(get_order_service)
):
    """주문 목록 조회 (상태/고객 필터링 지원)"""
    logger.info("Get orders request", status=status, customer_id=customer_id)
    return order_service.list_orders(status=status, customer_id=customer_id)


@router.post("", response_model=OrderResponse, status_code=http_status.HTTP_201_CREATED)
def create_order(
    request: Request,
    response: Response,
    order: Optional[OrderCreate] = Body(None),
    order_service: OrderService = Depends(get_order_service)
):
    """새 주문 생성"""
    logger.info("Create order request",
                customer_id=order.customer_id if order else None,
                product_id=order.product_id if order else None)

    new_order = order_service.create_order(order.model_dump() if order else None)
    response.headers["Location"] = str(request.url_for("get_order", order_id=new_order.id))
    return new_order


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: int, order_service: OrderService = Depends(get_order_service)):
    """특정 주문 상세 조회"""
    logger.info("Get order detail", order_id=order_id)
    return order_service.get_order(order_id)


@router.put("/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: int,
    order_update: Optional[OrderUpdate] = Body(None),
    order_service: OrderService = Depends(get_order_service)
):
    """주문 정보 전체 수정"""
    logger.info("Update order request", order_id=order_id)
    return order_service.update_order(order_id, order_update.model_dump() if order_update else None)


@router.delete("/{order_id}", status_code=http_status.HTTP_204_NO_CONTENT)
def delete_order(order_id: int, order_service: OrderService = Depends(get_order_service)):
    """주문 삭제"""
    logger.info("Delete order request", order_id=order_id)
    order_service.delete_order(order_id)
    return Response(status_code=http_status.HTTP_204_NO_CONTENT)


@router.put("/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: int,
    status: Optional[str] = Body(None, description="새로운 주문 상태 (JSON 문자열)"),
    order_service: OrderService = Depends(get_order_service)
):
    """주문 상태 변경"""
    logger.info("Update order status", order_id=order_id, status=status)
    return order_service.update_status(order_id, status)
