"""
고객 관련 API 엔드포인트
"""
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Request, Response, status as http_status
import structlog

from order_management.api.v1.endpoints.deps import get_customer_service
from order_management.services.customer_service import CustomerService
from order_management.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse

logger = structlog.get_logger()

router = APIRouter()


@router.get("", response_model=List[CustomerResponse])
def get_customers(customer_service: CustomerService = Depends(get_customer_service)):
    """고객 목록 조회"""
    logger.info("Get customers request")
    return customer_service.get_all_customers()


@router.post("", response_model=CustomerResponse, status_code=http_status.HTTP_201_CREATED)
def create_customer(
    request: Request,
    response: Response,
    customer: Optional[CustomerCreate] = Body(None),
    customer_service: CustomerService = Depends(get_customer_service)
):
    """새 고객 생성"""
    logger.info("Create customer request")
    new_customer = customer_service.create_customer(customer.model_dump() if customer else None)
    response.headers["Location"] = str(request.url_for("get_customer", customer_id=new_customer.id))
    return new_customer


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, customer_service: CustomerService = Depends(get_customer_service)):
    """특정 고객 조회"""
    logger.info("Get customer detail", customer_id=customer_id)
    return customer_service.get_customer(customer_id)


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    customer: Optional[CustomerUpdate] = Body(None),
    customer_service: CustomerService = Depends(get_customer_service)
):
    """고객 정보 수정"""
    logger.info("Update customer request", customer_id=customer_id)
    return customer_service.update_customer(customer_id, customer.model_dump() if customer else None)
