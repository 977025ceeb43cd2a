"""
상품 관련 API 엔드포인트
"""
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Request, Response, status as http_status
import structlog

from order_management.api.v1.endpoints.deps import get_product_service
from order_management.services.product_service import ProductService
from order_management.schemas.product import ProductCreate, ProductUpdate, ProductResponse

logger = structlog.get_logger()

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
def get_products(product_service: ProductService = Depends(get_product_service)):
    """상품 목록 조회"""
    logger.info("Get products request")
    return product_service.get_all_products()


@router.post("", response_model=ProductResponse, status_code=http_status.HTTP_201_CREATED)
def create_product(
    request: Request,
    response: Response,
    product: Optional[ProductCreate] = Body(None),
    product_service: ProductService = Depends(get_product_service)
):
    """새 상품 생성"""
    logger.info("Create product request", name=product.name if product else None)
    new_product = product_service.create_product(product.model_dump() if product else None)
    response.headers["Location"] = str(request.url_for("get_product", product_id=new_product.id))
    return new_product


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, product_service: ProductService = Depends(get_product_service)):
    """특정 상품 조회"""
    logger.info("Get product detail", product_id=product_id)
    return product_service.get_product(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product: Optional[ProductUpdate] = Body(None),
    product_service: ProductService = Depends(get_product_service)
):
    """상품 정보 수정"""
    logger.info("Update product request", product_id=product_id)
    return product_service.update_product(product_id, product.model_dump() if product else None)
