"""
상품 관련 서비스 로직
"""
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import structlog

from order_management.core.clock import Clock, SystemClock
from order_management.core.exceptions import NotFoundError, PersistenceError, ValidationError
from order_management.models.base import is_storable_id
from order_management.models.product import Product

logger = structlog.get_logger()

UPDATABLE_FIELDS = ("name", "price", "stock", "category", "description", "is_active")


class ProductService:
    def __init__(self, db: Session, clock: Optional[Clock] = None):
        self.db = db
        self.clock = clock or SystemClock()

    def _commit(self, operation: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Database error", operation=operation, error=str(e))
            raise PersistenceError(f"An error occurred while {operation}") from e

    def get_all_products(self) -> List[Product]:
        """모든 상품 조회"""
        products = self.db.query(Product).order_by(Product.id).all()
        logger.info("Products retrieved", count=len(products))
        return products

    def get_product(self, product_id: int) -> Product:
        product = self.db.get(Product, product_id) if is_storable_id(product_id) else None
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def create_product(self, product_data: Optional[Dict]) -> Product:
        """새 상품 생성"""
        if product_data is None:
            raise ValidationError("Product data is required")

        db_product = Product(
            **{field: product_data.get(field) for field in UPDATABLE_FIELDS},
            last_updated=product_data.get('last_updated') or self.clock.now(),
        )
        self.db.add(db_product)
        self._commit("creating product")
        self.db.refresh(db_product)
        logger.info("Product created", product_id=db_product.id, name=db_product.name)
        return db_product

    def update_product(self, product_id: int, product_data: Optional[Dict]) -> Product:
        """상품 정보 수정 (last_updated 는 현재 시각)"""
        if product_data is None:
            raise ValidationError("Product data is required")

        existing = self.get_product(product_id)
        for field in UPDATABLE_FIELDS:
            setattr(existing, field, product_data.get(field))
        existing.last_updated = self.clock.now()
        self._commit(f"updating product {product_id}")
        self.db.refresh(existing)
        logger.info("Product updated", product_id=product_id)
        return existing
