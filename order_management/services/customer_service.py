"""
고객 관련 서비스 로직
"""
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import structlog

from order_management.core.clock import Clock, SystemClock
from order_management.core.exceptions import NotFoundError, PersistenceError, ValidationError
from order_management.models.base import is_storable_id
from order_management.models.customer import Customer

logger = structlog.get_logger()

# 수정 시 created_date 는 보존
UPDATABLE_FIELDS = ("name", "email", "phone", "address", "city", "state", "zip_code")


class CustomerService:
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

    def get_all_customers(self) -> List[Customer]:
        """모든 고객 조회"""
        customers = self.db.query(Customer).order_by(Customer.id).all()
        logger.info("Customers retrieved", count=len(customers))
        return customers

    def get_customer(self, customer_id: int) -> Customer:
        customer = self.db.get(Customer, customer_id) if is_storable_id(customer_id) else None
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        return customer

    def create_customer(self, customer_data: Optional[Dict]) -> Customer:
        """새 고객 생성"""
        if customer_data is None:
            raise ValidationError("Customer data is required")

        db_customer = Customer(
            **{field: customer_data.get(field) for field in UPDATABLE_FIELDS},
            created_date=customer_data.get('created_date') or self.clock.now(),
        )
        self.db.add(db_customer)
        self._commit("creating customer")
        self.db.refresh(db_customer)
        logger.info("Customer created", customer_id=db_customer.id)
        return db_customer

    def update_customer(self, customer_id: int, customer_data: Optional[Dict]) -> Customer:
        """고객 정보 수정"""
        if customer_data is None:
            raise ValidationError("Customer data is required")
        if customer_id <= 0:
            raise ValidationError(f"Invalid customer ID {customer_id}")

        existing = self.get_customer(customer_id)
        for field in UPDATABLE_FIELDS:
            setattr(existing, field, customer_data.get(field))
        self._commit(f"updating customer {customer_id}")
        self.db.refresh(existing)
        logger.info("Customer updated", customer_id=customer_id)
        return existing
