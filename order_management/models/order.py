"""
주문 모델
"""
from enum import Enum

from sqlalchemy import Column, Integer, String, DateTime, Numeric
from sqlalchemy.orm import relationship

from .base import Base


class OrderStatus(str, Enum):
    PENDING = "Pending"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    SHIPPED = "Shipped"


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column("price", Numeric(18, 2, asdecimal=False), nullable=False)
    status = Column(String(50), default=OrderStatus.PENDING.value, index=True)
    date = Column(DateTime, nullable=False)
    notes = Column(String(1000))
    total = Column(Numeric(18, 2, asdecimal=False), nullable=False)

    # 고객/상품 테이블과 FK 제약 없이 조인만 정의 (리포트용)
    customer = relationship(
        "Customer",
        primaryjoin="foreign(Order.customer_id) == Customer.id",
        viewonly=True,
    )
    product = relationship(
        "Product",
        primaryjoin="foreign(Order.product_id) == Product.id",
        viewonly=True,
    )

    def __repr__(self):
        return f"<Order(id={self.id}, customer_id={self.customer_id}, status='{self.status}')>"
