"""
상품 모델
"""
from sqlalchemy import Boolean, Column, Integer, String, DateTime, Numeric

from .base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200))
    price = Column(Numeric(18, 2, asdecimal=False), default=0)
    stock = Column(Integer, default=0)
    category = Column(String(100))
    description = Column(String(1000))
    is_active = Column(Boolean, default=True)
    last_updated = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}')>"
