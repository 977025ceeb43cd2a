"""
고객 모델
"""
from sqlalchemy import Column, Integer, String, DateTime

from .base import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200))
    email = Column(String(100))
    phone = Column(String(20))
    address = Column(String(500))
    city = Column(String(100))
    state = Column(String(50))
    zip_code = Column(String(10))
    created_date = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Customer(id={self.id}, name='{self.name}')>"
