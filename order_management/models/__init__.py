# SQLAlchemy 모델 패키지
from .base import Base, MAX_ID, is_storable_id
from .order import Order, OrderStatus
from .customer import Customer
from .product import Product

__all__ = ["Base", "MAX_ID", "is_storable_id", "Order", "OrderStatus", "Customer", "Product"]
