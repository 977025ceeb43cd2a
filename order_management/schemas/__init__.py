# Pydantic 스키마 패키지
from .order import OrderBase, OrderCreate, OrderUpdate, OrderResponse
from .customer import CustomerBase, CustomerCreate, CustomerUpdate, CustomerResponse
from .product import ProductBase, ProductCreate, ProductUpdate, ProductResponse
from .report import SalesReportLine, SalesReportResponse
from .common import ErrorResponse

__all__ = [
    "OrderBase", "OrderCreate", "OrderUpdate", "OrderResponse",
    "CustomerBase", "CustomerCreate", "CustomerUpdate", "CustomerResponse",
    "ProductBase", "ProductCreate", "ProductUpdate", "ProductResponse",
    "SalesReportLine", "SalesReportResponse",
    "ErrorResponse"
]
