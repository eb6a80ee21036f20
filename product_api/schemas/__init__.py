"""
Pydantic 스키마 모듈
"""

from product_api.schemas.product import (
    ProductCreateRequest,
    ProductResponse,
    SellRequest,
    SellResponse,
    BulkPriceUpdateRequest,
    BulkPriceUpdateResponse,
    ErrorResponse,
)

__all__ = [
    "ProductCreateRequest",
    "ProductResponse",
    "SellRequest",
    "SellResponse",
    "BulkPriceUpdateRequest",
    "BulkPriceUpdateResponse",
    "ErrorResponse",
]
