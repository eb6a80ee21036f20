"""
상품 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.

요청 스키마는 필드 타입을 Any로 받아 원본 JSON 값을 그대로 보존합니다.
타입과 범위 검사는 services.validators에서 수행하여 실패한 규칙을
모두 모아 400 응답으로 돌려줍니다 (pydantic의 422 대신).
응답 스키마는 camelCase 키(createdAt, soldQuantity 등)로 직렬화됩니다.
"""

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ProductCreateRequest(BaseModel):
    """
    상품 생성 요청 스키마

    Example:
        {
            "name": "Rice",
            "sku": "RIC001",
            "price": 50,
            "stock": 10,
            "category": "อาหาร"
        }
    """

    name: Any = Field(None, description="상품명", examples=["Rice"])
    sku: Any = Field(None, description="상품 코드 (3자 이상, 중복 불가)", examples=["RIC001"])
    price: Any = Field(None, description="가격 (양수)", examples=[50])
    stock: Any = Field(None, description="초기 재고 수량 (0 이상)", examples=[10])
    category: Any = Field(None, description="카테고리", examples=["อาหาร"])


class ProductResponse(BaseModel):
    """
    상품 정보 응답 스키마

    Example:
        {
            "id": 1,
            "name": "Rice",
            "sku": "RIC001",
            "price": 50,
            "stock": 10,
            "category": "อาหาร",
            "createdAt": "2025-01-22T10:30:00.000Z"
        }
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(..., description="상품 ID")
    name: str = Field(..., description="상품명")
    sku: str = Field(..., description="상품 코드")
    price: int | float = Field(..., description="가격")
    stock: int | float = Field(..., description="재고 수량")
    category: str = Field(..., description="카테고리")
    created_at: datetime = Field(..., alias="createdAt", description="상품 생성 일시")

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        """UTC 밀리초 ISO-8601 형식 (예: 2025-01-22T10:30:00.000Z)"""
        value = value.astimezone(timezone.utc)
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SellRequest(BaseModel):
    """
    상품 판매 요청 스키마

    Example:
        {
            "productId": 1,
            "quantity": 3
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    product_id: Any = Field(None, alias="productId", description="판매할 상품 ID", examples=[1])
    quantity: Any = Field(None, description="판매 수량 (양수)", examples=[3])


class SellResponse(BaseModel):
    """
    상품 판매 응답 스키마

    Example:
        {
            "product": {...},
            "soldQuantity": 3,
            "remainingStock": 7
        }
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    product: ProductResponse
    sold_quantity: int | float = Field(..., alias="soldQuantity")
    remaining_stock: int | float = Field(..., alias="remainingStock")


class BulkPriceUpdateRequest(BaseModel):
    """
    일괄 가격 수정 요청 스키마

    updates 항목의 형태는 서비스에서 항목별로 판단합니다.

    Example:
        {
            "updates": [
                {"productId": 1, "newPrice": 55},
                {"productId": 2, "newPrice": 30}
            ]
        }
    """

    updates: Any = Field(None, description="[{productId, newPrice}, ...]")


class PriceUpdateItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    product_id: Any = Field(None, alias="productId")
    status: Literal["success", "failed"]
    message: str


class BulkPriceUpdateSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    total: int = Field(..., description="요청 항목 수")
    success: int = Field(..., description="성공 항목 수")
    failed: int = Field(..., description="실패 항목 수")


class BulkPriceUpdateResponse(BaseModel):
    """
    일괄 가격 수정 응답 스키마

    Example:
        {
            "summary": {"total": 2, "success": 1, "failed": 1},
            "results": [
                {"productId": 1, "status": "success", "message": "อัพเดทราคาสำเร็จ"},
                {"productId": 99, "status": "failed", "message": "ไม่พบสินค้า"}
            ]
        }
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    summary: BulkPriceUpdateSummaryResponse
    results: list[PriceUpdateItemResponse]


class ErrorResponse(BaseModel):
    """
    에러 응답 스키마 (400, 500)

    Example:
        {"errors": ["ชื่อสินค้าต้องไม่ว่าง", "ราคาต้องมากกว่า 0"]}
    """

    errors: list[str]
