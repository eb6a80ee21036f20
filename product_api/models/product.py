"""
Product 모델
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """
    상품 모델 (인메모리)

    Attributes:
        id: 상품 고유 ID (1부터 순차 발급, 재사용하지 않음)
        name: 상품명
        sku: 상품 코드 (3자 이상, 전체 상품에서 유일)
        price: 가격 (양수) - 일괄 가격 수정으로만 변경
        stock: 현재 재고 수량 (0 이상) - 판매 시에만 감소
        category: 상품 카테고리 (VALID_CATEGORIES 중 하나)
        created_at: 생성 일시 (UTC, 자동 설정)
    """

    id: int
    name: str
    sku: str
    price: int | float
    stock: int | float
    category: str
    created_at: datetime = field(default_factory=_utcnow)

    def __repr__(self) -> str:
        """Product 객체의 문자열 표현"""
        return f"<Product(id={self.id}, sku='{self.sku}', price={self.price})>"

    def __str__(self) -> str:
        return f"Product: {self.name}"
