"""
비즈니스 규칙 검증

스키마(타입) 검증과 별개로 요청 데이터의 비즈니스 규칙을 검사합니다.
첫 번째 실패에서 멈추지 않고 실패한 모든 규칙의 메시지를 순서대로 반환합니다.
"""

import math
from typing import Any, Mapping

from product_api.core.config import VALID_CATEGORIES
from product_api.db.store import ProductStore


MIN_SKU_LENGTH = 3


def is_number(value: Any) -> bool:
    """JSON 숫자인지 확인합니다 (bool, NaN, Infinity 제외)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def is_valid_price(value: Any) -> bool:
    return is_number(value) and value > 0


def validate_product(data: Mapping[str, Any], store: ProductStore) -> list[str]:
    """
    상품 생성 데이터를 검증합니다.

    검사 순서: name → sku → price → stock → category

    Args:
        data: 상품 생성 요청 데이터
        store: SKU 중복 확인용 저장소

    Returns:
        에러 메시지 목록 (비어 있으면 유효)
    """
    errors = []

    if _is_blank(data.get("name")):
        errors.append("ชื่อสินค้าต้องไม่ว่าง")

    sku = data.get("sku")
    if _is_blank(sku):
        errors.append("รหัสสินค้าต้องไม่ว่าง")
    elif len(sku) < MIN_SKU_LENGTH:
        errors.append("รหัสสินค้าต้องมีอย่างน้อย 3 ตัวอักษร")
    elif store.sku_exists(sku):
        errors.append("รหัสสินค้านี้มีอยู่แล้วในระบบ")

    price = data.get("price")
    if price is None:
        errors.append("ราคาต้องไม่ว่าง")
    elif not is_valid_price(price):
        errors.append("ราคาต้องมากกว่า 0")

    stock = data.get("stock")
    if stock is None:
        errors.append("จำนวนคงเหลือต้องไม่ว่าง")
    elif not is_number(stock) or stock < 0:
        errors.append("จำนวนคงเหลือต้องไม่ติดลบ")

    category = data.get("category")
    if not isinstance(category, str) or category not in VALID_CATEGORIES:
        errors.append(f"หมวดหมู่ต้องเป็น 1 ใน: {', '.join(VALID_CATEGORIES)}")

    return errors


def validate_quantity(quantity: Any) -> list[str]:
    """판매 수량이 양수인지 검증합니다."""
    if not is_number(quantity) or quantity <= 0:
        return ["quantity ต้องมากกว่า 0"]
    return []


def validate_keyword(keyword: Any) -> list[str]:
    if _is_blank(keyword):
        return ["กรุณาระบุคำค้นหา"]
    return []
