"""상품 관리 서비스."""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from product_api.core.exceptions import (
    InsufficientStockException,
    ProductNotFoundException,
    ValidationException,
)
from product_api.db.store import ProductStore
from product_api.models import Product
from product_api.services.validators import (
    is_valid_price,
    validate_keyword,
    validate_product,
    validate_quantity,
)


logger = logging.getLogger(__name__)


@dataclass
class SaleResult:
    """판매 처리 결과"""

    product: Product
    sold_quantity: int | float
    remaining_stock: int | float


@dataclass
class PriceUpdateItemResult:
    product_id: Any
    status: str  # "success" | "failed"
    message: str


@dataclass
class BulkPriceUpdateSummary:
    total: int = 0
    success: int = 0
    failed: int = 0


@dataclass
class BulkPriceUpdateResult:
    """일괄 가격 수정 결과 (항목별 결과 + 집계)"""

    summary: BulkPriceUpdateSummary = field(default_factory=BulkPriceUpdateSummary)
    results: list[PriceUpdateItemResult] = field(default_factory=list)


class ProductService:
    """상품 생성, 조회, 판매 및 가격 수정 서비스."""

    @staticmethod
    def create_product(data: Mapping[str, Any], store: ProductStore) -> Product:
        """
        상품 데이터를 검증한 뒤 저장소에 추가합니다.

        SKU 중복 검사와 추가 사이에 다른 요청이 끼어들지 않도록
        저장소 락을 잡은 상태에서 검증과 추가를 함께 수행합니다.

        Args:
            data: 상품 생성 데이터 (name, sku, price, stock, category)
            store: 상품 저장소

        Returns:
            생성된 Product 객체

        Raises:
            ValidationException: 하나 이상의 규칙을 위반한 경우 (저장소는 변경되지 않음)
        """
        with store.lock:
            errors = validate_product(data, store)
            if errors:
                logger.warning(
                    "Product creation rejected: %s", errors, extra={"sku": data.get("sku")}
                )
                raise ValidationException(errors)

            product = store.add(
                name=data["name"],
                sku=data["sku"],
                price=data["price"],
                stock=data["stock"],
                category=data["category"],
            )

        logger.info(
            "Product created: id=%s sku=%s",
            product.id,
            product.sku,
            extra={"product_id": product.id, "sku": product.sku},
        )
        return product

    @staticmethod
    def list_products(store: ProductStore, category: Optional[str] = None) -> list[Product]:
        """
        상품 목록을 조회합니다.

        Args:
            store: 상품 저장소
            category: 카테고리 필터 (정확히 일치, 대소문자 구분). 비어 있으면 전체 조회

        Returns:
            등록 순서대로 정렬된 Product 리스트
        """
        products = store.all()
        if not category:
            return products
        return [product for product in products if product.category == category]

    @staticmethod
    def sell_product(product_id: Any, quantity: Any, store: ProductStore) -> SaleResult:
        """
        상품을 판매하고 재고를 차감합니다.

        플로우:
        1. 수량 검증
        2. 락 획득
        3. 상품 조회 및 재고 충분성 확인
        4. 재고 차감
        5. 락 해제

        Raises:
            ValidationException: 수량이 양수가 아닌 경우
            ProductNotFoundException: 상품을 찾을 수 없는 경우
            InsufficientStockException: 재고가 부족한 경우 (재고는 변경되지 않음)
        """
        errors = validate_quantity(quantity)
        if errors:
            logger.warning("Sale rejected: invalid quantity %r", quantity)
            raise ValidationException(errors)

        with store.lock:
            product = store.get(product_id)
            if product is None:
                logger.warning("Sale rejected: product %r not found", product_id)
                raise ProductNotFoundException(product_id)

            if product.stock < quantity:
                logger.warning(
                    "Sale rejected: product %s has %s in stock, %s requested",
                    product.id,
                    product.stock,
                    quantity,
                    extra={"product_id": product.id},
                )
                raise InsufficientStockException(product.id, quantity, product.stock)

            product.stock -= quantity
            remaining = product.stock

        logger.info(
            "Product %s sold: quantity=%s remaining=%s",
            product.id,
            quantity,
            remaining,
            extra={"product_id": product.id},
        )
        return SaleResult(product=product, sold_quantity=quantity, remaining_stock=remaining)

    @staticmethod
    def search_products(keyword: Any, store: ProductStore) -> list[Product]:
        """
        상품명 또는 SKU에 키워드가 포함된 상품을 검색합니다 (대소문자 무시).

        Raises:
            ValidationException: 키워드가 없거나 공백인 경우
        """
        errors = validate_keyword(keyword)
        if errors:
            raise ValidationException(errors)

        needle = keyword.lower()
        return [
            product
            for product in store.all()
            if needle in product.name.lower() or needle in product.sku.lower()
        ]

    @staticmethod
    def bulk_update_prices(updates: Any, store: ProductStore) -> BulkPriceUpdateResult:
        """
        여러 상품의 가격을 한 번에 수정합니다.

        각 항목은 독립적으로 처리되며 한 항목의 실패가 나머지 항목에
        영향을 주지 않습니다 (롤백 없음). 같은 상품이 여러 번 나오면
        마지막 항목의 가격이 적용됩니다.

        Args:
            updates: [{"productId": 1, "newPrice": 55}, ...]
            store: 상품 저장소

        Returns:
            BulkPriceUpdateResult (summary.total == success + failed)

        Raises:
            ValidationException: updates가 리스트가 아닌 경우
        """
        if not isinstance(updates, list):
            raise ValidationException(["updates ต้องเป็น array"])

        result = BulkPriceUpdateResult()
        result.summary.total = len(updates)

        for item in updates:
            if not isinstance(item, dict):
                item = {}
            product_id = item.get("productId")
            new_price = item.get("newPrice")

            with store.lock:
                product = store.get(product_id)
                updated = product is not None and is_valid_price(new_price)
                if updated:
                    product.price = new_price

            if updated:
                result.summary.success += 1
                result.results.append(
                    PriceUpdateItemResult(product_id, "success", "อัพเดทราคาสำเร็จ")
                )
            else:
                result.summary.failed += 1
                message = "ราคาไม่ถูกต้อง" if product is not None else "ไม่พบสินค้า"
                result.results.append(PriceUpdateItemResult(product_id, "failed", message))

        logger.info(
            "Bulk price update: total=%s success=%s failed=%s",
            result.summary.total,
            result.summary.success,
            result.summary.failed,
        )
        return result
