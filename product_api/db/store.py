"""
인메모리 상품 저장소

프로세스 메모리에만 상품을 보관하며 재시작 시 모든 데이터가 사라집니다.
애플리케이션마다 하나의 ProductStore를 생성하여 app.state에 보관하고,
라우트 핸들러에는 get_store 의존성으로 전달합니다.
"""

import threading
from typing import Optional

from fastapi import Request

from product_api.models import Product


class ProductStore:
    """상품 목록과 ID 카운터를 캡슐화한 저장소."""

    def __init__(self):
        self._products: list[Product] = []
        self._next_id = 1
        # FastAPI는 동기 핸들러를 스레드 풀에서 실행하므로
        # 확인 후 변경(check-then-act) 구간은 반드시 이 락 안에서 수행해야 함
        self.lock = threading.RLock()

    def add(
        self,
        name: str,
        sku: str,
        price: int | float,
        stock: int | float,
        category: str,
    ) -> Product:
        """
        다음 ID를 발급하여 상품을 추가합니다.

        Returns:
            생성된 Product 객체
        """
        with self.lock:
            product = Product(
                id=self._next_id,
                name=name,
                sku=sku,
                price=price,
                stock=stock,
                category=category,
            )
            self._next_id += 1
            self._products.append(product)
            return product

    def all(self) -> list[Product]:
        """등록 순서대로 전체 상품 목록(복사본)을 반환합니다."""
        with self.lock:
            return list(self._products)

    def get(self, product_id) -> Optional[Product]:
        """
        상품 ID로 상품을 조회합니다.

        정수가 아닌 ID("1", 1.0, True 등)는 어떤 상품과도 일치하지 않습니다.

        Returns:
            Product 객체 또는 None
        """
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            return None
        with self.lock:
            for product in self._products:
                if product.id == product_id:
                    return product
        return None

    def sku_exists(self, sku: str) -> bool:
        with self.lock:
            return any(product.sku == sku for product in self._products)

    def clear(self) -> None:
        """모든 상품을 삭제하고 ID 카운터를 초기화합니다."""
        with self.lock:
            self._products.clear()
            self._next_id = 1

    def __len__(self) -> int:
        return len(self._products)


def get_store(request: Request) -> ProductStore:
    """
    FastAPI 의존성 주입용 저장소 조회 함수

    사용 예:
        @router.get("/products")
        def list_products(store: ProductStore = Depends(get_store)):
            return ProductService.list_products(store)
    """
    return request.app.state.store
