"""Tests for ProductService."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from product_api.core.exceptions import (
    InsufficientStockException,
    ProductNotFoundException,
    ValidationException,
)
from product_api.db.store import ProductStore
from product_api.services.product_service import ProductService


def _create(store: ProductStore, sku: str, name: str, category: str = "อาหาร", stock=10):
    return ProductService.create_product(
        {"name": name, "sku": sku, "price": 20, "stock": stock, "category": category},
        store,
    )


class TestCreateProduct:
    """Test: 상품 생성 테스트"""

    def test_create_product_success(self, store: ProductStore, rice_data):
        """Test: 상품 생성 성공"""
        product = ProductService.create_product(rice_data, store)

        assert product.id == 1
        assert product.name == "Rice"
        assert product.sku == "RIC001"
        assert product.price == 50
        assert product.stock == 10
        assert product.category == "อาหาร"
        assert product.created_at is not None
        assert store.all() == [product]

    def test_ids_strictly_increase(self, store: ProductStore):
        """Test: 새 상품의 ID는 기존 모든 ID보다 큼"""
        ids = [_create(store, f"SKU{i}", f"Item {i}").id for i in range(5)]

        assert ids == sorted(ids)
        assert len(set(ids)) == 5

    def test_duplicate_sku_leaves_store_unchanged(self, store: ProductStore, rice_data):
        """Test: SKU 중복 시 검증 에러, 저장소 변경 없음"""
        ProductService.create_product(rice_data, store)

        with pytest.raises(ValidationException) as exc_info:
            ProductService.create_product(dict(rice_data, name="Other Rice"), store)

        assert exc_info.value.errors == ["รหัสสินค้านี้มีอยู่แล้วในระบบ"]
        assert len(store.all()) == 1

    def test_failed_creation_does_not_consume_id(self, store: ProductStore, rice_data):
        """Test: 검증 실패 시 ID 카운터가 증가하지 않음"""
        with pytest.raises(ValidationException):
            ProductService.create_product({}, store)

        assert ProductService.create_product(rice_data, store).id == 1

    def test_concurrent_duplicate_sku_creates_once(self, store: ProductStore, rice_data):
        """Test: 같은 SKU로 동시에 생성해도 하나만 저장됨"""

        def attempt(_):
            try:
                ProductService.create_product(dict(rice_data), store)
                return True
            except ValidationException:
                return False

        with ThreadPoolExecutor(max_workers=10) as executor:
            results = list(executor.map(attempt, range(20)))

        assert results.count(True) == 1
        assert len(store.all()) == 1


class TestListProducts:
    """Test: 상품 목록 조회 테스트"""

    def test_list_products_empty(self, store: ProductStore):
        assert ProductService.list_products(store) == []

    def test_list_all_in_insertion_order(self, store: ProductStore):
        _create(store, "RIC001", "Rice")
        _create(store, "COL001", "Cola", category="เครื่องดื่ม")
        _create(store, "SOA001", "Soap", category="ของใช้")

        products = ProductService.list_products(store)

        assert [p.sku for p in products] == ["RIC001", "COL001", "SOA001"]

    def test_filter_by_category(self, store: ProductStore):
        _create(store, "RIC001", "Rice")
        _create(store, "COL001", "Cola", category="เครื่องดื่ม")
        _create(store, "NOO001", "Noodle")

        products = ProductService.list_products(store, category="อาหาร")

        assert [p.sku for p in products] == ["RIC001", "NOO001"]

    def test_unknown_category_returns_empty(self, store: ProductStore):
        _create(store, "RIC001", "Rice")

        assert ProductService.list_products(store, category="Food") == []

    def test_empty_category_returns_all(self, store: ProductStore):
        _create(store, "RIC001", "Rice")

        assert len(ProductService.list_products(store, category="")) == 1


class TestSellProduct:
    """Test: 상품 판매(재고 차감) 테스트"""

    def test_sell_success(self, store: ProductStore, rice_data):
        product = ProductService.create_product(rice_data, store)

        result = ProductService.sell_product(product.id, 3, store)

        assert result.product is product
        assert result.sold_quantity == 3
        assert result.remaining_stock == 7
        assert product.stock == 7

    def test_sell_entire_stock(self, store: ProductStore, rice_data):
        product = ProductService.create_product(rice_data, store)

        result = ProductService.sell_product(product.id, 10, store)

        assert result.remaining_stock == 0

    def test_insufficient_stock_leaves_stock_unchanged(self, store: ProductStore, rice_data):
        """Test: 재고 부족 시 에러 메시지에 현재 재고 표시, 재고 변경 없음"""
        product = ProductService.create_product(rice_data, store)
        ProductService.sell_product(product.id, 3, store)

        with pytest.raises(InsufficientStockException) as exc_info:
            ProductService.sell_product(product.id, 100, store)

        assert exc_info.value.errors == ["สต็อกไม่เพียงพอ (มีเพียง 7 ชิ้น)"]
        assert exc_info.value.available == 7
        assert product.stock == 7

    def test_product_not_found(self, store: ProductStore):
        with pytest.raises(ProductNotFoundException) as exc_info:
            ProductService.sell_product(999, 1, store)

        assert exc_info.value.errors == ["ไม่พบสินค้าในระบบ"]

    def test_string_product_id_is_not_found(self, store: ProductStore, rice_data):
        ProductService.create_product(rice_data, store)

        with pytest.raises(ProductNotFoundException):
            ProductService.sell_product("1", 1, store)

    @pytest.mark.parametrize("quantity", [0, -2, None, "3"])
    def test_invalid_quantity_checked_before_lookup(self, store: ProductStore, quantity):
        """Test: 수량 검증이 상품 조회보다 먼저 수행됨"""
        with pytest.raises(ValidationException) as exc_info:
            ProductService.sell_product(999, quantity, store)

        assert exc_info.value.errors == ["quantity ต้องมากกว่า 0"]

    def test_concurrent_sales_never_oversell(self, store: ProductStore):
        """Test: 동시 판매 요청에서도 재고가 음수가 되지 않음"""
        product = _create(store, "HOT001", "Hot Item", stock=50)

        def attempt(_):
            try:
                ProductService.sell_product(product.id, 3, store)
                return 3
            except InsufficientStockException:
                return 0

        with ThreadPoolExecutor(max_workers=16) as executor:
            sold = sum(executor.map(attempt, range(40)))

        assert product.stock >= 0
        assert sold == 48
        assert product.stock == 50 - sold


class TestSearchProducts:
    """Test: 상품 검색 테스트"""

    def test_search_by_name_case_insensitive(self, store: ProductStore):
        _create(store, "RIC001", "Jasmine Rice")
        _create(store, "COL001", "Cola", category="เครื่องดื่ม")

        products = ProductService.search_products("rice", store)

        assert [p.sku for p in products] == ["RIC001"]

    def test_search_by_sku_substring(self, store: ProductStore):
        _create(store, "RIC001", "Jasmine Rice")
        _create(store, "RIC002", "Sticky Rice")
        _create(store, "COL001", "Cola", category="เครื่องดื่ม")

        products = ProductService.search_products("ic00", store)

        assert [p.sku for p in products] == ["RIC001", "RIC002"]

    def test_search_thai_name(self, store: ProductStore):
        _create(store, "RIC001", "ข้าวหอมมะลิ")

        assert len(ProductService.search_products("ข้าว", store)) == 1

    def test_search_no_match(self, store: ProductStore):
        _create(store, "RIC001", "Rice")

        assert ProductService.search_products("zzz", store) == []

    @pytest.mark.parametrize("keyword", [None, "", "   "])
    def test_blank_keyword_is_error(self, store: ProductStore, keyword):
        with pytest.raises(ValidationException) as exc_info:
            ProductService.search_products(keyword, store)

        assert exc_info.value.errors == ["กรุณาระบุคำค้นหา"]


class TestBulkUpdatePrices:
    """Test: 일괄 가격 수정 테스트"""

    def test_mixed_results(self, store: ProductStore):
        rice = _create(store, "RIC001", "Rice")
        cola = _create(store, "COL001", "Cola", category="เครื่องดื่ม")

        result = ProductService.bulk_update_prices(
            [
                {"productId": rice.id, "newPrice": 55},
                {"productId": 999, "newPrice": 10},
                {"productId": cola.id, "newPrice": 0},
            ],
            store,
        )

        assert result.summary.total == 3
        assert result.summary.success == 1
        assert result.summary.failed == 2
        assert [(r.product_id, r.status, r.message) for r in result.results] == [
            (rice.id, "success", "อัพเดทราคาสำเร็จ"),
            (999, "failed", "ไม่พบสินค้า"),
            (cola.id, "failed", "ราคาไม่ถูกต้อง"),
        ]
        assert rice.price == 55
        assert cola.price == 20

    def test_last_write_wins(self, store: ProductStore):
        rice = _create(store, "RIC001", "Rice")

        result = ProductService.bulk_update_prices(
            [
                {"productId": rice.id, "newPrice": 60},
                {"productId": rice.id, "newPrice": 70},
            ],
            store,
        )

        assert result.summary.success == 2
        assert rice.price == 70

    def test_empty_updates(self, store: ProductStore):
        result = ProductService.bulk_update_prices([], store)

        assert (result.summary.total, result.summary.success, result.summary.failed) == (0, 0, 0)
        assert result.results == []

    def test_non_object_items_are_not_found(self, store: ProductStore):
        _create(store, "RIC001", "Rice")

        result = ProductService.bulk_update_prices([1, None, "x"], store)

        assert result.summary.failed == 3
        assert all(r.message == "ไม่พบสินค้า" for r in result.results)

    @pytest.mark.parametrize("updates", [None, {"productId": 1}, "updates"])
    def test_updates_must_be_list(self, store: ProductStore, updates):
        with pytest.raises(ValidationException) as exc_info:
            ProductService.bulk_update_prices(updates, store)

        assert exc_info.value.errors == ["updates ต้องเป็น array"]
