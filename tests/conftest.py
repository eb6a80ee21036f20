"""
pytest 픽스처 정의
"""

import pytest
from fastapi.testclient import TestClient

from product_api.db.store import ProductStore, get_store
from product_api.main import app


@pytest.fixture(scope="function")
def store() -> ProductStore:
    """
    테스트용 인메모리 저장소 픽스처

    각 테스트 함수마다 비어 있는 새 저장소를 생성합니다 (ID는 1부터 시작).
    """
    return ProductStore()


@pytest.fixture(scope="function")
def test_client(store):
    """각 테스트마다 새 저장소를 주입한 TestClient 픽스처"""

    def override_get_store():
        return store

    app.dependency_overrides[get_store] = override_get_store

    with TestClient(app) as client:
        yield client

    # 정리
    app.dependency_overrides.clear()


@pytest.fixture
def rice_data():
    """기본 상품 생성 데이터"""
    return {
        "name": "Rice",
        "sku": "RIC001",
        "price": 50,
        "stock": 10,
        "category": "อาหาร",
    }
