"""
상품 관리 API 엔드포인트

상품 생성, 목록/카테고리 조회, 판매(재고 차감), 검색, 일괄 가격 수정 기능을 제공합니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from product_api.core.exceptions import (
    InsufficientStockException,
    ProductNotFoundException,
    ValidationException,
)
from product_api.db.store import ProductStore, get_store
from product_api.schemas.product import (
    BulkPriceUpdateRequest,
    BulkPriceUpdateResponse,
    ErrorResponse,
    ProductCreateRequest,
    ProductResponse,
    SellRequest,
    SellResponse,
)
from product_api.services.product_service import ProductService


router = APIRouter()

_error_responses = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_error_responses,
)
def create_product(
    product_data: Optional[ProductCreateRequest] = None,
    store: ProductStore = Depends(get_store),
):
    """
    새 상품을 생성합니다.

    Args:
        product_data: 상품 생성 정보 (name, sku, price, stock, category)
        store: 상품 저장소

    Returns:
        ProductResponse: 생성된 상품 정보

    Raises:
        HTTPException 400: 검증 실패 (실패한 모든 규칙의 메시지 포함)

    Example:
        Request:
        ```json
        {"name": "Rice", "sku": "RIC001", "price": 50, "stock": 10, "category": "อาหาร"}
        ```

        Response (201):
        ```json
        {
            "id": 1,
            "name": "Rice",
            "sku": "RIC001",
            "price": 50,
            "stock": 10,
            "category": "อาหาร",
            "createdAt": "2025-01-22T10:30:00.000Z"
        }
        ```
    """
    # 본문이 없으면 빈 객체로 취급하여 모든 검증 메시지를 돌려줌
    product_data = product_data or ProductCreateRequest()
    try:
        return ProductService.create_product(product_data.model_dump(), store)

    except ValidationException as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.errors,
        )


@router.get("/products", response_model=List[ProductResponse])
def list_products(
    category: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    """
    상품 목록을 조회합니다.

    category 쿼리 파라미터가 있으면 해당 카테고리와 정확히 일치하는 상품만 반환합니다.
    존재하지 않는 카테고리는 빈 배열을 반환합니다.
    """
    return ProductService.list_products(store, category=category)


@router.post("/products/sell", response_model=SellResponse, responses=_error_responses)
def sell_product(
    sell_data: Optional[SellRequest] = None,
    store: ProductStore = Depends(get_store),
):
    """
    상품을 판매하고 재고를 차감합니다.

    재고 확인과 차감은 저장소 락 안에서 하나의 단계로 수행되므로
    동시에 들어온 판매 요청이 재고를 음수로 만들 수 없습니다.

    Raises:
        HTTPException 400: 수량 오류, 상품 없음, 재고 부족

    Example:
        Request:
        ```json
        {"productId": 1, "quantity": 3}
        ```

        Response (200):
        ```json
        {"product": {...}, "soldQuantity": 3, "remainingStock": 7}
        ```
    """
    sell_data = sell_data or SellRequest()
    try:
        return ProductService.sell_product(sell_data.product_id, sell_data.quantity, store)

    except (
        ValidationException,
        ProductNotFoundException,
        InsufficientStockException,
    ) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.errors,
        )


@router.get(
    "/products/search",
    response_model=List[ProductResponse],
    responses=_error_responses,
)
def search_products(
    keyword: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    """
    상품명 또는 SKU로 상품을 검색합니다 (부분 일치, 대소문자 무시).

    Raises:
        HTTPException 400: keyword가 없거나 공백인 경우
    """
    try:
        return ProductService.search_products(keyword, store)

    except ValidationException as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.errors,
        )


@router.put(
    "/products/bulk-price-update",
    response_model=BulkPriceUpdateResponse,
    responses=_error_responses,
)
def bulk_update_prices(
    update_data: Optional[BulkPriceUpdateRequest] = None,
    store: ProductStore = Depends(get_store),
):
    """
    여러 상품의 가격을 한 번에 수정합니다.

    항목별로 독립 처리하며 일부 항목이 실패해도 나머지는 적용됩니다.

    Example:
        Request:
        ```json
        {"updates": [{"productId": 1, "newPrice": 55}, {"productId": 99, "newPrice": 10}]}
        ```

        Response (200):
        ```json
        {
            "summary": {"total": 2, "success": 1, "failed": 1},
            "results": [
                {"productId": 1, "status": "success", "message": "อัพเดทราคาสำเร็จ"},
                {"productId": 99, "status": "failed", "message": "ไม่พบสินค้า"}
            ]
        }
        ```
    """
    update_data = update_data or BulkPriceUpdateRequest()
    try:
        return ProductService.bulk_update_prices(update_data.updates, store)

    except ValidationException as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.errors,
        )
