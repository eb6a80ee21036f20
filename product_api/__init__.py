"""인메모리 상품/재고 관리 API."""

__version__ = "0.1.0"
