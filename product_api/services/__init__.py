"""비즈니스 로직 서비스."""

from product_api.services.product_service import ProductService

__all__ = ["ProductService"]
