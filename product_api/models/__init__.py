"""
도메인 모델

모든 모델을 이 모듈에서 import하여 export합니다.
"""

from product_api.models.product import Product

__all__ = ["Product"]
