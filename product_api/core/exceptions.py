"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
모든 예외는 클라이언트에 그대로 전달할 에러 메시지 목록(errors)을 가집니다.
"""


class ValidationException(Exception):
    """
    요청 데이터가 비즈니스 규칙을 위반할 때 발생하는 예외

    실패한 모든 규칙의 메시지를 순서대로 담습니다.

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        self.message = ", ".join(self.errors)
        super().__init__(self.message)


class ProductNotFoundException(Exception):
    """
    상품을 찾을 수 없을 때 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, product_id):
        self.product_id = product_id
        self.message = "ไม่พบสินค้าในระบบ"
        self.errors = [self.message]
        super().__init__(self.message)


class InsufficientStockException(Exception):
    """
    재고 부족 시 발생하는 예외

    HTTP Status Code: 400 Bad Request
    """

    def __init__(self, product_id: int, requested, available):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        self.message = f"สต็อกไม่เพียงพอ (มีเพียง {available} ชิ้น)"
        self.errors = [self.message]
        super().__init__(self.message)
