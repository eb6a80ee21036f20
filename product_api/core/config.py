"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


# 상품 카테고리 (고정 목록, 순서는 에러 메시지에 그대로 노출됨)
VALID_CATEGORIES = ("อาหาร", "เครื่องดื่ม", "ของใช้", "เสื้อผ้า")


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # 서버 설정
    app_name: str = "Product Management API"
    host: str = "0.0.0.0"
    port: int = 3000

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"
    log_format: str = "text"  # text | json

    # CORS 설정
    cors_origins: str = "*"  # 쉼표로 구분된 origin 목록

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """
        CORS origin 목록 파싱

        Returns:
            ["http://localhost:5173", "https://shop.example.com", ...]
            빈 값이면 ["*"]
        """
        origins = [origin.strip() for origin in self.cors_origins.split(",")]
        origins = [origin for origin in origins if origin]
        return origins or ["*"]


def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수
    """
    return Settings()
