"""
로깅 설정

logging.config.dictConfig로 루트 로거를 구성합니다.
애플리케이션 lifespan 시작 시 호출되며, 다시 호출하면 이전 구성을 대체합니다.

LOG_FORMAT 설정값:
    text - 개발용 한 줄 포맷
    json - 로그 수집기용 구조화 포맷 (product_id, sku, method, path 포함)
"""

import json
import logging
import logging.config
from datetime import datetime, timezone


# 로그 레코드의 extra 중 JSON 출력에 포함할 필드
CONTEXT_FIELDS = ("product_id", "sku", "method", "path")

TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """로그 레코드를 한 줄 JSON 객체로 출력"""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "time": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (name, getattr(record, name))
            for name in CONTEXT_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def build_logging_config(level: str = "INFO", fmt: str = "text") -> dict:
    """
    dictConfig용 설정 딕셔너리를 만듭니다.

    Args:
        level: 로그 레벨 이름. 알 수 없는 값이면 INFO
        fmt: "json" 또는 "text"

    Returns:
        logging.config.dictConfig에 전달할 딕셔너리
    """
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {"format": TEXT_FORMAT},
            "json": {"()": JSONFormatter},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if fmt == "json" else "text",
            },
        },
        "root": {"level": level_name, "handlers": ["console"]},
    }


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    logging.config.dictConfig(build_logging_config(level, fmt))
