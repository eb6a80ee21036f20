import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api.api.routes import products
from product_api.core.config import get_settings
from product_api.core.logging_config import setup_logging
from product_api.db.store import ProductStore


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "เกิดข้อผิดพลาดภายในเซิร์ฟเวอร์"

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "%s started (env=%s, port=%s)", settings.app_name, settings.app_env, settings.port
    )
    yield


app = FastAPI(
    title=settings.app_name,
    description="인메모리 상품/재고 관리 API",
    version="0.1.0",
    lifespan=lifespan,
)

# 프로세스 전체에서 공유하는 인메모리 저장소 (재시작 시 초기화)
app.state.store = ProductStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(products.router, prefix="/api", tags=["products"])


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTPException을 {"errors": [...]} 형태로 변환"""
    errors = exc.detail if isinstance(exc.detail, list) else [str(exc.detail)]
    return JSONResponse(
        status_code=exc.status_code,
        content={"errors": errors},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    """잘못된 JSON, 객체가 아닌 요청 본문 등을 400으로 응답"""
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        errors.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    logger.warning(
        "Request validation failed: %s",
        errors,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """처리되지 않은 예외는 로그를 남기고 일반 메시지로 500 응답"""
    logger.exception(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"errors": [INTERNAL_ERROR_MESSAGE]},
    )


@app.get("/")
async def root():
    """루트 엔드포인트 (사용 가능한 API 목록)"""
    return {
        "message": settings.app_name,
        "endpoints": {
            "createProduct": "POST /api/products",
            "getProducts": "GET /api/products",
            "getProductsByCategory": "GET /api/products?category=อาหาร",
            "sellProduct": "POST /api/products/sell",
            "searchProducts": "GET /api/products/search?keyword=ข้าว",
            "bulkUpdatePrice": "PUT /api/products/bulk-price-update",
        },
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}


def run() -> None:
    """uvicorn으로 API 서버 실행 (console script: product-api)"""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
