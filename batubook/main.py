"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 오류 처리기, 라우터 등록.

FastAPI application entry point.
Configures logging, request logging, CORS, the global error handlers that
produce the uniform error body, the health check and the ``/api`` router.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from batubook.api import api_router
from batubook.config import settings
from batubook.middleware.request_logging import RequestLoggingMiddleware
from batubook.schemas.common import ErrorResponse
from batubook.utils.exceptions import CustomException, ErrorCode
from batubook.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 시작/종료 훅.

    Configure logging on startup and log the lifecycle.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    logger.info("%s starting", settings.APP_NAME)
    yield
    logger.info("%s shutting down", settings.APP_NAME)


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# 요청 로깅 미들웨어 — CORS보다 먼저 등록 (Registered before CORS to capture all requests)
app.add_middleware(RequestLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(
    request: Request,
    status_code: int,
    message: str,
    error_code: ErrorCode,
    details: list[str] | None = None,
) -> JSONResponse:
    """통일된 오류 응답 본문을 생성합니다.

    Build the uniform error body: timestamp, message, path, code, details.
    """
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        message=message,
        path=request.url.path,
        code=error_code.code,
        details=details if details is not None else [error_code.description],
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """도메인 예외 및 프레임워크 HTTP 예외 처리기.

    Handles CustomException subclasses and framework HTTP errors
    (unknown route, method not allowed) alike.
    """
    if isinstance(exc, CustomException):
        error_code = exc.error_code
    else:
        error_code = ErrorCode.from_status(exc.status_code)
    message = exc.detail if isinstance(exc.detail, str) else error_code.description
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, message)
    return error_response(request, exc.status_code, message, error_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 오류를 400으로 변환합니다. 필드별 상세를 포함합니다.

    Turn request validation failures into 400 with one detail per field.
    """
    details = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return error_response(
        request, status.HTTP_400_BAD_REQUEST, "Validation failed", ErrorCode.BAD_REQUEST, details
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """DB 제약 조건 위반을 400으로 변환합니다.

    Constraint violations raised at flush time become 400 responses.
    """
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "The request violates a data integrity constraint.",
        ErrorCode.BAD_REQUEST,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
        ErrorCode.INTERNAL_SERVER_ERROR,
        ["Please contact support."],
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


app.include_router(api_router, prefix="/api")
