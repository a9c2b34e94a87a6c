"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schemas shared across resources.
"""

from datetime import datetime

from pydantic import BaseModel


class ExistsResponse(BaseModel):
    """존재 여부 응답 스키마.

    Boolean query response (``is-read``, ``check/...``, ``exists``).

    Attributes:
        exists: 존재 여부 (Whether the queried relation exists)
    """

    exists: bool  # 존재 여부 (Boolean result)


class ErrorResponse(BaseModel):
    """오류 응답 스키마 — 모든 오류가 이 형태로 반환됩니다.

    Uniform error body produced by the global exception handlers.

    Attributes:
        timestamp: 발생 시각 UTC (When the error occurred)
        message: 오류 메시지 (Error message)
        path: 요청 경로 (Request path)
        code: 오류 코드 (ErrorCode name, e.g. "NOT_FOUND")
        details: 상세 목록 (Detail lines, e.g. one per invalid field)
    """

    timestamp: datetime  # 발생 시각 UTC (Error timestamp)
    message: str  # 오류 메시지 (Error message)
    path: str  # 요청 경로 (Request path)
    code: str  # 오류 코드 (Error code)
    details: list[str]  # 상세 목록 (Detail lines)
