"""요청 로깅 미들웨어.

Request logging middleware.
Every request is logged through the standard logger (method, path,
status, duration). When Axiom is configured the same event, enriched
with masked query/body data and the error message, is ingested into the
configured dataset. Sensitive fields (password, token, secret) are masked.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from batubook.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴 — Keys masked in logged bodies and query strings
SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths not logged
SKIP_PATHS: frozenset[str] = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드를 재귀적으로 마스킹합니다.

    Recursively replace values of sensitive keys with ``"***"``.
    Nesting deeper than five levels and lists longer than twenty items
    are cut off.
    """
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            key: "***" if SENSITIVE_KEYS.search(str(key)) else mask_sensitive(value, depth + 1)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def error_message(body: bytes) -> str:
    """오류 응답 본문에서 메시지를 추출합니다.

    Pull ``message`` out of an error body, falling back to the raw text.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:500]
    if isinstance(payload, dict) and "message" in payload:
        return str(payload["message"])[:500]
    return str(payload)[:500]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청을 로깅하고 선택적으로 Axiom에 전송하는 미들웨어.

    Middleware that logs every API request and, when configured, ships
    the event to Axiom.
    """

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET
        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_body(self, request: Request) -> Any:
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        body = await request.body()
        if not body:
            return None
        try:
            return mask_sensitive(json.loads(body))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        event: dict[str, Any] = {"method": request.method, "path": request.url.path, "status_code": 500}
        if self._client is not None:
            if request.query_params:
                event["query_params"] = mask_sensitive(dict(request.query_params))
            request_body = await self._read_body(request)
            if request_body is not None:
                event["request_body"] = request_body

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code
            if response.status_code >= 400 and self._client is not None:
                # 본문을 소비했으므로 새 응답으로 다시 감싼다 — Body consumed; re-wrap it
                body = b"".join(
                    [
                        chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                        async for chunk in response.body_iterator
                    ]
                )
                event["error"] = error_message(body)
                response = Response(
                    content=body,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "%s %s -> %s (%.2f ms)",
                event["method"], event["path"], event["status_code"], event["duration_ms"],
            )
            self._ship(event)

        return response

    def _ship(self, event: dict[str, Any]) -> None:
        """이벤트를 Axiom에 전송합니다. 실패는 경고로만 남깁니다.

        Ingest the event into Axiom; failures are logged as warnings.
        """
        if self._client is None:
            return
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception as exc:
            logger.warning("Axiom ingest failed: %s", exc)
