"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides a single CustomException hierarchy whose members carry an ErrorCode,
so the global handlers in ``batubook.main`` can emit one uniform error body.
Services raise these directly; no status codes are chosen at call sites.

Usage:
    from batubook.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Book not found with ID: ...")
    raise BadRequestError("Password cannot be empty.")
"""

from enum import Enum

from fastapi import HTTPException, status


class ErrorCode(Enum):
    """오류 코드 — 응답 본문의 code/details 값.

    Error codes emitted in the ``code`` field of the error body.
    Each member carries a machine code and a human description.
    """

    BAD_REQUEST = ("BAD_REQUEST", "The request is invalid.")
    UNAUTHORIZED = ("UNAUTHORIZED", "You are not authorized to perform this action.")
    FORBIDDEN = ("FORBIDDEN", "Access to this resource is forbidden.")
    NOT_FOUND = ("NOT_FOUND", "The requested resource was not found.")
    INTERNAL_SERVER_ERROR = ("INTERNAL_SERVER_ERROR", "An internal server error occurred.")

    def __init__(self, code: str, description: str) -> None:
        self.code: str = code
        self.description: str = description

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorCode":
        """HTTP 상태 코드에 대응하는 오류 코드를 반환합니다.

        Map an HTTP status to the closest error code (used for framework
        exceptions such as 404 on unknown routes or 405).
        """
        if status_code == status.HTTP_401_UNAUTHORIZED:
            return cls.UNAUTHORIZED
        if status_code == status.HTTP_403_FORBIDDEN:
            return cls.FORBIDDEN
        if status_code == status.HTTP_404_NOT_FOUND:
            return cls.NOT_FOUND
        if status_code >= 500:
            return cls.INTERNAL_SERVER_ERROR
        return cls.BAD_REQUEST


class CustomException(HTTPException):
    """모든 도메인 예외의 부모 클래스.

    Base class of every domain exception.
    Carries the HTTP status and its ErrorCode; ``detail`` is the message.

    Args:
        status_code: HTTP 상태 코드 (HTTP status code)
        detail: 오류 메시지 (Error message)
        error_code: 오류 코드 (Error code for the response body)
    """

    def __init__(self, status_code: int, detail: str, error_code: ErrorCode) -> None:
        super().__init__(status_code=status_code, detail=detail)
        self.error_code: ErrorCode = error_code


class BadRequestError(CustomException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. message exclusivity violations, duplicate follows, unread-but-liked books).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, detail, ErrorCode.BAD_REQUEST)


class UnauthorizedError(CustomException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status.HTTP_401_UNAUTHORIZED, detail, ErrorCode.UNAUTHORIZED)


class ForbiddenError(CustomException):
    """403 Forbidden 예외 — 권한 부족 시 사용.

    403 Forbidden exception.

    Args:
        detail: 오류 메시지 (Error message, default: "Insufficient permissions")
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status.HTTP_403_FORBIDDEN, detail, ErrorCode.FORBIDDEN)


class NotFoundError(CustomException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (user, book, review, etc.) does not exist,
    including entities referenced by id inside a request body.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, detail, ErrorCode.NOT_FOUND)


class InternalServerError(CustomException):
    """500 Internal Server Error 예외.

    500 Internal Server Error exception for failures the client cannot fix.

    Args:
        detail: 오류 메시지 (Error message, default: "An internal server error occurred.")
    """

    def __init__(self, detail: str = "An internal server error occurred.") -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail, ErrorCode.INTERNAL_SERVER_ERROR)
