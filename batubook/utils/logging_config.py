"""로깅 설정 모듈.

Logging configuration for the API process.
Console output is always enabled; a rotating file handler is added
when ``settings.LOG_FILE`` is set.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_level: str = "INFO",
    log_file: str = "",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """루트 로거에 콘솔(및 선택적 파일) 핸들러를 설정합니다.

    Configure the root logger with a console handler and, optionally,
    a rotating file handler. Safe to call more than once.

    Args:
        log_level: 로그 레벨 이름 (Level name, e.g. "INFO")
        log_file: 로그 파일 경로, 빈 문자열이면 파일 로깅 비활성 (File path, empty disables file logging)
        max_bytes: 파일 회전 크기 (Rotation size in bytes)
        backup_count: 보관할 회전 파일 수 (Number of rotated files to keep)

    Returns:
        logging.Logger: 설정된 루트 로거 (The configured root logger)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)

    # 라이브러리 로그 축소 — Reduce library noise
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    root_logger.info("Logging initialized: level=%s, file=%s", log_level, log_file or "-")
    return root_logger
