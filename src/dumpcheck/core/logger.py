"""dumpcheck 통합 로깅.

- 콘솔 로깅: rich 핸들러 (stderr)
- 파일 로깅: 선택 사항, 5MB 로테이션, 최대 3개 백업
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "dumpcheck"

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거 반환.

    Args:
        name: 모듈 이름 (예: 'fact_extractor', 'dump_reader')

    Returns:
        dumpcheck 루트 로거 하위의 Logger
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """루트 로거에 핸들러를 설정한다.

    이미 핸들러가 있으면 레벨만 갱신한다.

    Args:
        level: 콘솔 로그 레벨 이름
        log_file: 로그 파일 경로 (None이면 파일 로깅 안 함)

    Returns:
        dumpcheck 루트 로거
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    console_level = logging.getLevelName(level.upper())
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    if root_logger.handlers:
        for handler in root_logger.handlers:
            if isinstance(handler, RichHandler):
                handler.setLevel(console_level)
        return root_logger

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format=LOG_DATE_FORMAT,
    )
    console_handler.setLevel(console_level)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root_logger.addHandler(file_handler)

    return root_logger
