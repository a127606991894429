"""
로깅 시스템 모듈

한국어 로깅을 지원하는 통합 로깅 시스템과 진행 상황 리포터를 제공합니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Callable, Optional

ROOT_LOGGER_NAME = "script_resolver"


class KoreanFormatter(logging.Formatter):
    """한국어 로그 메시지를 위한 커스텀 포맷터"""

    LEVEL_MAPPING = {
        'DEBUG': '디버그',
        'INFO': '정보',
        'WARNING': '경고',
        'ERROR': '오류',
        'CRITICAL': '치명적'
    }

    def format(self, record: logging.LogRecord) -> str:
        """
        로그 레코드를 한국어 형식으로 포맷팅

        Args:
            record: 로그 레코드

        Returns:
            str: 포맷된 로그 메시지
        """
        original_levelname = record.levelname
        record.levelname = self.LEVEL_MAPPING.get(original_levelname, original_levelname)

        try:
            return super().format(record)
        finally:
            # 원래 레벨명 복원
            record.levelname = original_levelname


def setup_logging(settings) -> logging.Logger:
    """
    한국어 로깅 시스템 설정

    Args:
        settings: 리졸버 설정 객체

    Returns:
        logging.Logger: 설정된 로거 객체
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper()))

    # 기존 핸들러 제거 (중복 방지)
    logger.handlers.clear()

    formatter = KoreanFormatter(
        fmt=settings.log_format,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_file:
        log_file_path = Path(settings.log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        # 로테이팅 파일 핸들러 (10MB, 5개 백업)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    logger.debug("로깅 시스템이 초기화되었습니다")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    특정 이름의 로거를 반환합니다

    Args:
        name: 로거 이름 (보통 모듈의 __name__)

    Returns:
        logging.Logger: 로거 객체
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class ProgressReporter:
    """
    진행 상황 리포터

    메시지를 로그로 남기고 선택적으로 콜백에 전달합니다.
    호출자는 반환값을 기다리지 않으며 콜백 오류는 파이프라인을 멈추지 않습니다.
    """

    def __init__(self, callback: Optional[Callable[[str], None]] = None):
        self.callback = callback
        self.logger = get_logger("progress")

    def report_progress(self, message: str) -> None:
        """진행 상황 메시지 전달"""
        self.logger.info(message)

        if self.callback is None:
            return

        try:
            self.callback(message)
        except Exception as e:
            self.logger.warning(f"진행 상황 콜백 오류: {e}")
