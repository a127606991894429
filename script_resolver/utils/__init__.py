"""
유틸리티 패키지

공통으로 사용되는 유틸리티 함수들을 포함합니다.
"""

from .helpers import (
    empty_directory,
    ensure_directory,
    is_resolvable_url,
    parent_url,
    to_raw_content_url,
)
from .logging import ProgressReporter, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "ProgressReporter",
    "ensure_directory",
    "empty_directory",
    "is_resolvable_url",
    "to_raw_content_url",
    "parent_url",
]
