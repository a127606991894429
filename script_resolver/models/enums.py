"""
열거형 정의 모듈

리졸버에서 사용되는 상수 값들을 열거형으로 정의합니다.
"""

from enum import Enum


class ScriptSourceType(Enum):
    """스크립트 참조 종류 열거형"""
    LOCAL_FILE = "local_file"
    DIRECT_URL = "direct_url"
    REPOSITORY = "repository"
