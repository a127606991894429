"""
데이터 모델 패키지

리졸버의 핵심 데이터 모델들을 정의합니다.
"""

from .base import DependencySet, ResolvedScript, ScriptSource
from .enums import ScriptSourceType

__all__ = [
    "ScriptSource",
    "ScriptSourceType",
    "DependencySet",
    "ResolvedScript",
]
