"""
스크립트 리졸버

로컬 경로, 스크립트 URL, 저장소 참조를 의존성이 해석된 스크립트 프로젝트로 만들고
캐시합니다.
"""

from .exceptions import ScriptResolverException, format_error
from .models import ResolvedScript, ScriptSource, ScriptSourceType
from .scripts import ScriptResolver

__all__ = [
    "ScriptResolver",
    "ScriptResolverException",
    "ResolvedScript",
    "ScriptSource",
    "ScriptSourceType",
    "format_error",
]
