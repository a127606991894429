"""
스크립트 참조 분류 모듈

사용자가 입력한 참조 문자열을 로컬 파일, 직접 URL, 저장소 참조 중 하나로 분류합니다.

참조 문법:
    <경로 | URL | owner/name>[,branch:<브랜치>]
"""

from pathlib import Path
from typing import List, Optional, Tuple

from ..exceptions import (
    InvalidReferenceModifierException,
    RemoteScriptNotAllowedException,
    ScriptNotFoundException,
)
from ..models import ScriptSource
from ..utils.helpers import is_resolvable_url
from ..utils.logging import get_logger

logger = get_logger(__name__)

MODIFIER_SEPARATOR = ","
BRANCH_MODIFIER = "branch:"
REMOTE_PREFIXES = ("http", "git@")
REPOSITORY_SUFFIX = ".git"


class ReferenceClassifier:
    """스크립트 참조 분류기"""

    def __init__(self, settings):
        """
        분류기 초기화

        Args:
            settings: 리졸버 설정
        """
        self.settings = settings
        self.logger = logger

    def classify(self, reference: str, allow_remote: bool = True) -> ScriptSource:
        """
        참조 문자열 분류

        Args:
            reference: 사용자가 입력한 참조 문자열
            allow_remote: 원격 참조 허용 여부

        Returns:
            분류된 스크립트 참조

        Raises:
            ScriptNotFoundException: 어떤 종류로도 해석할 수 없을 때
            RemoteScriptNotAllowedException: 원격 참조가 허용되지 않을 때
            InvalidReferenceModifierException: 알 수 없는 수정자가 포함되었을 때
        """
        local_file = self.find_local_file(reference)
        if local_file is not None:
            self.logger.debug(f"로컬 파일 참조: {local_file}")
            return ScriptSource.local_file(local_file)

        primary, branch = self.parse_reference(reference)

        if primary.startswith(REMOTE_PREFIXES):
            if not allow_remote:
                raise RemoteScriptNotAllowedException()

            if not is_resolvable_url(primary):
                raise ScriptNotFoundException(reference)

            if primary.endswith(REPOSITORY_SUFFIX):
                self.logger.debug(f"저장소 참조: {primary} (브랜치: {branch or '기본'})")
                return ScriptSource.repository(primary, branch)

            if branch:
                self.logger.warning(f"직접 URL 참조에는 브랜치가 적용되지 않습니다: {reference}")

            self.logger.debug(f"직접 URL 참조: {primary}")
            return ScriptSource.direct_url(primary)

        # 점이 포함된 참조는 owner/name 축약형일 수 없음
        if not primary or "." in primary:
            raise ScriptNotFoundException(reference)

        if not allow_remote:
            raise RemoteScriptNotAllowedException()

        url = f"https://{self.settings.repository_host}/{primary}{REPOSITORY_SUFFIX}"
        if not is_resolvable_url(url):
            raise ScriptNotFoundException(reference)

        self.logger.debug(f"축약형 저장소 참조: {primary} -> {url}")
        return ScriptSource.repository(url, branch)

    def find_local_file(self, reference: str) -> Optional[Path]:
        """확장자를 보완한 참조가 존재하는 로컬 파일이면 정규화된 경로 반환"""
        extension = self.settings.source_extension
        candidate = reference if reference.endswith(extension) else reference + extension

        try:
            path = Path(candidate).expanduser()
            if path.is_file():
                return path.resolve()
        except (OSError, ValueError):
            return None

        return None

    def parse_reference(self, reference: str) -> Tuple[str, Optional[str]]:
        """
        참조를 기본 참조와 브랜치 수정자로 분리

        Args:
            reference: 참조 문자열

        Returns:
            (기본 참조, 브랜치) 튜플
        """
        components: List[str] = reference.split(MODIFIER_SEPARATOR)
        primary = components[0].strip()
        branch = None

        for component in components[1:]:
            modifier = component.lstrip()

            if not modifier.startswith(BRANCH_MODIFIER):
                raise InvalidReferenceModifierException(reference, component)

            branch = modifier[len(BRANCH_MODIFIER):].strip()
            if not branch:
                raise InvalidReferenceModifierException(reference, component)

        return primary, branch
