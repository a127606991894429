"""
원격 스크립트 저장소 모듈

HTTP로 단일 스크립트 파일을 내려받고 Git 저장소를 임시 폴더로 복제하는 기능을 제공합니다.
"""

from pathlib import Path
from typing import Optional

import git
import httpx

from ..utils.helpers import to_raw_content_url
from ..utils.logging import get_logger

logger = get_logger(__name__)


class HttpRepository:
    """HTTP 스크립트 저장소 클래스"""

    def __init__(self, settings, transport: Optional[httpx.BaseTransport] = None):
        """
        HTTP 저장소 초기화

        Args:
            settings: 리졸버 설정
            transport: httpx 전송 계층 (테스트용, None이면 기본값)
        """
        self.settings = settings
        self.transport = transport
        self.logger = logger

    def _create_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.settings.download_timeout,
            follow_redirects=True,
            transport=self.transport,
            headers={
                'User-Agent': 'script-resolver/1.0'
            }
        )

    def download(self, url: str) -> bytes:
        """
        URL의 파일 내용 다운로드

        Args:
            url: 파일 URL (GitHub 파일 페이지 URL은 원본 콘텐츠 URL로 변환)

        Returns:
            파일 내용

        Raises:
            httpx.HTTPError: 요청 실패 또는 오류 응답일 때
        """
        download_url = to_raw_content_url(url)

        with self._create_client() as client:
            response = client.get(download_url)
            response.raise_for_status()

        self.logger.debug(f"다운로드 완료: {download_url} ({len(response.content)} bytes)")
        return response.content

    def fetch_optional(self, url: str) -> Optional[bytes]:
        """
        선택적 파일 다운로드 (실패해도 오류로 취급하지 않음)

        Returns:
            파일 내용 (없거나 실패하면 None)
        """
        try:
            return self.download(url)
        except httpx.HTTPError as e:
            self.logger.debug(f"선택적 파일 없음: {url} - {e}")
            return None


class GitRepository:
    """Git 저장소 클래스"""

    def __init__(self, settings):
        self.settings = settings
        self.logger = logger

    def clone(self, url: str, destination: Path, branch: Optional[str] = None) -> Path:
        """
        저장소 복제

        Args:
            url: 저장소 URL
            destination: 복제할 폴더
            branch: 체크아웃할 브랜치 (None이면 기본 브랜치)

        Returns:
            복제된 폴더 경로

        Raises:
            git.GitError: 복제 실패 시
        """
        options = {}
        if branch:
            options['branch'] = branch

        git.Repo.clone_from(url, str(destination), **options)

        self.logger.info(f"저장소 복제 완료: {url} (브랜치: {branch or '기본'})")
        return destination
