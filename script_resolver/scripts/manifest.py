"""
의존성 매니페스트 관리 모듈

스크립트 옆에 위치하는 매니페스트 파일(기본값 Marathonfile)의 모델과 파싱 기능을 제공합니다.

형식:
    # 주석
    https://github.com/owner/package.git
    ../shared/helpers.swift
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlsplit

from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ScriptManifest:
    """매니페스트 모델"""

    path: Path
    package_urls: List[str] = field(default_factory=list)
    script_paths: List[str] = field(default_factory=list)


class ManifestParser:
    """매니페스트 파서"""

    def __init__(self, settings):
        """
        매니페스트 파서 초기화

        Args:
            settings: 리졸버 설정
        """
        self.settings = settings
        self.logger = logger

    def find_manifest(self, script_file: Path) -> Optional[Path]:
        """스크립트 옆의 매니페스트 파일 조회 (없으면 None)"""
        manifest_path = script_file.parent / self.settings.manifest_file_name
        return manifest_path if manifest_path.is_file() else None

    def parse_manifest_file(self, manifest_path: Path) -> ScriptManifest:
        """
        매니페스트 파일 파싱

        Args:
            manifest_path: 매니페스트 파일 경로

        Returns:
            파싱된 매니페스트 객체

        Raises:
            FileNotFoundError: 매니페스트 파일이 없을 때
        """
        if not manifest_path.exists():
            raise FileNotFoundError(f"매니페스트 파일을 찾을 수 없습니다: {manifest_path}")

        content = manifest_path.read_text(encoding='utf-8')
        manifest = self.parse_manifest(content, manifest_path)

        self.logger.debug(
            f"매니페스트 파싱 완료: {manifest_path} "
            f"(패키지 {len(manifest.package_urls)}개, 스크립트 {len(manifest.script_paths)}개)"
        )
        return manifest

    def parse_manifest(self, content: str, manifest_path: Path) -> ScriptManifest:
        """매니페스트 내용 파싱 (상대 경로는 매니페스트 폴더 기준)"""
        manifest = ScriptManifest(path=manifest_path)
        base_folder = manifest_path.parent

        for line in content.splitlines():
            entry = line.strip()
            if not entry or entry.startswith("#"):
                continue

            if entry.endswith(self.settings.source_extension):
                manifest.script_paths.append(self._resolve_local_path(entry, base_folder))
            else:
                manifest.package_urls.append(self._resolve_package_url(entry, base_folder))

        return manifest

    def _resolve_local_path(self, entry: str, base_folder: Path) -> str:
        if entry.startswith("file://"):
            entry = urlsplit(entry).path

        path = Path(entry).expanduser()
        if not path.is_absolute():
            path = base_folder / path

        return str(path)

    def _resolve_package_url(self, entry: str, base_folder: Path) -> str:
        # 원격 패키지는 그대로, 로컬 패키지 경로만 매니페스트 기준으로 보정
        if "://" in entry or entry.startswith("git@"):
            return entry
        return self._resolve_local_path(entry, base_folder)
