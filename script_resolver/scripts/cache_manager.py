"""
스크립트 캐시 관리 모듈

식별자별 캐시 폴더를 만들고, 원본 파일 링크와 Sources 트리를 관리합니다.

캐시 루트 구조:
    <root>/Cache/<식별자>/OriginalFile             (원본 스크립트 링크)
    <root>/Cache/<식별자>/Sources/<모듈>/main.swift
    <root>/Temp/<식별자>/                          (원격 스크립트 임시 폴더)
"""

import os
import shutil
from pathlib import Path
from typing import List, Optional

from ..exceptions import ScriptFolderRemovalException
from ..utils.helpers import empty_directory, ensure_directory
from ..utils.logging import get_logger

logger = get_logger(__name__)

ORIGINAL_FILE_NAME = "OriginalFile"
SOURCES_FOLDER_NAME = "Sources"


class CacheManager:
    """스크립트 캐시 관리자"""

    def __init__(self, settings):
        """
        캐시 매니저 초기화

        Args:
            settings: 리졸버 설정 (캐시 루트를 명시적으로 전달받음)
        """
        self.settings = settings
        self.logger = logger
        self.root_dir = settings.root_path
        self.cache_dir = ensure_directory(self.root_dir / "Cache")
        self.temp_dir = ensure_directory(self.root_dir / "Temp")

    def get_entry_folder(self, identifier: str) -> Path:
        """식별자에 해당하는 캐시 폴더 반환 (없으면 생성)"""
        return ensure_directory(self._child_folder(self.cache_dir, identifier))

    def find_entry_folder(self, identifier: str) -> Optional[Path]:
        """식별자에 해당하는 캐시 폴더 조회 (없거나 식별자가 유효하지 않으면 None)"""
        if not self.is_valid_identifier(identifier):
            return None

        folder = self.cache_dir / identifier
        return folder if folder.is_dir() else None

    @staticmethod
    def is_valid_identifier(identifier: str) -> bool:
        """식별자가 캐시 폴더 바로 아래의 한 폴더 이름을 가리키는지 검사"""
        if identifier in ("", ".", ".."):
            return False
        return Path(identifier).name == identifier

    def _child_folder(self, base: Path, identifier: str) -> Path:
        if not self.is_valid_identifier(identifier):
            raise ValueError(f"유효하지 않은 캐시 식별자입니다: {identifier!r}")
        return base / identifier

    def materialize_source(self, folder: Path, file: Path) -> Path:
        """
        원본 링크를 보장하고 Sources 트리를 새로 작성

        OriginalFile 링크는 처음 한 번만 생성되며 이후 덮어쓰지 않습니다.
        Sources 폴더는 매번 비운 뒤 다시 작성됩니다.

        Args:
            folder: 캐시 엔트리 폴더
            file: 원본 스크립트 파일

        Returns:
            엔트리 포인트 파일이 위치한 모듈 폴더
        """
        original_link = folder / ORIGINAL_FILE_NAME
        if not original_link.is_symlink() and not original_link.exists():
            os.symlink(str(file), str(original_link))
            self.logger.debug(f"원본 파일 링크 생성: {original_link} -> {file}")

        sources_folder = empty_directory(folder / SOURCES_FOLDER_NAME)
        module_folder = ensure_directory(sources_folder / file.stem)

        entry_point = module_folder / self.settings.entry_point_name
        entry_point.write_bytes(file.read_bytes())

        self.logger.debug(f"스크립트 소스 작성 완료: {entry_point}")
        return module_folder

    def remove(self, identifier: str) -> None:
        """
        캐시 엔트리 삭제 (존재하지 않으면 아무 작업도 하지 않음)

        Raises:
            ScriptFolderRemovalException: 폴더를 삭제할 수 없을 때
        """
        folder = self.find_entry_folder(identifier)
        if folder is None:
            return

        try:
            shutil.rmtree(folder)
        except OSError as e:
            self.logger.error(f"캐시 폴더 삭제 실패: {folder} - {e}")
            raise ScriptFolderRemovalException(folder) from e

        self.logger.info(f"캐시 엔트리 삭제: {identifier}")

    def list_managed(self) -> List[str]:
        """
        관리 중인 스크립트의 원본 경로 목록 조회

        원본 링크가 없거나 가리키는 대상이 사라진 엔트리는 이 과정에서 삭제됩니다.

        Returns:
            원본 스크립트 경로 목록
        """
        paths = []

        for folder in sorted(self.cache_dir.iterdir()):
            if not folder.is_dir() or folder.is_symlink():
                continue

            path = self.read_original_path(folder)
            if path:
                paths.append(path)
                continue

            # 더 이상 필요 없는 캐시 데이터 정리
            try:
                shutil.rmtree(folder)
                self.logger.info(f"고아 캐시 엔트리 정리: {folder.name}")
            except OSError as e:
                self.logger.warning(f"고아 캐시 엔트리 정리 실패: {folder.name} - {e}")

        return paths

    def read_original_path(self, folder: Path) -> Optional[str]:
        """원본 링크의 대상 경로 반환 (링크가 없거나 깨졌으면 None)"""
        original_link = folder / ORIGINAL_FILE_NAME

        try:
            target = os.readlink(str(original_link))
        except OSError:
            return None

        if not target or not Path(target).exists():
            return None

        return target

    def create_temporary_folder(self, identifier: str) -> Path:
        """식별자별 임시 폴더를 비운 상태로 생성"""
        return empty_directory(self._child_folder(self.temp_dir, identifier))

    def remove_temporary_folder(self, folder: Path) -> None:
        """임시 폴더 삭제"""
        if folder.exists():
            shutil.rmtree(folder)
            self.logger.debug(f"임시 폴더 삭제: {folder}")
