"""
스크립트 리졸버 오케스트레이터 모듈

참조 분류, 원격 스테이징, 캐시, 의존성 탐색, 프로젝트 생성을 하나의 흐름으로 묶는
메인 인터페이스를 제공합니다.
"""

from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional

import git
import httpx

from ..config.settings import Settings
from ..exceptions import (
    MultipleSwiftFilesInRepositoryException,
    NoSwiftFilesInRepositoryException,
    ScriptDownloadException,
    ScriptResolverException,
)
from ..models import ResolvedScript, ScriptSourceType
from ..utils.helpers import parent_url, to_raw_content_url
from ..utils.logging import ProgressReporter, get_logger
from .cache_manager import CacheManager
from .classifier import ReferenceClassifier
from .dependencies import DependencyDiscoverer
from .identifiers import derive_display_name, derive_identifier
from .materializer import ProjectMaterializer
from .package_manager import PackageManagerBase, SwiftPackageManager
from .repository import GitRepository, HttpRepository

logger = get_logger(__name__)

CLONE_FOLDER_NAME = "clone"


class ScriptResolver:
    """
    스크립트 리졸버 오케스트레이터

    원격 참조를 위해 만든 임시 폴더와 캐시 엔트리는 해석이 실패하면 즉시,
    성공하면 리졸버를 닫을 때(close 또는 with 블록 종료) 정리됩니다.
    """

    def __init__(
        self,
        settings: Settings,
        package_manager: Optional[PackageManagerBase] = None,
        progress: Optional[ProgressReporter] = None,
        http_repository: Optional[HttpRepository] = None,
        git_repository: Optional[GitRepository] = None,
    ):
        """
        스크립트 리졸버 초기화

        Args:
            settings: 리졸버 설정 (캐시 루트를 포함한 모든 설정을 명시적으로 전달)
            package_manager: 패키지 매니저 (None이면 Swift 패키지 매니저)
            progress: 진행 상황 리포터
            http_repository: HTTP 저장소 (None이면 기본값)
            git_repository: Git 저장소 (None이면 기본값)
        """
        self.settings = settings
        self.logger = logger

        self.cache_manager = CacheManager(settings)
        self.package_manager = package_manager or SwiftPackageManager(settings)
        self.progress = progress or ProgressReporter()

        self.classifier = ReferenceClassifier(settings)
        self.dependency_discoverer = DependencyDiscoverer(settings)
        self.materializer = ProjectMaterializer(settings, self.package_manager)

        self.http_repository = http_repository or HttpRepository(settings)
        self.git_repository = git_repository or GitRepository(settings)

        self._cleanup = ExitStack()

    @property
    def managed_script_paths(self) -> List[str]:
        """관리 중인 스크립트의 원본 경로 목록"""
        return self.cache_manager.list_managed()

    def script(self, reference: str, allow_remote: bool = True) -> ResolvedScript:
        """
        참조 문자열을 빌드 가능한 스크립트 프로젝트로 해석

        Args:
            reference: 로컬 경로, 스크립트 URL, 저장소 URL 또는 owner/name[,branch:<이름>]
            allow_remote: 원격 참조 허용 여부

        Returns:
            해석된 스크립트 핸들

        Raises:
            ScriptResolverException: 해석 실패 시 (종류별 하위 예외)
        """
        self.logger.info(f"스크립트 요청: {reference}")
        source = self.classifier.classify(reference, allow_remote)

        if source.type == ScriptSourceType.LOCAL_FILE:
            script = self.resolve_local_file(Path(source.location))
        else:
            with ExitStack() as cleanup:
                if source.type == ScriptSourceType.DIRECT_URL:
                    script = self._resolve_direct_url(source.location, cleanup)
                else:
                    script = self._resolve_repository(source.location, source.branch, cleanup)

                # 성공한 경우 정리 작업을 리졸버 수명으로 넘김
                self._cleanup.push(cleanup.pop_all())

        self.logger.info(f"스크립트 해석 완료: {script.name} -> {script.folder}")
        return script

    def resolve_local_file(self, file: Path) -> ResolvedScript:
        """
        로컬 스크립트 파일 해석

        Args:
            file: 스크립트 파일 경로

        Returns:
            캐시 엔트리 폴더를 가리키는 스크립트 핸들
        """
        file = file.resolve()
        identifier = derive_identifier(str(file), self.settings.source_extension)
        folder = self.cache_manager.get_entry_folder(identifier)
        self.package_manager.symlink_packages(folder)
        self.cache_manager.materialize_source(folder, file)

        script = ResolvedScript(name=file.stem, folder=folder)

        dependencies = self.dependency_discoverer.discover(file)
        self.package_manager.add_packages_if_needed(dependencies.package_urls)
        self.dependency_discoverer.copy_dependency_scripts(dependencies, script)

        self.materializer.write_package_file(script)
        return script

    def remove_data_for_script(self, path: str) -> None:
        """
        스크립트의 캐시 데이터 삭제 (캐시가 없으면 아무 작업도 하지 않음)

        Args:
            path: 스크립트 경로

        Raises:
            ScriptFolderRemovalException: 폴더를 삭제할 수 없을 때
        """
        local_file = self.classifier.find_local_file(path)
        if local_file is not None:
            path = str(local_file)

        identifier = derive_identifier(path, self.settings.source_extension)
        self.cache_manager.remove(identifier)

    def remove_all_script_data(self) -> None:
        """관리 중인 모든 스크립트의 캐시 데이터 삭제"""
        for path in self.managed_script_paths:
            self.remove_data_for_script(path)

    def _resolve_direct_url(self, url: str, cleanup: ExitStack) -> ResolvedScript:
        identifier = derive_identifier(url, self.settings.source_extension)

        try:
            self.progress.report_progress("스크립트 다운로드 중...")
            data = self.http_repository.download(url)

            self.progress.report_progress("스크립트 저장 중...")
            folder = self.cache_manager.create_temporary_folder(identifier)
            cleanup.callback(self._discard_temporary_folder, folder)

            file = folder / (derive_display_name(identifier) + self.settings.source_extension)
            file.write_bytes(data)
            cleanup.callback(self._discard_script_data, file)

            self._fetch_sibling_manifest(url, folder)
        except (httpx.HTTPError, OSError) as e:
            self.logger.error(f"스크립트 다운로드 실패: {url} - {e}")
            raise ScriptDownloadException(url, e) from e

        return self.resolve_local_file(file)

    def _fetch_sibling_manifest(self, url: str, folder: Path) -> None:
        """스크립트와 같은 위치의 매니페스트를 가능한 경우에만 함께 저장"""
        self.progress.report_progress("매니페스트 확인 중...")
        manifest_name = self.settings.manifest_file_name
        manifest_url = parent_url(to_raw_content_url(url)) + manifest_name

        data = self.http_repository.fetch_optional(manifest_url)
        if data is None:
            return

        self.progress.report_progress("매니페스트 저장 중...")
        (folder / manifest_name).write_bytes(data)

    def _resolve_repository(self, url: str, branch: Optional[str], cleanup: ExitStack) -> ResolvedScript:
        identifier = derive_identifier(url, self.settings.source_extension)
        folder = self.cache_manager.create_temporary_folder(identifier)
        cleanup.callback(self._discard_temporary_folder, folder)
        clone_folder = folder / CLONE_FOLDER_NAME

        try:
            self.progress.report_progress(f"{url} 복제 중...")
            self.git_repository.clone(url, clone_folder, branch)
        except (git.GitError, OSError) as e:
            self.logger.error(f"저장소 복제 실패: {url} - {e}")
            raise ScriptDownloadException(url, e) from e

        # 저장소 자체가 이미 스크립트 프로젝트인 경우
        package_name = self.package_manager.name_of_package(clone_folder)
        if package_name and self._contains_entry_point(clone_folder):
            self.logger.info(f"저장소를 패키지로 사용: {package_name}")
            return ResolvedScript(name=package_name, folder=clone_folder)

        source_files = self._find_source_files(clone_folder)

        if not source_files:
            raise NoSwiftFilesInRepositoryException(url)
        if len(source_files) > 1:
            raise MultipleSwiftFilesInRepositoryException(url, source_files)

        cleanup.callback(self._discard_script_data, source_files[0])
        return self.resolve_local_file(source_files[0])

    def _contains_entry_point(self, folder: Path) -> bool:
        entry_point_name = self.settings.entry_point_name
        return any(path.is_file() for path in folder.rglob(entry_point_name))

    def _find_source_files(self, folder: Path) -> List[Path]:
        """패키지 매니페스트를 제외한 소스 파일 목록 (정렬됨)"""
        package_file_stem = Path(self.settings.package_file_name).stem
        source_files = [
            path for path in folder.rglob(f"*{self.settings.source_extension}")
            if path.is_file()
            and path.stem != package_file_stem
            and ".git" not in path.relative_to(folder).parts
        ]
        return sorted(source_files)

    def _discard_temporary_folder(self, folder: Path) -> None:
        try:
            self.cache_manager.remove_temporary_folder(folder)
        except OSError as e:
            self.logger.warning(f"임시 폴더 정리 실패: {folder} - {e}")

    def _discard_script_data(self, file: Path) -> None:
        identifier = derive_identifier(str(file.resolve()), self.settings.source_extension)
        try:
            self.cache_manager.remove(identifier)
        except ScriptResolverException as e:
            self.logger.warning(f"임시 스크립트 캐시 정리 실패: {file} - {e}")

    def close(self) -> None:
        """임시 스크립트 데이터 정리"""
        self._cleanup.close()
        self.logger.debug("스크립트 리졸버 리소스 정리 완료")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
