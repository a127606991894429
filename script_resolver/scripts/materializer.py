"""
스크립트 프로젝트 생성 모듈

캐시 엔트리 폴더에 패키지 매니페스트를 작성해 빌드 가능한 스크립트 프로젝트를 완성합니다.
의존성 집합은 해석할 때마다 달라질 수 있으므로 매니페스트는 항상 다시 작성합니다.
"""

from pathlib import Path

from ..exceptions import PackageFileCreationException
from ..models import ResolvedScript
from ..utils.logging import get_logger
from .package_manager import PackageManagerBase

logger = get_logger(__name__)


class ProjectMaterializer:
    """스크립트 프로젝트 생성기"""

    def __init__(self, settings, package_manager: PackageManagerBase):
        self.settings = settings
        self.package_manager = package_manager
        self.logger = logger

    def write_package_file(self, script: ResolvedScript) -> Path:
        """
        패키지 매니페스트 작성

        Args:
            script: 해석된 스크립트

        Returns:
            작성된 패키지 파일 경로

        Raises:
            PackageFileCreationException: 파일을 쓸 수 없을 때
        """
        package_file = script.folder / self.settings.package_file_name

        try:
            description = self.package_manager.make_package_description(script)
            package_file.write_text(description, encoding='utf-8')
        except (OSError, ValueError) as e:
            self.logger.error(f"패키지 파일 작성 실패: {package_file} - {e}")
            raise PackageFileCreationException(script.folder) from e

        self.logger.debug(f"패키지 파일 작성 완료: {package_file}")
        return package_file
