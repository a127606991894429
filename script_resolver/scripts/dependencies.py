"""
스크립트 의존성 탐색 모듈

매니페스트 선언과 스크립트 본문의 인라인 선언을 하나의 의존성 집합으로 합치고,
매니페스트에 선언된 보조 스크립트를 스크립트 모듈 폴더로 복사합니다.

인라인 선언 예:
    import Files // marathon: https://github.com/JohnSundell/Files.git
"""

from pathlib import Path
from typing import Optional

from ..exceptions import DependencyScriptException, InvalidInlineDependencyException
from ..models import DependencySet, ResolvedScript
from ..utils.helpers import is_resolvable_url
from ..utils.logging import get_logger
from .manifest import ManifestParser

logger = get_logger(__name__)


class DependencyDiscoverer:
    """의존성 탐색기"""

    def __init__(self, settings, manifest_parser: Optional[ManifestParser] = None):
        """
        의존성 탐색기 초기화

        Args:
            settings: 리졸버 설정
            manifest_parser: 매니페스트 파서 (None이면 기본 파서 사용)
        """
        self.settings = settings
        self.logger = logger
        self.manifest_parser = manifest_parser or ManifestParser(settings)

    def discover(self, script_file: Path) -> DependencySet:
        """
        스크립트의 전체 의존성 탐색

        Args:
            script_file: 원본 스크립트 파일

        Returns:
            매니페스트와 인라인 선언을 합친 의존성 집합

        Raises:
            InvalidInlineDependencyException: 인라인 의존성 URL이 잘못되었을 때
        """
        dependencies = self.discover_manifest_dependencies(script_file)
        source = script_file.read_text(encoding='utf-8')
        return dependencies.merge(self.discover_inline_dependencies(source))

    def discover_manifest_dependencies(self, script_file: Path) -> DependencySet:
        """스크립트 옆 매니페스트에서 의존성 추출 (매니페스트가 없으면 빈 집합)"""
        manifest_path = self.manifest_parser.find_manifest(script_file)
        if manifest_path is None:
            return DependencySet()

        manifest = self.manifest_parser.parse_manifest_file(manifest_path)
        dependencies = DependencySet(script_paths=list(manifest.script_paths))
        dependencies.add_package_urls(manifest.package_urls)
        return dependencies

    def discover_inline_dependencies(self, source: str) -> DependencySet:
        """
        스크립트 본문에서 인라인 의존성 추출

        import 구문이 아닌 첫 코드 줄(첫 글자가 영숫자)을 만나면 탐색을 중단합니다.

        Args:
            source: 스크립트 소스 텍스트

        Returns:
            인라인으로 선언된 패키지 URL만 담은 의존성 집합
        """
        dependencies = DependencySet()
        import_prefix = f"{self.settings.import_keyword} "
        marker = f"{self.settings.inline_dependency_marker}:"

        for line in source.splitlines():
            stripped = line.lstrip()

            if stripped.startswith(import_prefix):
                if marker not in stripped:
                    continue

                url = stripped.split(marker)[-1].strip()
                if not is_resolvable_url(url):
                    raise InvalidInlineDependencyException(url)

                dependencies.add_package_url(url)
            elif stripped and stripped[0].isalnum():
                break

        if dependencies.package_urls:
            self.logger.debug(f"인라인 의존성 {len(dependencies.package_urls)}개 발견")

        return dependencies

    def copy_dependency_scripts(self, dependencies: DependencySet, script: ResolvedScript) -> None:
        """
        보조 스크립트를 스크립트 모듈 폴더로 복사

        Raises:
            DependencyScriptException: 원본을 읽거나 사본을 쓸 수 없을 때
        """
        for script_path in dependencies.script_paths:
            try:
                source_file = Path(script_path)
                copy = script.module_folder / source_file.name
                copy.write_bytes(source_file.read_bytes())
            except OSError as e:
                self.logger.error(f"의존성 스크립트 복사 실패: {script_path} - {e}")
                raise DependencyScriptException(script_path) from e

            self.logger.debug(f"의존성 스크립트 복사: {script_path} -> {copy}")
