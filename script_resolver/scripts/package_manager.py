"""
패키지 매니저 연동 모듈

리졸버가 사용하는 패키지 매니저 인터페이스와 Swift 패키지 매니저 기본 구현을 제공합니다.
패키지 복제와 버전 해석은 빌드 도구의 몫이며, 여기서는 등록된 패키지 목록만 관리합니다.
"""

import json
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional

from ..models import ResolvedScript
from ..utils.helpers import ensure_directory
from ..utils.logging import get_logger

logger = get_logger(__name__)

_PACKAGE_NAME_PATTERN = re.compile(r'name:\s*"([^"]+)"')

PACKAGE_DESCRIPTION_TEMPLATE = """// swift-tools-version:5.0

import PackageDescription

let package = Package(
    name: "{name}",
    dependencies: [{dependencies}
    ],
    targets: [
        .target(
            name: "{name}",
            dependencies: [{target_dependencies}],
            path: "Sources/{name}"
        )
    ]
)
"""


class PackageManagerBase(ABC):
    """패키지 매니저 기본 추상 클래스"""

    @abstractmethod
    def add_packages_if_needed(self, urls: Iterable[str]) -> None:
        """아직 등록되지 않은 패키지 URL 등록 (중복은 무시)"""

    @abstractmethod
    def name_of_package(self, folder: Path) -> Optional[str]:
        """폴더의 패키지 매니페스트에서 패키지 이름 조회 (없으면 None)"""

    @abstractmethod
    def make_package_description(self, script: ResolvedScript) -> str:
        """스크립트용 패키지 매니페스트 내용 생성"""

    @abstractmethod
    def symlink_packages(self, folder: Path) -> None:
        """공유 패키지 빌드 폴더를 스크립트 폴더에 링크"""


class SwiftPackageManager(PackageManagerBase):
    """Swift 패키지 매니저 기본 구현"""

    def __init__(self, settings):
        """
        패키지 매니저 초기화

        Args:
            settings: 리졸버 설정
        """
        self.settings = settings
        self.logger = logger
        self.packages_dir = ensure_directory(settings.root_path / "Packages")
        self.registry_path = self.packages_dir / "packages.json"
        self.build_dir = self.packages_dir / ".build"

    def load_packages(self) -> List[dict]:
        """등록된 패키지 목록 로드"""
        if not self.registry_path.exists():
            return []

        with open(self.registry_path, encoding='utf-8') as f:
            return json.load(f)

    def _save_packages(self, packages: List[dict]) -> None:
        with open(self.registry_path, 'w', encoding='utf-8') as f:
            json.dump(packages, f, indent=2, ensure_ascii=False)

    def add_packages_if_needed(self, urls: Iterable[str]) -> None:
        packages = self.load_packages()
        known_urls = {package['url'] for package in packages}
        added = []

        for url in urls:
            if url in known_urls:
                continue

            known_urls.add(url)
            package = {'name': self.package_name_from_url(url), 'url': url}
            packages.append(package)
            added.append(package['name'])

        if added:
            self._save_packages(packages)
            self.logger.info(f"패키지 등록: {', '.join(added)}")

    def name_of_package(self, folder: Path) -> Optional[str]:
        package_file = folder / self.settings.package_file_name

        try:
            content = package_file.read_text(encoding='utf-8')
        except OSError:
            return None

        match = _PACKAGE_NAME_PATTERN.search(content)
        return match.group(1) if match else None

    def make_package_description(self, script: ResolvedScript) -> str:
        packages = self.load_packages()

        dependencies = "".join(
            f'\n        .package(url: "{package["url"]}", .branch("master")),'
            for package in packages
        )
        target_dependencies = ", ".join(f'"{package["name"]}"' for package in packages)

        return PACKAGE_DESCRIPTION_TEMPLATE.format(
            name=script.name,
            dependencies=dependencies,
            target_dependencies=target_dependencies,
        )

    def symlink_packages(self, folder: Path) -> None:
        ensure_directory(self.build_dir)
        link = folder / ".build"

        if link.is_symlink() or link.exists():
            return

        os.symlink(str(self.build_dir), str(link))
        self.logger.debug(f"공유 빌드 폴더 링크: {link} -> {self.build_dir}")

    @staticmethod
    def package_name_from_url(url: str) -> str:
        """URL의 마지막 경로 구간에서 패키지 이름 추출"""
        name = url.rstrip("/").replace(":", "/").split("/")[-1]
        if name.endswith(".git"):
            name = name[:-len(".git")]
        return name
