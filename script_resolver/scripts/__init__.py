"""
스크립트 해석 모듈

스크립트 참조를 분류하고, 원격 스크립트를 스테이징하고, 의존성을 해석해
빌드 가능한 스크립트 프로젝트를 캐시에 만드는 시스템을 제공합니다.
"""

from .cache_manager import CacheManager
from .classifier import ReferenceClassifier
from .dependencies import DependencyDiscoverer
from .identifiers import derive_display_name, derive_identifier
from .manifest import ManifestParser, ScriptManifest
from .materializer import ProjectMaterializer
from .package_manager import PackageManagerBase, SwiftPackageManager
from .repository import GitRepository, HttpRepository
from .resolver import ScriptResolver

__all__ = [
    "CacheManager",
    "ReferenceClassifier",
    "DependencyDiscoverer",
    "ManifestParser",
    "ScriptManifest",
    "ProjectMaterializer",
    "PackageManagerBase",
    "SwiftPackageManager",
    "GitRepository",
    "HttpRepository",
    "ScriptResolver",
    "derive_identifier",
    "derive_display_name",
]
