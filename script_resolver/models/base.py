"""
기본 데이터 모델 모듈

스크립트 참조, 의존성 집합, 해석된 스크립트 핸들을 정의합니다.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from .enums import ScriptSourceType


class ScriptSource(BaseModel):
    """분류된 스크립트 참조 (해석 호출마다 한 번 생성되며 변경되지 않음)"""

    type: ScriptSourceType = Field(
        ...,
        description="참조 종류"
    )
    location: str = Field(
        ...,
        min_length=1,
        description="로컬 경로 또는 URL"
    )
    branch: Optional[str] = Field(
        None,
        description="저장소 참조의 브랜치 (저장소가 아니면 None)"
    )

    class Config:
        frozen = True

    @classmethod
    def local_file(cls, path) -> "ScriptSource":
        return cls(type=ScriptSourceType.LOCAL_FILE, location=str(path))

    @classmethod
    def direct_url(cls, url: str) -> "ScriptSource":
        return cls(type=ScriptSourceType.DIRECT_URL, location=url)

    @classmethod
    def repository(cls, url: str, branch: Optional[str] = None) -> "ScriptSource":
        return cls(type=ScriptSourceType.REPOSITORY, location=url, branch=branch)

    @property
    def is_remote(self) -> bool:
        return self.type != ScriptSourceType.LOCAL_FILE


class DependencySet(BaseModel):
    """매니페스트와 인라인 선언을 합친 의존성 집합"""

    package_urls: List[str] = Field(
        default_factory=list,
        description="패키지 URL 목록 (중복 제거, 처음 발견된 순서 유지)"
    )
    script_paths: List[str] = Field(
        default_factory=list,
        description="스크립트 폴더로 복사할 보조 스크립트 경로 목록 (선언 순서)"
    )

    def add_package_url(self, url: str) -> None:
        if url not in self.package_urls:
            self.package_urls.append(url)

    def add_package_urls(self, urls: Iterable[str]) -> None:
        for url in urls:
            self.add_package_url(url)

    def merge(self, other: "DependencySet") -> "DependencySet":
        """두 의존성 집합을 합친 새 집합 반환"""
        merged = DependencySet(
            package_urls=list(self.package_urls),
            script_paths=list(self.script_paths),
        )
        merged.add_package_urls(other.package_urls)
        merged.script_paths.extend(other.script_paths)
        return merged


class ResolvedScript(BaseModel):
    """호출자에게 반환되는 해석 완료된 스크립트 핸들"""

    name: str = Field(
        ...,
        min_length=1,
        description="스크립트 이름 (모듈 이름)"
    )
    folder: Path = Field(
        ...,
        description="캐시 엔트리 또는 클론된 저장소 폴더"
    )

    class Config:
        frozen = True

    @property
    def module_folder(self) -> Path:
        return self.folder / "Sources" / self.name
