"""
설정 관리 모듈

환경 변수를 통한 리졸버 설정을 관리합니다.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from ..exceptions import ConfigurationException


class Settings(BaseSettings):
    """리졸버 설정 관리 클래스"""

    # 캐시 루트 설정
    script_root_dir: str = Field(
        default="~/.script-resolver",
        description="캐시 루트 디렉토리 (Cache, Temp, Packages 하위 폴더 포함)"
    )

    # 스크립트 형식 설정
    source_extension: str = Field(
        default=".swift",
        description="스크립트 소스 파일 확장자"
    )
    entry_point_name: str = Field(
        default="main.swift",
        description="빌드 도구가 엔트리 포인트로 인식하는 파일명"
    )
    package_file_name: str = Field(
        default="Package.swift",
        description="패키지 매니페스트 파일명"
    )
    manifest_file_name: str = Field(
        default="Marathonfile",
        description="스크립트 옆에 위치하는 의존성 매니페스트 파일명"
    )

    # 인라인 의존성 설정
    inline_dependency_marker: str = Field(
        default="marathon",
        description="인라인 의존성 표식 (예: import Files // marathon: <url>)"
    )
    import_keyword: str = Field(
        default="import",
        description="import 구문 키워드"
    )

    # 원격 저장소 설정
    repository_host: str = Field(
        default="github.com",
        description="owner/name 축약형에 사용할 저장소 호스트"
    )
    download_timeout: float = Field(
        default=30.0,
        description="다운로드 타임아웃 (초)"
    )

    # 로깅 설정
    log_level: str = Field(
        default="INFO",
        description="로그 레벨"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="로그 포맷"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="로그 파일 경로"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        # 환경 변수 이름을 대문자로 변환
        case_sensitive = False

    @property
    def root_path(self) -> Path:
        """확장된 캐시 루트 경로"""
        return Path(self.script_root_dir).expanduser()

    def validate_configuration(self) -> None:
        """설정 유효성 검증"""
        if not self.source_extension.startswith("."):
            raise ConfigurationException(
                "SOURCE_EXTENSION", "확장자는 '.'으로 시작해야 합니다"
            )

        if not self.entry_point_name.endswith(self.source_extension):
            raise ConfigurationException(
                "ENTRY_POINT_NAME",
                f"엔트리 포인트 파일은 '{self.source_extension}' 확장자를 가져야 합니다"
            )

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationException(
                "LOG_LEVEL", f"알 수 없는 로그 레벨입니다: {self.log_level}"
            )

        # 캐시 루트 생성
        self.root_path.mkdir(parents=True, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    """
    설정 인스턴스를 반환합니다 (싱글톤 패턴)

    Returns:
        Settings: 설정 인스턴스
    """
    settings = Settings()
    settings.validate_configuration()
    return settings
