"""
설정 관리 테스트 모듈

리졸버 설정 관리 기능을 테스트합니다.
"""

import tempfile
from pathlib import Path

import pytest

from script_resolver.config.settings import Settings, get_settings
from script_resolver.exceptions import ConfigurationException


class TestSettings:
    """설정 클래스 테스트"""

    def test_default_settings(self):
        """기본 설정 테스트"""
        settings = Settings()

        assert settings.script_root_dir == "~/.script-resolver"
        assert settings.source_extension == ".swift"
        assert settings.entry_point_name == "main.swift"
        assert settings.package_file_name == "Package.swift"
        assert settings.manifest_file_name == "Marathonfile"
        assert settings.inline_dependency_marker == "marathon"
        assert settings.repository_host == "github.com"
        assert settings.download_timeout == 30.0
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_settings_from_env(self, monkeypatch):
        """환경 변수로부터 설정 로드 테스트"""
        monkeypatch.setenv("SCRIPT_ROOT_DIR", "/tmp/resolver-root")
        monkeypatch.setenv("REPOSITORY_HOST", "git.example.com")
        monkeypatch.setenv("DOWNLOAD_TIMEOUT", "5.5")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.script_root_dir == "/tmp/resolver-root"
        assert settings.repository_host == "git.example.com"
        assert settings.download_timeout == 5.5
        assert settings.log_level == "DEBUG"

    def test_root_path_expands_user(self):
        """캐시 루트 경로 확장 테스트"""
        settings = Settings(script_root_dir="~/resolver")

        assert settings.root_path == Path.home() / "resolver"


class TestSettingsValidation:
    """설정 유효성 검증 테스트"""

    def test_valid_configuration_creates_root(self):
        """유효한 설정이 캐시 루트를 생성하는지 테스트"""
        root = Path(tempfile.mkdtemp()) / "root"
        settings = Settings(script_root_dir=str(root))

        settings.validate_configuration()

        assert root.is_dir()

    def test_extension_without_dot(self, tmp_path):
        """점 없는 확장자 테스트"""
        settings = Settings(script_root_dir=str(tmp_path), source_extension="swift")

        with pytest.raises(ConfigurationException) as exc_info:
            settings.validate_configuration()

        assert exc_info.value.config_key == "SOURCE_EXTENSION"

    def test_entry_point_with_wrong_extension(self, tmp_path):
        """엔트리 포인트 확장자 불일치 테스트"""
        settings = Settings(script_root_dir=str(tmp_path), entry_point_name="main.py")

        with pytest.raises(ConfigurationException) as exc_info:
            settings.validate_configuration()

        assert exc_info.value.config_key == "ENTRY_POINT_NAME"

    def test_unknown_log_level(self, tmp_path):
        """알 수 없는 로그 레벨 테스트"""
        settings = Settings(script_root_dir=str(tmp_path), log_level="LOUD")

        with pytest.raises(ConfigurationException) as exc_info:
            settings.validate_configuration()

        assert exc_info.value.config_key == "LOG_LEVEL"


class TestGetSettings:
    """설정 싱글톤 테스트"""

    def test_get_settings_cached(self, tmp_path, monkeypatch):
        """설정 인스턴스 캐시 테스트"""
        monkeypatch.setenv("SCRIPT_ROOT_DIR", str(tmp_path / "root"))
        get_settings.cache_clear()

        try:
            first = get_settings()
            second = get_settings()

            assert first is second
            assert (tmp_path / "root").is_dir()
        finally:
            get_settings.cache_clear()
