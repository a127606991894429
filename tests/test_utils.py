"""
유틸리티 함수 테스트 모듈

파일 시스템 헬퍼, URL 헬퍼, 로깅 시스템을 테스트합니다.
"""

import logging

import pytest

from script_resolver.config.settings import Settings
from script_resolver.utils.helpers import (
    empty_directory,
    ensure_directory,
    is_resolvable_url,
    parent_url,
    to_raw_content_url,
)
from script_resolver.utils.logging import (
    KoreanFormatter,
    ProgressReporter,
    get_logger,
    setup_logging,
)


class TestDirectoryHelpers:
    """디렉토리 헬퍼 테스트"""

    def test_ensure_directory(self, tmp_path):
        """디렉토리 생성 테스트"""
        path = ensure_directory(tmp_path / "a" / "b")

        assert path.is_dir()
        assert ensure_directory(path) == path

    def test_empty_directory(self, tmp_path):
        """디렉토리 비우기 테스트"""
        folder = tmp_path / "folder"
        (folder / "nested").mkdir(parents=True)
        (folder / "nested" / "file.txt").write_text("x")
        (folder / "file.txt").write_text("y")
        target = tmp_path / "target"
        target.mkdir()
        (target / "keep.txt").write_text("keep")
        (folder / "link").symlink_to(target)

        empty_directory(folder)

        assert folder.is_dir()
        assert list(folder.iterdir()) == []
        assert (target / "keep.txt").exists()

    def test_empty_directory_creates_missing(self, tmp_path):
        """없는 디렉토리 비우기 테스트"""
        assert empty_directory(tmp_path / "missing").is_dir()


class TestUrlHelpers:
    """URL 헬퍼 테스트"""

    @pytest.mark.parametrize("url", [
        "https://github.com/JohnSundell/Files.git",
        "http://localhost:8080/tool.swift",
        "https://host/a.git",
        "git@github.com:owner/repo.git",
        "file:///Users/john/packages/Local",
        "/Users/john/packages/Local",
        "../packages/Local",
    ])
    def test_resolvable_urls(self, url):
        """해석 가능한 URL 테스트"""
        assert is_resolvable_url(url) is True

    @pytest.mark.parametrize("url", [
        "",
        "not a url",
        "https://",
        "git@github.com",
        "ftp://example.com/file",
    ])
    def test_unresolvable_urls(self, url):
        """해석 불가능한 URL 테스트"""
        assert is_resolvable_url(url) is False

    def test_raw_content_url(self):
        """GitHub 파일 페이지 URL 변환 테스트"""
        url = "https://github.com/owner/repo/blob/main/scripts/tool.swift"

        assert to_raw_content_url(url) == "https://raw.githubusercontent.com/owner/repo/main/scripts/tool.swift"

    @pytest.mark.parametrize("url", [
        "https://example.com/owner/repo/blob/main/tool.swift",
        "https://github.com/owner/repo.git",
        "https://raw.githubusercontent.com/owner/repo/main/tool.swift",
    ])
    def test_raw_content_url_unchanged(self, url):
        """변환 대상이 아닌 URL 테스트"""
        assert to_raw_content_url(url) == url

    def test_parent_url(self):
        """부모 URL 테스트"""
        assert parent_url("https://example.com/scripts/tool.swift?x=1") == "https://example.com/scripts/"


class TestLogging:
    """로깅 시스템 테스트"""

    def test_korean_formatter(self):
        """한국어 레벨명 포맷 테스트"""
        formatter = KoreanFormatter(fmt="%(levelname)s: %(message)s")
        record = logging.LogRecord("test", logging.WARNING, __file__, 1, "메시지", None, None)

        assert formatter.format(record) == "경고: 메시지"
        assert record.levelname == "WARNING"

    def test_get_logger_namespacing(self):
        """로거 이름 공간 테스트"""
        assert get_logger("progress").name == "script_resolver.progress"
        assert get_logger("script_resolver.scripts.resolver").name == "script_resolver.scripts.resolver"

    def test_setup_logging(self, tmp_path):
        """로깅 설정 테스트"""
        log_file = tmp_path / "logs" / "resolver.log"
        settings = Settings(script_root_dir=str(tmp_path), log_level="DEBUG", log_file=str(log_file))

        logger = setup_logging(settings)

        try:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 2
            assert logger.propagate is False
            assert log_file.parent.is_dir()
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.propagate = True


class TestProgressReporter:
    """진행 상황 리포터 테스트"""

    def test_callback_receives_messages(self):
        """콜백 전달 테스트"""
        messages = []
        reporter = ProgressReporter(messages.append)

        reporter.report_progress("다운로드 중...")

        assert messages == ["다운로드 중..."]

    def test_callback_failure_does_not_propagate(self):
        """콜백 오류가 전파되지 않는지 테스트"""
        def failing_callback(message):
            raise RuntimeError("표시 실패")

        ProgressReporter(failing_callback).report_progress("다운로드 중...")

    def test_without_callback(self):
        """콜백 없는 리포터 테스트"""
        ProgressReporter().report_progress("다운로드 중...")
