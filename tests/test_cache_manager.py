"""
캐시 매니저 테스트 모듈

캐시 엔트리 생성, 소스 작성, 삭제, 관리 목록 조회를 테스트합니다.
"""

import os
from unittest.mock import patch

import pytest

from script_resolver.config.settings import Settings
from script_resolver.exceptions import ScriptFolderRemovalException
from script_resolver.scripts.cache_manager import CacheManager


class TestCacheManager:
    """캐시 매니저 테스트"""

    @pytest.fixture
    def cache_manager(self, tmp_path):
        """캐시 매니저 픽스처"""
        settings = Settings(script_root_dir=str(tmp_path / "root"))
        return CacheManager(settings)

    @pytest.fixture
    def script_file(self, tmp_path):
        """임시 스크립트 파일"""
        folder = tmp_path / "scripts"
        folder.mkdir()
        script_file = folder / "hello.swift"
        script_file.write_text("print(\"Hello, World!\")")
        return script_file

    def test_root_folders_created(self, cache_manager, tmp_path):
        """캐시 루트 하위 폴더 생성 테스트"""
        assert (tmp_path / "root" / "Cache").is_dir()
        assert (tmp_path / "root" / "Temp").is_dir()

    def test_root_follows_settings_root_path(self, tmp_path, monkeypatch):
        """홈 디렉토리 기준 캐시 루트 테스트"""
        monkeypatch.setenv("HOME", str(tmp_path))
        settings = Settings(script_root_dir="~/resolver-root")

        cache_manager = CacheManager(settings)

        assert cache_manager.root_dir == settings.root_path == tmp_path / "resolver-root"
        assert cache_manager.cache_dir.is_dir()

    def test_get_entry_folder_idempotent(self, cache_manager):
        """엔트리 폴더 생성이 멱등적인지 테스트"""
        first = cache_manager.get_entry_folder("-tmp-hello")
        second = cache_manager.get_entry_folder("-tmp-hello")

        assert first == second
        assert first.name == "-tmp-hello"
        assert first.parent == cache_manager.cache_dir

    def test_find_entry_folder_missing(self, cache_manager):
        """없는 엔트리 조회 테스트"""
        assert cache_manager.find_entry_folder("-missing") is None

    @pytest.mark.parametrize("identifier", ["", ".", "..", "nested/entry"])
    def test_invalid_identifier_never_leaves_cache(self, cache_manager, script_file, identifier):
        """캐시 폴더 밖을 가리키는 식별자 테스트"""
        folder = cache_manager.get_entry_folder("-tmp-hello")
        cache_manager.materialize_source(folder, script_file)

        assert cache_manager.find_entry_folder(identifier) is None

        cache_manager.remove(identifier)

        assert folder.is_dir()
        assert cache_manager.root_dir.is_dir()
        assert cache_manager.temp_dir.is_dir()

    @pytest.mark.parametrize("identifier", ["", ".", ".."])
    def test_invalid_identifier_rejected_on_create(self, cache_manager, identifier):
        """유효하지 않은 식별자로 폴더 생성 테스트"""
        with pytest.raises(ValueError):
            cache_manager.get_entry_folder(identifier)

        with pytest.raises(ValueError):
            cache_manager.create_temporary_folder(identifier)

        assert cache_manager.cache_dir.is_dir()

    def test_materialize_source(self, cache_manager, script_file):
        """소스 작성 테스트"""
        folder = cache_manager.get_entry_folder("-tmp-hello")

        module_folder = cache_manager.materialize_source(folder, script_file)

        assert module_folder == folder / "Sources" / "hello"
        assert (module_folder / "main.swift").read_text() == "print(\"Hello, World!\")"
        assert os.readlink(folder / "OriginalFile") == str(script_file)

    def test_original_link_not_overwritten(self, cache_manager, script_file, tmp_path):
        """원본 링크가 덮어써지지 않는지 테스트"""
        folder = cache_manager.get_entry_folder("-tmp-hello")
        cache_manager.materialize_source(folder, script_file)

        other_file = tmp_path / "other.swift"
        other_file.write_text("print(\"Other\")")
        cache_manager.materialize_source(folder, other_file)

        assert os.readlink(folder / "OriginalFile") == str(script_file)

    def test_sources_replaced_on_every_materialization(self, cache_manager, script_file):
        """Sources 트리가 매번 새로 작성되는지 테스트"""
        folder = cache_manager.get_entry_folder("-tmp-hello")
        module_folder = cache_manager.materialize_source(folder, script_file)
        stale_file = module_folder / "stale.swift"
        stale_file.write_text("// stale")

        script_file.write_text("print(\"Updated\")")
        module_folder = cache_manager.materialize_source(folder, script_file)

        assert not stale_file.exists()
        assert (module_folder / "main.swift").read_text() == "print(\"Updated\")"

    def test_remove_missing_entry_is_noop(self, cache_manager):
        """없는 엔트리 삭제가 오류 없이 끝나는지 테스트"""
        cache_manager.remove("-does-not-exist")

    def test_remove_entry(self, cache_manager, script_file):
        """엔트리 삭제 테스트"""
        folder = cache_manager.get_entry_folder("-tmp-hello")
        cache_manager.materialize_source(folder, script_file)

        cache_manager.remove("-tmp-hello")

        assert not folder.exists()

    def test_remove_entry_failure(self, cache_manager):
        """삭제 권한이 없을 때 예외 테스트"""
        folder = cache_manager.get_entry_folder("-tmp-hello")

        with patch("script_resolver.scripts.cache_manager.shutil.rmtree", side_effect=PermissionError("denied")):
            with pytest.raises(ScriptFolderRemovalException) as exc_info:
                cache_manager.remove("-tmp-hello")

        assert exc_info.value.folder == folder

    def test_list_managed(self, cache_manager, script_file):
        """관리 목록 조회 테스트"""
        folder = cache_manager.get_entry_folder("-tmp-hello")
        cache_manager.materialize_source(folder, script_file)

        assert cache_manager.list_managed() == [str(script_file)]

    def test_list_managed_collects_orphans(self, cache_manager, script_file, tmp_path):
        """원본이 사라진 엔트리가 목록 조회 중 정리되는지 테스트"""
        live_folder = cache_manager.get_entry_folder("-tmp-hello")
        cache_manager.materialize_source(live_folder, script_file)

        gone_file = tmp_path / "gone.swift"
        gone_file.write_text("print(\"Gone\")")
        orphan_folder = cache_manager.get_entry_folder("-tmp-gone")
        cache_manager.materialize_source(orphan_folder, gone_file)
        gone_file.unlink()

        unlinked_folder = cache_manager.get_entry_folder("-tmp-unlinked")

        assert cache_manager.list_managed() == [str(script_file)]
        assert live_folder.exists()
        assert not orphan_folder.exists()
        assert not unlinked_folder.exists()

    def test_create_temporary_folder_empties_previous_content(self, cache_manager):
        """임시 폴더가 비워진 상태로 생성되는지 테스트"""
        folder = cache_manager.create_temporary_folder("https:--example.com-tool")
        (folder / "leftover.swift").write_text("// leftover")

        folder = cache_manager.create_temporary_folder("https:--example.com-tool")

        assert folder.parent == cache_manager.temp_dir
        assert list(folder.iterdir()) == []

        cache_manager.remove_temporary_folder(folder)
        assert not folder.exists()
