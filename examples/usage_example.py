#!/usr/bin/env python3
"""
스크립트 리졸버 사용 예제

로컬 스크립트를 캐시 프로젝트로 해석하고 관리 목록을 확인하는 방법을 보여줍니다.
"""

import tempfile
from pathlib import Path

from script_resolver import ScriptResolver, ScriptResolverException, format_error
from script_resolver.config.settings import Settings
from script_resolver.utils.logging import ProgressReporter, setup_logging


def local_script_example(settings: Settings):
    """로컬 스크립트 해석 예제"""
    print("=== 로컬 스크립트 해석 ===")

    workspace = Path(tempfile.mkdtemp())
    script_file = workspace / "hello.swift"
    script_file.write_text(
        'import Files // marathon: https://github.com/JohnSundell/Files.git\n'
        '\n'
        'print("Hello")\n'
    )
    (workspace / "Marathonfile").write_text(
        "# 추가 패키지\n"
        "https://github.com/JohnSundell/Unbox.git\n"
    )

    with ScriptResolver(settings) as resolver:
        script = resolver.script(str(script_file))
        print(f"스크립트 이름: {script.name}")
        print(f"프로젝트 폴더: {script.folder}")
        print(f"모듈 폴더: {script.module_folder}")

        print("\n관리 중인 스크립트:")
        for path in resolver.managed_script_paths:
            print(f"- {path}")

        resolver.remove_data_for_script(str(script_file))
        print("\n캐시 데이터 삭제 완료")


def remote_script_example(settings: Settings):
    """원격 스크립트 해석 예제 (네트워크 필요)"""
    print("\n=== 원격 스크립트 해석 ===")

    progress = ProgressReporter(lambda message: print(f"  {message}"))

    with ScriptResolver(settings, progress=progress) as resolver:
        try:
            script = resolver.script("johnsundell/testdrive")
            print(f"스크립트 이름: {script.name}")
            print(f"프로젝트 폴더: {script.folder}")
        except ScriptResolverException as e:
            print(format_error(e))

    # with 블록이 끝나면 임시 폴더와 캐시 엔트리가 정리됨


def error_handling_example(settings: Settings):
    """오류 처리 예제"""
    print("\n=== 오류 처리 ===")

    with ScriptResolver(settings) as resolver:
        for reference in ["missing/tool.swift", "owner/repo,tag:1.0"]:
            try:
                resolver.script(reference)
            except ScriptResolverException as e:
                print(f"[{e.error_code}]")
                print(format_error(e))


if __name__ == "__main__":
    settings = Settings(script_root_dir=tempfile.mkdtemp(), log_level="WARNING")
    settings.validate_configuration()
    setup_logging(settings)

    local_script_example(settings)
    remote_script_example(settings)
    error_handling_example(settings)
