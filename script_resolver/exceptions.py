"""
예외 클래스 정의 모듈

스크립트 리졸버에서 사용되는 커스텀 예외들을 정의합니다.
모든 예외는 한 줄 메시지와 사용자가 따라 할 수 있는 힌트 목록을 함께 제공합니다.
"""

from pathlib import Path
from typing import Optional, Sequence, Union


class ScriptResolverException(Exception):
    """스크립트 리졸버 기본 예외 클래스"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        hints: Optional[Sequence[str]] = None,
    ):
        """
        예외 초기화

        Args:
            message: 오류 메시지
            error_code: 오류 코드 (선택사항)
            hints: 사용자에게 보여줄 해결 힌트 목록
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.hints = list(hints or [])


class ScriptNotFoundException(ScriptResolverException):
    """스크립트를 찾을 수 없을 때 발생하는 예외"""

    def __init__(self, path: str):
        message = f"'{path}' 경로에서 Swift 스크립트를 찾을 수 없습니다"
        hints = [f"'marathon create {path}' 명령으로 해당 경로에 스크립트를 만들 수 있습니다"]
        super().__init__(message, "SCRIPT_NOT_FOUND", hints)
        self.path = path


class PackageFileCreationException(ScriptResolverException):
    """패키지 파일 생성 실패 시 발생하는 예외"""

    def __init__(self, folder: Union[str, Path]):
        message = "스크립트용 Package.swift 파일을 생성하지 못했습니다"
        hints = [f"'{folder}' 폴더에 쓰기 권한이 있는지 확인하세요"]
        super().__init__(message, "PACKAGE_FILE_CREATION_FAILED", hints)
        self.folder = Path(folder)


class DependencyScriptException(ScriptResolverException):
    """의존성 스크립트 추가 실패 시 발생하는 예외"""

    def __init__(self, path: str):
        message = f"'{path}' 의존성 스크립트를 추가하지 못했습니다"
        hints = ["파일이 존재하고 읽을 수 있는지 확인하세요"]
        super().__init__(message, "DEPENDENCY_SCRIPT_FAILED", hints)
        self.path = path


class ScriptFolderRemovalException(ScriptResolverException):
    """스크립트 폴더 삭제 실패 시 발생하는 예외"""

    def __init__(self, folder: Union[str, Path]):
        message = "스크립트 폴더를 삭제하지 못했습니다"
        hints = [f"'{folder}' 폴더에 쓰기 권한이 있는지 확인하세요"]
        super().__init__(message, "SCRIPT_FOLDER_REMOVAL_FAILED", hints)
        self.folder = Path(folder)


class ScriptDownloadException(ScriptResolverException):
    """원격 스크립트 다운로드 실패 시 발생하는 예외"""

    def __init__(self, url: str, cause: BaseException):
        message = f"'{url}'에서 스크립트를 다운로드하지 못했습니다 ({cause})"
        hints = ["URL에 접근할 수 있고 올바른 Swift 스크립트가 들어 있는지 확인하세요"]
        super().__init__(message, "SCRIPT_DOWNLOAD_FAILED", hints)
        self.url = url
        self.cause = cause


class InvalidInlineDependencyException(ScriptResolverException):
    """인라인 의존성 URL이 잘못되었을 때 발생하는 예외"""

    def __init__(self, url: str):
        message = f"인라인 의존성 '{url}'을(를) 해석할 수 없습니다"
        hints = ["URL이 올바른지 확인한 뒤 다시 시도하세요"]
        super().__init__(message, "INVALID_INLINE_DEPENDENCY", hints)
        self.url = url


class NoSwiftFilesInRepositoryException(ScriptResolverException):
    """저장소에 소스 파일이 하나도 없을 때 발생하는 예외"""

    def __init__(self, url: str):
        message = f"'{url}' 저장소에서 Swift 파일을 찾을 수 없습니다"
        hints = ["URL이 올바른지 확인한 뒤 다시 시도하세요"]
        super().__init__(message, "NO_SOURCE_FILES_IN_REPOSITORY", hints)
        self.url = url


class MultipleSwiftFilesInRepositoryException(ScriptResolverException):
    """저장소에 소스 파일이 여러 개 있어 하나를 고를 수 없을 때 발생하는 예외"""

    def __init__(self, url: str, files: Sequence[Union[str, Path]]):
        self.url = url
        self.files = [Path(file) for file in files]
        file_names = "\n- ".join(file.name for file in self.files)
        message = f"'{url}' 저장소에서 여러 개의 Swift 파일이 발견되었습니다"
        hints = [f"다음 스크립트 중 하나를 직접 URL로 지정해 다시 실행하세요:\n- {file_names}"]
        super().__init__(message, "MULTIPLE_SOURCE_FILES_IN_REPOSITORY", hints)


class RemoteScriptNotAllowedException(ScriptResolverException):
    """원격 스크립트를 허용하지 않는 작업에서 원격 참조를 받았을 때 발생하는 예외"""

    def __init__(self):
        message = "이 명령에서는 원격 스크립트를 사용할 수 없습니다"
        hints = ["원격 스크립트는 실행(run) 또는 설치(install)만 할 수 있습니다"]
        super().__init__(message, "REMOTE_SCRIPT_NOT_ALLOWED", hints)


class InvalidReferenceModifierException(ScriptResolverException):
    """스크립트 참조에 알 수 없는 수정자가 포함되었을 때 발생하는 예외"""

    def __init__(self, reference: str, modifier: str):
        message = f"'{reference}' 참조의 수정자 '{modifier}'을(를) 인식할 수 없습니다"
        hints = ["지원되는 수정자는 'branch:<이름>' 뿐입니다 (예: 'owner/repo,branch:develop')"]
        super().__init__(message, "INVALID_REFERENCE_MODIFIER", hints)
        self.reference = reference
        self.modifier = modifier


class ConfigurationException(ScriptResolverException):
    """설정 오류 시 발생하는 예외"""

    def __init__(self, config_key: str, error_detail: str):
        """
        설정 예외 초기화

        Args:
            config_key: 설정 키
            error_detail: 오류 상세 정보
        """
        message = f"설정 오류: {config_key} - {error_detail}"
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key
        self.error_detail = error_detail


def format_error(error: ScriptResolverException) -> str:
    """
    예외를 사용자에게 보여줄 문자열로 변환

    Args:
        error: 리졸버 예외

    Returns:
        메시지와 힌트를 합친 문자열
    """
    lines = [f"오류: {error.message}"]
    for hint in error.hints:
        lines.append(f"힌트: {hint}")
    return "\n".join(lines)
