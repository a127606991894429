"""
스크립트 식별자 모듈

경로 또는 URL로부터 캐시 폴더 이름으로 쓸 수 있는 안정적인 식별자를 만듭니다.
"""

SEPARATOR = "-"

_NORMALIZED_CHARACTERS = ("/", "\\", " ")


def derive_identifier(path_or_url: str, extension: str = ".swift") -> str:
    """
    경로 또는 URL에서 식별자 생성

    확장자가 처음 나타나는 위치 앞부분만 사용하고,
    경로 구분자와 공백을 모두 '-'로 바꿉니다.

    Args:
        path_or_url: 해석된 경로 또는 URL
        extension: 소스 파일 확장자

    Returns:
        str: 캐시 안전한 식별자
    """
    identifier = str(path_or_url).split(extension, 1)[0]

    for character in _NORMALIZED_CHARACTERS:
        identifier = identifier.replace(character, SEPARATOR)

    return identifier


def derive_display_name(identifier: str) -> str:
    """식별자의 마지막 구간을 첫 글자만 대문자로 바꿔 표시 이름으로 사용"""
    return identifier.split(SEPARATOR)[-1].capitalize()
