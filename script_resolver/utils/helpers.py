"""
공통 유틸리티 함수 모듈

리졸버에서 공통으로 사용되는 파일 시스템 및 URL 헬퍼 함수들을 제공합니다.
"""

import re
import shutil
from pathlib import Path
from typing import Union
from urllib.parse import urlsplit, urlunsplit

_SCP_URL_PATTERN = re.compile(r'^git@[\w.-]+:[\w./~-]+$')


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    디렉토리 존재 확인 및 생성

    Args:
        path: 디렉토리 경로

    Returns:
        Path: 디렉토리 경로 객체
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def empty_directory(path: Union[str, Path]) -> Path:
    """
    디렉토리 내용을 모두 비움 (디렉토리 자체는 유지)

    Args:
        path: 디렉토리 경로

    Returns:
        Path: 비워진 디렉토리 경로 객체
    """
    path = ensure_directory(path)

    for child in path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()

    return path


def is_resolvable_url(url: str) -> bool:
    """
    의존성 또는 스크립트 위치로 사용할 수 있는 URL인지 검사

    http(s) URL, git@host:path 형식, file:// URL 및 로컬 경로를 허용합니다.

    Args:
        url: 검사할 문자열

    Returns:
        bool: 해석 가능한 URL인지 여부
    """
    if not url or any(char.isspace() for char in url):
        return False

    if url.startswith("git@"):
        return _SCP_URL_PATTERN.match(url) is not None

    try:
        parts = urlsplit(url)
    except ValueError:
        return False

    if parts.scheme in ("http", "https"):
        return bool(parts.hostname)
    if parts.scheme == "file":
        return bool(parts.path)

    return not parts.scheme and bool(parts.path)


def to_raw_content_url(url: str) -> str:
    """
    GitHub 파일 페이지 URL을 원본 콘텐츠 URL로 변환

    예: https://github.com/owner/repo/blob/main/script.swift
        -> https://raw.githubusercontent.com/owner/repo/main/script.swift

    Args:
        url: 원본 URL

    Returns:
        str: 변환된 URL (변환 대상이 아니면 원본 그대로)
    """
    parts = urlsplit(url)

    if parts.netloc != "github.com":
        return url

    segments = parts.path.split("/")
    # ['', owner, repo, 'blob', ref, ...path]
    if len(segments) < 6 or segments[3] != "blob":
        return url

    raw_path = "/".join(segments[:3] + segments[4:])
    return urlunsplit((parts.scheme, "raw.githubusercontent.com", raw_path, parts.query, ""))


def parent_url(url: str) -> str:
    """
    URL의 부모 경로 반환 (끝에 '/' 포함)

    Args:
        url: 파일 URL

    Returns:
        str: 부모 URL
    """
    parts = urlsplit(url)
    parent_path = parts.path.rsplit("/", 1)[0] + "/"
    return urlunsplit((parts.scheme, parts.netloc, parent_path, "", ""))
