"""
Object Naming Policy

오브젝트 이름/키 생성 규칙 (모든 provider 공통)
- Content-Type 기반 확장자 추론
- 디렉토리(prefix) 정규화
- 오브젝트 키 조합
"""

import uuid
from typing import Optional

from errors import InvalidArgumentError

DEFAULT_EXTENSION = ".bin"


def to_extension(content_type: Optional[str]) -> str:
    """
    MIME Content-Type에서 확장자 추출

    "image/png" -> ".png"
    "text/html; charset=utf-8" -> ".html"
    None, "garbage" -> ".bin"

    대소문자는 입력 그대로 유지한다.
    """
    if content_type is None or "/" not in content_type:
        return DEFAULT_EXTENSION

    subtype = content_type[content_type.index("/") + 1:]

    # MIME 파라미터 제거
    if ";" in subtype:
        subtype = subtype[:subtype.index(";")].strip()

    if not subtype:
        return DEFAULT_EXTENSION

    return "." + subtype


def derive_file_name(content_type: Optional[str]) -> str:
    """무작위 UUID + 확장자로 고유 파일 이름 생성"""
    return f"{uuid.uuid4()}{to_extension(content_type)}"


def normalize_directory(directory: Optional[str]) -> str:
    """디렉토리 정규화 (None/공백 -> 루트 prefix "")"""
    if directory is None or not directory.strip():
        return ""
    return directory.strip()


def require_file_name(file_name: Optional[str]) -> str:
    """파일 이름 검증 (None/공백이면 InvalidArgumentError)"""
    if file_name is None or not file_name.strip():
        raise InvalidArgumentError("fileName must not be null or empty")
    return file_name.strip()


def build_object_key(directory: Optional[str], file_name: str) -> str:
    """
    오브젝트 키 조합

    디렉토리가 비어 있으면 파일 이름만, 아니면 "dir/file".
    슬래시 중복 정리는 하지 않는다.
    """
    prefix = normalize_directory(directory)
    if not prefix:
        return file_name
    return f"{prefix}/{file_name}"
