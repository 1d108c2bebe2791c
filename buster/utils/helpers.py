"""
공통 유틸리티 함수 모듈

로더 전반에서 사용되는 헬퍼 함수들을 제공합니다.
"""

import re
import time
from typing import Any, Callable, Optional


def epoch_millis() -> int:
    """
    현재 시각을 에포크 밀리초로 반환

    Returns:
        int: 1970-01-01 UTC 이후 경과한 밀리초
    """
    return time.time_ns() // 1_000_000


def validate_url(url: str) -> bool:
    """
    URL 유효성 검증

    Args:
        url: 검증할 URL

    Returns:
        bool: 유효한 URL인지 여부
    """
    url_pattern = re.compile(
        r'^https?://'  # http:// or https://
        r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+[A-Z]{2,6}\.?|'  # domain...
        r'localhost|'  # localhost...
        r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # ...or ip
        r'(?::\d+)?'  # optional port
        r'(?:/?|[/?]\S+)$', re.IGNORECASE)

    return url_pattern.match(url) is not None


def invoke_with_context(callback: Callable[..., Any], context: Optional[Any], *args: Any) -> Any:
    """
    컨텍스트가 있으면 그 객체에서 호출된 것처럼 콜백 실행

    Args:
        callback: 실행할 콜백
        context: 호출 컨텍스트 (없으면 None)
        *args: 콜백 인자

    Returns:
        Any: 콜백 반환값
    """
    if context is not None:
        return callback(context, *args)
    return callback(*args)


def truncate_string(text: str, max_length: int, suffix: str = "...") -> str:
    """
    문자열을 지정된 길이로 자르기

    Args:
        text: 자를 문자열
        max_length: 최대 길이
        suffix: 자른 부분에 추가할 접미사

    Returns:
        str: 자른 문자열
    """
    if len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix
