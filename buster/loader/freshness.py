"""
신선도 토큰 모듈

요청마다 고유한 URL을 만들기 위한 시간 기반 토큰을 발급하고,
리소스 위치에 캐시 버스터 쿼리 파라미터를 붙입니다.
"""

from typing import Callable, Optional
from urllib.parse import urljoin, urlsplit

from ..exceptions import MalformedLocatorError
from ..utils.helpers import epoch_millis


class FreshnessClock:
    """단조 증가하는 에포크 밀리초 토큰 발급기"""

    def __init__(self, now: Optional[Callable[[], int]] = None):
        """
        Args:
            now: 현재 에포크 밀리초를 반환하는 함수 (테스트용 주입)
        """
        self._now = now or epoch_millis
        self._last = 0

    def next_token(self) -> int:
        """
        새 토큰 발급

        벽시계가 마지막 토큰 이후 진행하지 않았으면 마지막 토큰 + 1을 발급합니다.
        """
        token = max(self._now(), self._last + 1)
        self._last = token
        return token

    @property
    def last_token(self) -> int:
        return self._last


def append_token(locator: str, param: str, token: int) -> str:
    """
    리소스 위치에 `param=token` 쿼리 파라미터 추가

    프래그먼트는 쿼리 뒤에 유지됩니다.
    """
    path, hash_mark, fragment = locator.partition("#")
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{param}={token}{hash_mark}{fragment}"


def resolve_url(locator: str, base_location: str) -> str:
    """
    기준 위치에 대해 리소스 위치를 절대 URL로 해석

    Raises:
        MalformedLocatorError: 기준 위치나 결과 URL이 절대 URL이 아닐 때
    """
    try:
        url = urljoin(base_location, locator)
        parts = urlsplit(url)
    except ValueError as e:
        raise MalformedLocatorError(locator, f"URL 해석 실패: {e}") from e

    if not parts.scheme or not (parts.netloc or parts.scheme == "file"):
        raise MalformedLocatorError(locator, f"절대 URL로 해석할 수 없습니다 (기준: {base_location!r})")
    return url


# 프로세스 전체에서 공유하는 기본 발급기
DEFAULT_CLOCK = FreshnessClock()
