"""
테스트 공용 픽스처
"""

import pytest

from buster.config.settings import Settings
from buster.host.base import HostBase, ScriptElement
from buster.loader.freshness import FreshnessClock
from buster.loader.loader import Loader
from buster.loader.registry import LoadRegistry


class RecordingHost(HostBase):
    """삽입된 요소를 기록만 하는 호스트 (이벤트는 테스트가 직접 전달)"""

    def __init__(self, base_location: str = "http://localhost/"):
        super().__init__()
        self._base_location = base_location
        self.closed = False

    @property
    def base_location(self) -> str:
        return self._base_location

    def _start(self, element: ScriptElement) -> None:
        pass

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings():
    """기본 설정"""
    return Settings(base_url="http://localhost/")


@pytest.fixture
def host():
    """기록용 호스트"""
    return RecordingHost()


@pytest.fixture
def registry():
    """빈 로드 레지스트리"""
    return LoadRegistry()


@pytest.fixture
def loader(host, registry, settings):
    """기록용 호스트를 사용하는 로더"""
    return Loader(host, registry=registry, settings=settings)


@pytest.fixture
def fixed_clock():
    """항상 같은 시각을 반환하는 토큰 발급기"""
    return FreshnessClock(now=lambda: 1_700_000_000_000)
