"""
캐시 버스터 스크립트 로더

리소스 URL에 신선도 토큰을 붙여 캐시된 스크립트 대신 새로 받아 오고,
로드 결과를 asyncio Future로 전달합니다.
"""

from functools import lru_cache
from typing import Any, Optional

from .config.settings import Settings, get_settings
from .exceptions import BusterException, ConfigurationException, LoadFailure, MalformedLocatorError
from .host import HostBase, HttpHost, ScriptElement
from .loader import LOADER_VERSION, HostEnvironment, LoadRegistry, Loader, install, schema

__version__ = LOADER_VERSION


@lru_cache()
def get_loader() -> Loader:
    """
    기본 로더 인스턴스를 반환합니다 (싱글톤 패턴)

    여러 번의 asyncio.run()에서 재사용할 수 있습니다. 호스트는 호출된
    이벤트 루프마다 HTTP 세션을 새로 만들고, 로드 상태는 유지됩니다.

    Returns:
        Loader: 기본 설정의 HTTP 호스트를 사용하는 로더
    """
    settings = get_settings()
    return Loader(HttpHost(settings), settings=settings)


# 편의 함수들
async def load(locator: str, options: Any = None, context: Optional[Any] = None) -> None:
    """
    편의 함수: 기본 로더로 스크립트 로드

    Args:
        locator: 스크립트 위치
        options: 로드 옵션
        context: 콜백 호출 컨텍스트
    """
    await get_loader().load(locator, options, context)


async def bust(locator: str, options: Any = None, context: Optional[Any] = None) -> None:
    """편의 함수: load의 별칭"""
    await get_loader().bust(locator, options, context)


__all__ = [
    "__version__",
    "Settings",
    "get_settings",
    "BusterException",
    "ConfigurationException",
    "LoadFailure",
    "MalformedLocatorError",
    "HostBase",
    "HttpHost",
    "ScriptElement",
    "HostEnvironment",
    "LoadRegistry",
    "Loader",
    "install",
    "schema",
    "get_loader",
    "load",
    "bust",
]
