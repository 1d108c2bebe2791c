"""
캐시 버스터 로더 패키지

리소스 위치 파싱, 로드 레지스트리, 신선도 토큰, 스크립트 로드와
로더 노출 규약을 제공합니다.
"""

from .schema import schema
from .registry import LoadRegistry
from .freshness import FreshnessClock, append_token, resolve_url
from .loader import LOADER_VERSION, Loader, PendingLoad
from .exports import HostEnvironment, detect_convention, install

__all__ = [
    "schema",
    "LoadRegistry",
    "FreshnessClock",
    "append_token",
    "resolve_url",
    "LOADER_VERSION",
    "Loader",
    "PendingLoad",
    "HostEnvironment",
    "detect_convention",
    "install",
]
