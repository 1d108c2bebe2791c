"""
스크립트 호스트 패키지

스크립트 요소를 삽입하고 로드 이벤트를 전달하는 호스트들을 제공합니다.
"""

from .base import HostBase, ScriptElement
from .http_host import HttpHost

__all__ = [
    "HostBase",
    "ScriptElement",
    "HttpHost",
]
