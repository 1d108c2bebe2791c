"""
모니터링 시스템

스크립트 로드에 대한 Prometheus 메트릭을 제공합니다.
"""

from .metrics import LOAD_COUNT, LOAD_DURATION, REGISTRY, record_load

__all__ = [
    "REGISTRY",
    "LOAD_COUNT",
    "LOAD_DURATION",
    "record_load",
]
