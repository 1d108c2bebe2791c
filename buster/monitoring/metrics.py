"""
Prometheus 메트릭 모듈

스크립트 로드 결과와 소요 시간 메트릭을 수집합니다.
"""

from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram

from ..utils.logging import get_logger

# 메트릭 레지스트리
REGISTRY = CollectorRegistry()

logger = get_logger(__name__)

LOAD_COUNT = Counter(
    'buster_loads_total',
    '스크립트 로드 요청 수',
    ['outcome'],
    registry=REGISTRY
)

LOAD_DURATION = Histogram(
    'buster_load_duration_seconds',
    '스크립트 로드 완료까지 걸린 시간 (초)',
    ['outcome'],
    registry=REGISTRY
)


def record_load(outcome: str, duration: Optional[float] = None) -> None:
    """
    로드 결과 기록

    Args:
        outcome: loaded, failed, duplicate, joined 중 하나
        duration: 삽입부터 완료까지 걸린 시간 (초, 중복 로드는 None)
    """
    try:
        LOAD_COUNT.labels(outcome=outcome).inc()
        if duration is not None:
            LOAD_DURATION.labels(outcome=outcome).observe(duration)
    except ValueError as e:
        logger.error(f"로드 메트릭 기록 실패: {e}")
