"""
로더 노출 규약 모듈

호스트 환경이 제공하는 기능에 따라 로더를 모듈 exports, 정의 함수,
전역 네임스페이스 중 하나로 노출합니다.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional
from weakref import WeakKeyDictionary

from ..models.enums import ExportConvention
from ..utils.logging import get_logger
from .loader import Loader

logger = get_logger(__name__)

DEFAULT_GLOBAL_NAME = "buster"


@dataclass(eq=False)
class HostEnvironment:
    """로더를 노출할 호스트 환경

    Attributes:
        module: `exports` 속성을 가진 모듈 객체 (동기 exports 규약)
        define: 참인 `amd` 속성을 가진 정의 함수 (정의 기반 규약)
        global_scope: 전역 네임스페이스 역할의 매핑
    """

    module: Optional[Any] = None
    define: Optional[Callable[..., Any]] = None
    global_scope: MutableMapping[str, Any] = field(default_factory=dict)


# 환경 객체가 사라지면 캐시 항목도 함께 사라짐
_conventions: "WeakKeyDictionary[HostEnvironment, ExportConvention]" = WeakKeyDictionary()


def detect_convention(environment: HostEnvironment) -> ExportConvention:
    """
    노출 규약 탐지 (환경당 한 번, 결과는 캐시됨)

    모듈 exports, 정의 함수, 전역 네임스페이스 순서로 확인합니다.
    """
    cached = _conventions.get(environment)
    if cached is not None:
        return cached

    if environment.module is not None and hasattr(environment.module, "exports"):
        convention = ExportConvention.MODULE_EXPORTS
    elif callable(environment.define) and getattr(environment.define, "amd", False):
        convention = ExportConvention.DEFINE
    else:
        convention = ExportConvention.GLOBAL

    _conventions[environment] = convention
    logger.debug(f"로더 노출 규약 선택: {convention.value}")
    return convention


def install(
    environment: HostEnvironment,
    factory: Callable[[], Loader],
    name: str = DEFAULT_GLOBAL_NAME,
) -> Optional[Loader]:
    """
    환경에 맞는 규약으로 로더 노출

    Args:
        environment: 호스트 환경
        factory: 로더 생성 함수
        name: 전역 네임스페이스에 등록할 이름

    Returns:
        생성된 로더 (정의 함수에 위임했거나 전역 이름이 이미 사용 중이면 None)
    """
    convention = detect_convention(environment)

    if convention is ExportConvention.MODULE_EXPORTS:
        loader = factory()
        environment.module.exports = loader
        return loader

    if convention is ExportConvention.DEFINE:
        environment.define([], factory)
        return None

    scope = environment.global_scope
    if name in scope:
        logger.warning(f"{name}은(는) 이미 전역 범위에 정의되어 있습니다")
        return None

    return factory().attach(scope, name)
