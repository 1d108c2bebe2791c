"""
열거형 정의 모듈

로더에서 사용되는 상수 값들을 열거형으로 정의합니다.
"""

from enum import Enum


class ModuleState(Enum):
    """레지스트리에 기록되는 모듈 상태"""
    UNLOADED = "unloaded"
    PENDING = "pending"
    LOADED = "loaded"


class LoadState(Enum):
    """개별 로드 호출의 상태"""
    IDLE = "idle"
    PENDING = "pending"
    LOADED = "loaded"
    FAILED = "failed"


class ExportConvention(Enum):
    """로더를 노출하는 모듈 규약"""
    MODULE_EXPORTS = "module_exports"
    DEFINE = "define"
    GLOBAL = "global"
