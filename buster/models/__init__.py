"""
데이터 모델 패키지

로더의 핵심 데이터 모델들을 정의합니다.
"""

from .base import LoadOptions, ModuleIdentity
from .enums import ExportConvention, LoadState, ModuleState

__all__ = [
    "ModuleIdentity",
    "LoadOptions",
    "ModuleState",
    "LoadState",
    "ExportConvention",
]
