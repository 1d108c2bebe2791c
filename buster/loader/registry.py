"""
로드 레지스트리 모듈

로드가 완료된 모듈 이름을 기록합니다.
"""

from ..models.enums import ModuleState
from ..utils.logging import get_logger

logger = get_logger(__name__)


class LoadRegistry:
    """모듈 이름별 로드 상태 레지스트리"""

    def __init__(self):
        self._states: dict[str, ModuleState] = {}

    def state(self, name: str) -> ModuleState:
        """모듈의 현재 상태 (기록이 없으면 UNLOADED)"""
        return self._states.get(name, ModuleState.UNLOADED)

    def is_loaded(self, name: str) -> bool:
        return self._states.get(name) is ModuleState.LOADED

    def is_pending(self, name: str) -> bool:
        return self._states.get(name) is ModuleState.PENDING

    def mark_loaded(self, name: str) -> None:
        self._states[name] = ModuleState.LOADED
        logger.debug(f"모듈 로드 완료 기록: {name}")

    def mark_pending(self, name: str) -> None:
        """
        진행 중인 로드 기록

        Raises:
            ValueError: 이미 로드된 모듈인 경우
        """
        if self.is_loaded(name):
            raise ValueError(f"이미 로드된 모듈입니다: {name}")
        self._states[name] = ModuleState.PENDING

    def clear_pending(self, name: str) -> None:
        """실패한 로드의 진행 중 기록 제거 (로드 완료 기록은 유지)"""
        if self.is_pending(name):
            del self._states[name]

    def loaded_names(self) -> list[str]:
        return sorted(name for name, state in self._states.items() if state is ModuleState.LOADED)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_loaded(name)

    def __len__(self) -> int:
        return len(self.loaded_names())
