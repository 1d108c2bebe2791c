"""
스크립트 호스트 기본 모듈

로더가 스크립트 요소를 삽입하는 호스트의 추상 인터페이스와
스크립트 요소 모델을 정의합니다.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..models.enums import LoadState
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ScriptElement:
    """호스트에 삽입되는 로드 가능한 스크립트 요소"""

    src: str = ""
    type: str = ""
    defer: bool = False
    async_: bool = False
    on_load: Optional[Callable[[], Any]] = None
    on_error: Optional[Callable[[BaseException], Any]] = None
    state: LoadState = field(default=LoadState.IDLE)

    def dispatch_load(self) -> None:
        """로드 성공 이벤트 전달 (요소당 한 번만)"""
        if self.state in (LoadState.LOADED, LoadState.FAILED):
            logger.debug(f"이미 처리된 요소의 load 이벤트 무시: {self.src}")
            return
        self.state = LoadState.LOADED
        if self.on_load is not None:
            self.on_load()

    def dispatch_error(self, error: BaseException) -> None:
        """로드 실패 이벤트 전달 (요소당 한 번만)"""
        if self.state in (LoadState.LOADED, LoadState.FAILED):
            logger.debug(f"이미 처리된 요소의 error 이벤트 무시: {self.src}")
            return
        self.state = LoadState.FAILED
        if self.on_error is not None:
            self.on_error(error)


class HostBase(ABC):
    """스크립트 호스트 추상 클래스"""

    def __init__(self):
        self.elements: list[ScriptElement] = []
        self.logger = logger

    @property
    @abstractmethod
    def base_location(self) -> str:
        """상대 위치를 해석할 기준 URL"""

    def create_element(self) -> ScriptElement:
        """새 스크립트 요소 생성"""
        return ScriptElement()

    def append(self, element: ScriptElement) -> None:
        """
        요소를 호스트에 삽입하여 로드 시작

        Args:
            element: src와 이벤트 핸들러가 설정된 스크립트 요소
        """
        if not element.src:
            raise ValueError("src가 설정되지 않은 스크립트 요소입니다")
        element.state = LoadState.PENDING
        self.elements.append(element)
        self._start(element)

    @abstractmethod
    def _start(self, element: ScriptElement) -> None:
        """요소 로드 시작 (결과는 요소 이벤트로 전달)"""

    async def close(self) -> None:
        """리소스 정리"""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
