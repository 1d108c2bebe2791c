"""
캐시 버스터 로더 모듈

리소스 위치에 신선도 토큰을 붙여 스크립트 요소로 로드하고,
결과를 asyncio Future로 전달합니다.
"""

import asyncio
from collections.abc import MutableMapping
from functools import partial
from typing import Any, Optional

from ..config.settings import Settings
from ..exceptions import LoadFailure, MalformedLocatorError
from ..host.base import HostBase, ScriptElement
from ..models.base import LoadOptions, ModuleIdentity
from ..models.enums import LoadState
from ..monitoring.metrics import record_load
from ..utils.helpers import invoke_with_context
from ..utils.logging import get_logger
from .freshness import DEFAULT_CLOCK, FreshnessClock, append_token, resolve_url
from .registry import LoadRegistry
from .schema import schema

logger = get_logger(__name__)

LOADER_VERSION = "1.0.0"


class PendingLoad:
    """진행 중인 로드 한 건

    호출자의 옵션과 컨텍스트, Future, 생성된 URL과 요소를 묶어 둡니다.
    """

    def __init__(self, locator: Any, options: LoadOptions, context: Optional[Any], future: asyncio.Future):
        self.locator = locator
        self.options = options
        self.context = context
        self.future = future
        self.identity: Optional[ModuleIdentity] = None
        self.url: Optional[str] = None
        self.element: Optional[ScriptElement] = None
        self.started_at: Optional[float] = None
        self.state = LoadState.IDLE
        # 요소 결과를 받을 호출들 (첫 호출 포함, 서로의 Future와는 독립)
        self.followers: list["PendingLoad"] = [self]

    def elapsed(self) -> Optional[float]:
        if self.started_at is None:
            return None
        return self.future.get_loop().time() - self.started_at

    def resolve(self) -> None:
        """Future를 None으로 완료 (컨텍스트와 무관하게 결과 값은 없음)"""
        self.state = LoadState.LOADED
        if not self.future.done():
            self.future.set_result(None)

    def reject(self, error: BaseException) -> None:
        """오류 콜백을 한 번 호출한 뒤 같은 오류로 Future 거부"""
        self.state = LoadState.FAILED

        if self.options.on_error is not None:
            try:
                invoke_with_context(self.options.on_error, self.context, error)
            except Exception:
                logger.exception(f"onError 콜백 실행 중 오류: {self.locator!r}")

        if not self.future.done():
            self.future.set_exception(error)


class Loader:
    """캐시 버스터 로더"""

    version = LOADER_VERSION

    def __init__(
        self,
        host: HostBase,
        registry: Optional[LoadRegistry] = None,
        settings: Optional[Settings] = None,
        clock: Optional[FreshnessClock] = None,
    ):
        """
        로더 초기화

        Args:
            host: 스크립트 요소를 삽입할 호스트
            registry: 로드 레지스트리 (None이면 로더 전용 레지스트리 생성)
            settings: 로더 설정 (None이면 기본 설정 사용)
            clock: 신선도 토큰 발급기 (None이면 프로세스 공용 발급기)
        """
        if settings is None:
            from ..config.settings import get_settings
            settings = get_settings()

        self.host = host
        self.registry = registry if registry is not None else LoadRegistry()
        self.settings = settings
        self.clock = clock if clock is not None else DEFAULT_CLOCK
        self.logger = logger

        self.global_scope: Optional[MutableMapping[str, Any]] = None
        self.global_name: Optional[str] = None

        self._in_flight: dict[str, PendingLoad] = {}

    def load(self, locator: str, options: Any = None, context: Optional[Any] = None) -> asyncio.Future:
        """
        스크립트 로드

        이미 로드된 모듈이면 경고만 남기고 즉시 완료된 Future를 반환합니다.
        실패는 예외로 던지지 않고 반환된 Future의 거부로 전달됩니다.
        실행 중인 이벤트 루프 안에서 호출해야 합니다.

        Args:
            locator: 스크립트의 상대 또는 절대 위치
            options: LoadOptions 또는 {"async": bool, "onError": callable} 매핑
            context: 콜백을 이 객체에서 호출된 것처럼 실행할 컨텍스트

        Returns:
            asyncio.Future: 로드 완료 시 None으로 완료되는 Future
        """
        future = asyncio.get_running_loop().create_future()

        try:
            load_options = LoadOptions.coerce(options)
        except ValueError as e:
            self.logger.error(f"로드 옵션 오류: {locator!r} - {e}")
            future.set_exception(e)
            return future

        pending = PendingLoad(locator, load_options, context, future)
        try:
            self._begin(pending)
        except Exception as e:
            self._fail(pending, e)

        return future

    def bust(self, locator: str, options: Any = None, context: Optional[Any] = None) -> asyncio.Future:
        """load의 별칭"""
        return self.load(locator, options, context)

    def _begin(self, pending: PendingLoad) -> None:
        locator = pending.locator
        if not isinstance(locator, str):
            raise MalformedLocatorError(locator, "문자열이 아닙니다")

        identity = schema(locator)
        if not identity.name:
            raise MalformedLocatorError(locator, "모듈 이름을 추출할 수 없습니다")
        pending.identity = identity

        if self.registry.is_loaded(identity.name):
            self.logger.warning(f"모듈 {identity.name}은(는) 이미 로드되었습니다")
            record_load("duplicate")
            pending.resolve()
            return

        in_flight = self._in_flight.get(identity.name)
        if in_flight is not None:
            self.logger.info(f"진행 중인 로드에 합류: {identity.name} -> {in_flight.url}")
            pending.state = LoadState.PENDING
            record_load("joined")
            in_flight.followers.append(pending)
            return

        token = self.clock.next_token()
        url = resolve_url(
            append_token(locator, self.settings.cache_buster_param, token),
            self.host.base_location,
        )

        element = self.host.create_element()
        element.defer = True
        element.type = self.settings.script_type
        element.async_ = self.settings.default_async if pending.options.async_ is None else pending.options.async_
        element.on_load = partial(self._handle_load, pending)
        element.on_error = partial(self._handle_error, pending)
        element.src = url

        pending.url = url
        pending.element = element
        pending.state = LoadState.PENDING
        pending.started_at = pending.future.get_loop().time()

        self.registry.mark_pending(identity.name)
        self._in_flight[identity.name] = pending

        self.logger.debug(f"스크립트 요소 삽입: {url}")
        self.host.append(element)

    def _release(self, pending: PendingLoad) -> None:
        """진행 중 기록 해제"""
        if pending.identity is None:
            return
        name = pending.identity.name
        if self._in_flight.get(name) is pending:
            del self._in_flight[name]
            self.registry.clear_pending(name)

    def _handle_load(self, pending: PendingLoad) -> None:
        name = pending.identity.name
        self._in_flight.pop(name, None)
        self.registry.mark_loaded(name)

        record_load("loaded", pending.elapsed())
        self.logger.info(f"모듈 로드 완료: {name} ({pending.url})")
        for follower in pending.followers:
            follower.resolve()

    def _handle_error(self, pending: PendingLoad, error: Any) -> None:
        if not isinstance(error, BaseException):
            error = LoadFailure(pending.url or str(pending.locator), repr(error))
        record_load("failed", pending.elapsed())
        self._fail(pending, error)

    def _fail(self, pending: PendingLoad, error: BaseException) -> None:
        self._release(pending)
        self.logger.error(f"캐시 버스터 모듈 로드 오류: {pending.locator!r} - {error}")
        for follower in pending.followers:
            follower.reject(error)

    def attach(self, scope: MutableMapping[str, Any], name: str = "buster") -> "Loader":
        """
        전역 네임스페이스에 로더 등록

        Args:
            scope: 전역 네임스페이스 역할의 매핑
            name: 등록할 이름
        """
        scope[name] = self
        self.global_scope = scope
        self.global_name = name
        return self

    def no_conflict(self) -> "Loader":
        """
        전역 네임스페이스에서 로더 등록 해제

        슬롯이 여전히 이 로더를 가리킬 때만 제거하고, 항상 로더를 반환합니다.
        """
        scope = self.global_scope
        if scope is not None and scope.get(self.global_name) is self:
            del scope[self.global_name]
            self.logger.debug(f"전역 등록 해제: {self.global_name}")
        return self

    async def close(self) -> None:
        await self.host.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
