"""
HTTP 스크립트 호스트 모듈

aiohttp로 스크립트를 가져와 실행하는 호스트를 제공합니다.
"""

import asyncio
import types
from typing import Callable, Optional

import aiohttp

from ..config.settings import Settings
from ..exceptions import LoadFailure
from ..loader.schema import schema
from ..utils.helpers import truncate_string
from .base import HostBase, ScriptElement

ScriptExecutor = Callable[[ScriptElement, str], None]


class HttpHost(HostBase):
    """HTTP 스크립트 호스트

    삽입된 요소의 src를 내려받은 뒤 실행기로 넘깁니다. async_가 꺼진 요소는
    다운로드는 동시에 진행하되 삽입 순서대로 실행됩니다.
    """

    def __init__(
        self,
        settings: Settings,
        session: Optional[aiohttp.ClientSession] = None,
        executor: Optional[ScriptExecutor] = None,
    ):
        """
        HTTP 호스트 초기화

        Args:
            settings: 로더 설정
            session: 외부에서 관리하는 세션 (None이면 필요할 때 생성)
            executor: 내려받은 소스를 실행하는 함수 (None이면 파이썬 모듈로 실행)
        """
        super().__init__()
        self.settings = settings
        self.session = session
        self._owns_session = session is None
        self.executor = executor or self.execute_python
        self.modules: dict[str, types.ModuleType] = {}
        self._tasks: set[asyncio.Task] = set()
        self._ordered_tail: Optional[asyncio.Task] = None
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def base_location(self) -> str:
        return self.settings.base_url

    async def _get_session(self) -> aiohttp.ClientSession:
        """HTTP 세션 생성

        직접 만든 세션은 생성한 이벤트 루프에 묶이므로, 다른 루프에서
        호출되면 새 세션을 만듭니다.
        """
        loop = asyncio.get_running_loop()
        if self.session and self._owns_session and self._session_loop is not loop:
            self.logger.warning("이전 이벤트 루프의 HTTP 세션을 버리고 새로 생성합니다")
            self.session = None

        if not self.session:
            self._session_loop = loop
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.http_timeout),
                headers={
                    'User-Agent': self.settings.user_agent
                }
            )
        return self.session

    def _start(self, element: ScriptElement) -> None:
        loop = asyncio.get_running_loop()
        if self._ordered_tail is not None and self._ordered_tail.get_loop() is not loop:
            self._ordered_tail = None

        previous = None if element.async_ else self._ordered_tail
        task = loop.create_task(self._load(element, previous))
        if not element.async_:
            self._ordered_tail = task

        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _load(self, element: ScriptElement, previous: Optional[asyncio.Task]) -> None:
        """요소 하나를 내려받고 실행한 뒤 결과 이벤트 전달

        어떤 경로로 끝나든 요소는 load 또는 error 이벤트를 한 번 받습니다.
        """
        try:
            source = await self.fetch(element.src)

            if previous is not None:
                # 앞선 순서 보장 요소의 실행이 끝날 때까지 대기
                await asyncio.wait([previous])

        except LoadFailure as e:
            self.logger.error(f"스크립트 다운로드 실패: {e}")
            element.dispatch_error(e)
            return
        except asyncio.CancelledError:
            self.logger.warning(f"스크립트 다운로드 취소: {element.src}")
            element.dispatch_error(LoadFailure(element.src, "다운로드 취소"))
            raise
        except Exception as e:
            self.logger.error(f"스크립트 다운로드 중 예기치 않은 오류: {element.src} - {e}")
            element.dispatch_error(LoadFailure(element.src, f"다운로드 오류: {e}"))
            return

        try:
            self.executor(element, source)
        except Exception as e:
            self.logger.error(f"스크립트 실행 오류: {element.src} - {e}")
            element.dispatch_error(LoadFailure(element.src, f"실행 오류: {e}"))
            return

        self.logger.info(f"스크립트 로드 완료: {element.src}")
        element.dispatch_load()

    async def fetch(self, url: str) -> str:
        """
        스크립트 소스 다운로드

        Args:
            url: 캐시 버스터가 포함된 절대 URL

        Returns:
            str: 스크립트 소스

        Raises:
            LoadFailure: HTTP 오류, 네트워크 오류, 타임아웃 또는 디코딩 실패
        """
        session = await self._get_session()

        try:
            async with session.get(url) as response:
                if response.status >= 400:
                    body = await response.text()
                    raise LoadFailure(
                        url,
                        f"HTTP {response.status} {truncate_string(body, 200)}".rstrip(),
                        status=response.status,
                    )
                return await response.text()

        except UnicodeDecodeError as e:
            raise LoadFailure(url, f"인코딩 오류: {e.encoding}로 디코딩할 수 없습니다") from e
        except asyncio.TimeoutError as e:
            raise LoadFailure(url, f"타임아웃 ({self.settings.http_timeout}초)") from e
        except aiohttp.ClientError as e:
            raise LoadFailure(url, f"네트워크 오류: {e}") from e

    def execute_python(self, element: ScriptElement, source: str) -> None:
        """
        파이썬 소스를 새 모듈 객체에서 실행

        실행된 모듈은 모듈 이름을 키로 `modules`에 보관됩니다.
        """
        name = schema(element.src).name
        code = compile(source, element.src, "exec")

        module = types.ModuleType(name)
        module.__file__ = element.src
        exec(code, module.__dict__)

        self.modules[name] = module
        self.logger.debug(f"모듈 실행 완료: {name}")

    async def close(self) -> None:
        """진행 중인 로드를 기다린 뒤 세션 정리"""
        loop = asyncio.get_running_loop()
        tasks = [task for task in self._tasks if task.get_loop() is loop]
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

        if self.session and self._owns_session:
            await self.session.close()
            self.session = None

        self.logger.info("HTTP 호스트 리소스 정리 완료")
