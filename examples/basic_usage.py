#!/usr/bin/env python3
"""
캐시 버스터 로더 사용 예제

로컬 aiohttp 서버에서 모듈을 두 번 요청하여 캐시 버스터 URL과
중복 로드 처리를 보여줍니다.
"""

import asyncio

from aiohttp import web

from buster import HostEnvironment, HttpHost, Loader, LoadFailure, Settings, install
from buster.utils.logging import setup_logging


async def serve_module(request):
    """요청받은 캐시 버스터 값을 모듈 소스에 담아 반환"""
    if request.match_info["name"].startswith("missing"):
        raise web.HTTPNotFound()
    token = request.query.get("cacheBuster", "")
    return web.Response(text=f"TOKEN = {token!r}\n", content_type="text/x-python")


class Dashboard:
    """컨텍스트 바인딩 예제용 클래스"""

    def __init__(self):
        self.errors = []

    def on_module_error(self, error):
        self.errors.append(error)
        print(f"대시보드 오류 기록: {error}")


async def main():
    app = web.Application()
    app.router.add_get("/modules/{name}", serve_module)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 8765)
    await site.start()

    settings = Settings(base_url="http://127.0.0.1:8765/")
    setup_logging(settings)

    try:
        scope = {}
        loader = install(
            HostEnvironment(global_scope=scope),
            lambda: Loader(HttpHost(settings), settings=settings),
        )

        async with loader:
            print("\n1. 첫 로드")
            await loader.load("/modules/bustMe.js")
            print(f"받은 토큰: {loader.host.modules['bustMe'].TOKEN}")

            print("\n2. 중복 로드 (요청 없음)")
            await loader.bust("/modules/bustMe.js")

            print("\n3. 실패한 로드")
            dashboard = Dashboard()
            try:
                await loader.load(
                    "/modules/missing.v2.js",
                    {"onError": Dashboard.on_module_error},
                    dashboard,
                )
            except LoadFailure as e:
                print(f"로드 실패: HTTP {e.status}")

            print("\n4. 전역 등록 해제")
            local_loader = loader.no_conflict()
            print(f"전역 이름 남아 있음: {'buster' in scope}, 같은 로더: {local_loader is loader}")
    finally:
        await runner.cleanup()


if __name__ == "__main__":
    asyncio.run(main())
