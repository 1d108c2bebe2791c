"""
기본 데이터 모델 모듈

로더의 핵심 데이터 구조들을 정의합니다.
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModuleIdentity(BaseModel):
    """리소스 위치에서 추출한 모듈 식별 정보"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="마지막 경로 세그먼트에서 첫 번째 '.' 앞부분"
    )
    version: str = Field(
        default="",
        description="첫 번째와 두 번째 '.' 사이의 부분"
    )
    extension: str = Field(
        default="",
        description="버전 뒤에 남는 부분"
    )


class LoadOptions(BaseModel):
    """로드 호출 옵션"""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    async_: Optional[bool] = Field(
        default=None,
        alias="async",
        description="비동기 로드 여부 (None이면 설정 기본값 사용)"
    )
    on_error: Optional[Callable[..., Any]] = Field(
        default=None,
        alias="onError",
        description="로드 실패 시 오류와 함께 호출되는 콜백"
    )

    @classmethod
    def coerce(cls, options: Any) -> "LoadOptions":
        """
        None, 매핑 또는 LoadOptions를 LoadOptions로 변환

        Args:
            options: 호출자가 전달한 옵션

        Returns:
            LoadOptions: 정규화된 옵션
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)
