"""
설정 관리 모듈

환경 변수를 통한 로더 설정을 관리합니다.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationException
from ..utils.helpers import validate_url


class Settings(BaseSettings):
    """로더 설정 관리 클래스"""

    model_config = SettingsConfigDict(
        env_prefix="BUSTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 호스트 설정
    base_url: str = Field(
        default="http://localhost/",
        description="상대 경로를 해석할 기준 위치"
    )
    http_timeout: float = Field(
        default=30.0,
        description="HTTP 요청 타임아웃 (초)"
    )
    user_agent: str = Field(
        default="Buster/1.0",
        description="HTTP 요청 User-Agent 헤더"
    )

    # 로더 설정
    cache_buster_param: str = Field(
        default="cacheBuster",
        description="신선도 토큰 쿼리 파라미터 이름"
    )
    script_type: str = Field(
        default="text/x-python",
        description="스크립트 요소의 콘텐츠 타입"
    )
    default_async: bool = Field(
        default=True,
        description="옵션에 async가 없을 때의 비동기 로드 여부"
    )

    # 로깅 설정
    log_level: str = Field(
        default="INFO",
        description="로그 레벨"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="로그 포맷"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="로그 파일 경로"
    )

    def validate_configuration(self) -> None:
        """설정 유효성 검증"""
        if not validate_url(self.base_url):
            raise ConfigurationException(
                "BUSTER_BASE_URL", f"절대 http(s) URL이어야 합니다: {self.base_url}"
            )

        if not self.cache_buster_param.strip():
            raise ConfigurationException(
                "BUSTER_CACHE_BUSTER_PARAM", "빈 파라미터 이름은 사용할 수 없습니다"
            )

        if self.http_timeout <= 0:
            raise ConfigurationException(
                "BUSTER_HTTP_TIMEOUT", f"양수여야 합니다: {self.http_timeout}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    설정 인스턴스를 반환합니다 (싱글톤 패턴)

    Returns:
        Settings: 설정 인스턴스
    """
    settings = Settings()
    settings.validate_configuration()
    return settings
