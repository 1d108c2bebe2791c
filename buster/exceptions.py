"""
예외 클래스 정의 모듈

캐시 버스터 로더에서 사용되는 커스텀 예외들을 정의합니다.
"""

from typing import Any, Optional


class BusterException(Exception):
    """캐시 버스터 기본 예외 클래스"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        예외 초기화

        Args:
            message: 오류 메시지
            error_code: 오류 코드 (선택사항)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class MalformedLocatorError(BusterException):
    """리소스 위치를 해석할 수 없을 때 발생하는 예외"""

    def __init__(self, locator: Any, error_detail: str):
        """
        잘못된 위치 예외 초기화

        Args:
            locator: 요청된 리소스 위치
            error_detail: 오류 상세 정보
        """
        message = f"잘못된 리소스 위치: {locator!r} - {error_detail}"
        super().__init__(message, "MALFORMED_LOCATOR")
        self.locator = locator
        self.error_detail = error_detail


class LoadFailure(BusterException):
    """호스트가 스크립트 로드 실패를 보고할 때 발생하는 예외"""

    def __init__(self, url: str, reason: str, status: Optional[int] = None):
        """
        로드 실패 예외 초기화

        Args:
            url: 요청한 URL
            reason: 실패 사유
            status: HTTP 상태 코드 (있는 경우)
        """
        message = f"스크립트 로드 실패: {url} - {reason}"
        super().__init__(message, "LOAD_FAILURE")
        self.url = url
        self.reason = reason
        self.status = status


class ConfigurationException(BusterException):
    """설정 오류 시 발생하는 예외"""

    def __init__(self, config_key: str, error_detail: str):
        """
        설정 예외 초기화

        Args:
            config_key: 설정 키
            error_detail: 오류 상세 정보
        """
        message = f"설정 오류: {config_key} - {error_detail}"
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key
        self.error_detail = error_detail
