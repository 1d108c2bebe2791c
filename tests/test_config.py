"""
설정 관리 테스트 모듈

로더 설정 관리 기능을 테스트합니다.
"""

import pytest

from buster.config.settings import Settings, get_settings
from buster.exceptions import ConfigurationException


class TestSettings:
    """설정 클래스 테스트"""

    def test_default_settings(self, monkeypatch):
        """기본 설정 테스트"""
        monkeypatch.delenv("BUSTER_BASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.base_url == "http://localhost/"
        assert settings.cache_buster_param == "cacheBuster"
        assert settings.script_type == "text/x-python"
        assert settings.default_async is True
        assert settings.http_timeout == 30.0
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_settings_from_env(self, monkeypatch):
        """환경 변수로부터 설정 로드 테스트"""
        monkeypatch.setenv("BUSTER_BASE_URL", "https://static.example.com/app/")
        monkeypatch.setenv("BUSTER_CACHE_BUSTER_PARAM", "v")
        monkeypatch.setenv("BUSTER_DEFAULT_ASYNC", "false")
        monkeypatch.setenv("BUSTER_HTTP_TIMEOUT", "5")
        monkeypatch.setenv("BUSTER_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.base_url == "https://static.example.com/app/"
        assert settings.cache_buster_param == "v"
        assert settings.default_async is False
        assert settings.http_timeout == 5.0
        assert settings.log_level == "DEBUG"

    def test_env_names_are_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("buster_cache_buster_param", "bust")

        assert Settings(_env_file=None).cache_buster_param == "bust"

    def test_env_file(self, tmp_path):
        """.env 파일 로드 테스트"""
        env_file = tmp_path / ".env"
        env_file.write_text("BUSTER_SCRIPT_TYPE=application/javascript\n", encoding="utf-8")

        settings = Settings(_env_file=env_file)

        assert settings.script_type == "application/javascript"


class TestSettingsValidation:
    """설정 유효성 검증 테스트"""

    def test_valid_configuration(self):
        Settings(base_url="http://127.0.0.1:8080/").validate_configuration()

    @pytest.mark.parametrize("base_url", ["not a url", "/relative/path", "ftp://example.com/"])
    def test_invalid_base_url(self, base_url):
        settings = Settings(base_url=base_url)

        with pytest.raises(ConfigurationException) as exc_info:
            settings.validate_configuration()

        assert exc_info.value.config_key == "BUSTER_BASE_URL"
        assert exc_info.value.error_code == "CONFIGURATION_ERROR"

    def test_empty_cache_buster_param(self):
        settings = Settings(base_url="http://localhost/", cache_buster_param="  ")

        with pytest.raises(ConfigurationException) as exc_info:
            settings.validate_configuration()

        assert exc_info.value.config_key == "BUSTER_CACHE_BUSTER_PARAM"

    def test_non_positive_timeout(self):
        settings = Settings(base_url="http://localhost/", http_timeout=0)

        with pytest.raises(ConfigurationException) as exc_info:
            settings.validate_configuration()

        assert exc_info.value.config_key == "BUSTER_HTTP_TIMEOUT"


class TestGetSettings:
    """get_settings 싱글톤 테스트"""

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.delenv("BUSTER_BASE_URL", raising=False)
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()

    def test_get_settings_validates(self, monkeypatch):
        monkeypatch.setenv("BUSTER_BASE_URL", "not a url")
        get_settings.cache_clear()
        try:
            with pytest.raises(ConfigurationException):
                get_settings()
        finally:
            get_settings.cache_clear()
