"""
로드 레지스트리와 신선도 토큰 테스트
"""

import pytest

from buster.exceptions import MalformedLocatorError
from buster.loader.freshness import FreshnessClock, append_token, resolve_url
from buster.loader.registry import LoadRegistry
from buster.models.enums import ModuleState


class TestLoadRegistry:
    """로드 레지스트리 테스트"""

    def test_empty_registry(self):
        """빈 레지스트리 테스트"""
        registry = LoadRegistry()

        assert registry.is_loaded("bustMe") is False
        assert registry.state("bustMe") is ModuleState.UNLOADED
        assert len(registry) == 0
        assert "bustMe" not in registry

    def test_mark_loaded(self):
        """로드 완료 기록 테스트"""
        registry = LoadRegistry()
        registry.mark_loaded("bustMe")

        assert registry.is_loaded("bustMe") is True
        assert "bustMe" in registry
        assert registry.loaded_names() == ["bustMe"]

    def test_pending_lifecycle(self):
        """진행 중 -> 해제 테스트"""
        registry = LoadRegistry()
        registry.mark_pending("bustMe")

        assert registry.is_pending("bustMe") is True
        assert registry.is_loaded("bustMe") is False
        assert len(registry) == 0

        registry.clear_pending("bustMe")
        assert registry.state("bustMe") is ModuleState.UNLOADED

    def test_clear_pending_keeps_loaded(self):
        """로드 완료 기록은 해제되지 않음"""
        registry = LoadRegistry()
        registry.mark_loaded("bustMe")
        registry.clear_pending("bustMe")

        assert registry.is_loaded("bustMe") is True

    def test_mark_pending_after_loaded_fails(self):
        """로드된 모듈은 다시 진행 중이 될 수 없음"""
        registry = LoadRegistry()
        registry.mark_loaded("bustMe")

        with pytest.raises(ValueError):
            registry.mark_pending("bustMe")

    def test_registries_are_independent(self):
        """레지스트리 인스턴스 간 상태 분리"""
        first = LoadRegistry()
        second = LoadRegistry()
        first.mark_loaded("bustMe")

        assert second.is_loaded("bustMe") is False


class TestFreshnessClock:
    """신선도 토큰 발급기 테스트"""

    def test_tokens_strictly_increase_with_frozen_clock(self, fixed_clock):
        """시계가 멈춰 있어도 토큰은 증가"""
        tokens = [fixed_clock.next_token() for _ in range(3)]

        assert tokens == [1_700_000_000_000, 1_700_000_000_001, 1_700_000_000_002]
        assert fixed_clock.last_token == 1_700_000_000_002

    def test_tokens_follow_wall_clock(self):
        """시계가 진행하면 시계 값을 사용"""
        now = iter([1000, 5000])
        clock = FreshnessClock(now=lambda: next(now))

        assert clock.next_token() == 1000
        assert clock.next_token() == 5000

    def test_default_clock_is_epoch_millis(self):
        """기본 토큰은 13자리 에포크 밀리초"""
        token = FreshnessClock().next_token()

        assert len(str(token)) == 13


class TestUrlRewriting:
    """URL 재작성 테스트"""

    def test_append_token(self):
        assert append_token("/modules/bustMe.js", "cacheBuster", 42) == "/modules/bustMe.js?cacheBuster=42"

    def test_append_token_to_existing_query(self):
        assert append_token("/m/a.js?v=1", "cacheBuster", 42) == "/m/a.js?v=1&cacheBuster=42"

    def test_append_token_keeps_fragment(self):
        assert append_token("/m/a.js#main", "cacheBuster", 42) == "/m/a.js?cacheBuster=42#main"

    def test_resolve_relative_locator(self):
        url = resolve_url("/modules/bustMe.js?cacheBuster=42", "http://localhost:8080/app/")

        assert url == "http://localhost:8080/modules/bustMe.js?cacheBuster=42"

    def test_resolve_absolute_locator(self):
        url = resolve_url("https://cdn.example.com/x.js?cacheBuster=42", "http://localhost/")

        assert url == "https://cdn.example.com/x.js?cacheBuster=42"

    def test_resolve_without_usable_base(self):
        """기준 위치가 URL이 아니면 오류"""
        with pytest.raises(MalformedLocatorError) as exc_info:
            resolve_url("/modules/bustMe.js", "not a url")

        assert exc_info.value.error_code == "MALFORMED_LOCATOR"

    def test_resolve_invalid_ipv6(self):
        with pytest.raises(MalformedLocatorError):
            resolve_url("http://[::1/modules/a.js", "http://localhost/")
