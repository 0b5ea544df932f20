"""Layered configuration loading: bundled defaults, caching and profiles."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from mailgun_adapter.adapters.config.loader import get_config, get_default_config_path, validate_profile


@pytest.mark.os_agnostic
class TestGetDefaultConfigPath:
    """Verify get_default_config_path() behavior."""

    def test_points_at_bundled_defaults(self) -> None:
        """The returned path is the shipped defaultconfig.toml."""
        result = get_default_config_path()

        assert result.name == "defaultconfig.toml"
        assert result.is_file()

    def test_repeated_calls_return_equal_paths(self) -> None:
        """Repeated calls return equal Path values."""
        assert get_default_config_path() == get_default_config_path()


@pytest.mark.os_agnostic
@pytest.mark.usefixtures("clear_config_cache")
class TestGetConfig:
    """Verify get_config() behavior."""

    def test_returns_config_with_dict(self) -> None:
        """get_config() returns a Config with a valid dict."""
        assert isinstance(get_config().as_dict(), dict)

    def test_defaults_provide_mailgun_section(self) -> None:
        """The bundled defaults carry the production base URI and timeout."""
        config = get_config()

        assert config.get("mailgun.base_uri") is not None
        assert config.get("mailgun.timeout") is not None

    def test_repeated_calls_return_equivalent_data(self) -> None:
        """Repeated calls return Config with equivalent data."""
        assert get_config().as_dict() == get_config().as_dict()

    def test_repeated_calls_hit_the_cache(self) -> None:
        """The same arguments return the cached instance until cleared."""
        first = get_config()

        assert get_config() is first
        get_config.cache_clear()
        assert get_config() is not first

    def test_invalid_profile_is_rejected_before_loading(self) -> None:
        """Path traversal in profile names is refused."""
        with pytest.raises(ValueError):
            get_config(profile="../etc")

    def test_concurrent_access_with_cache_clear(self) -> None:
        """Cache clears during concurrent access do not cause errors."""
        errors: list[Exception] = []

        def fetch_config() -> None:
            try:
                assert isinstance(get_config().as_dict(), dict)
            except Exception as exc:
                errors.append(exc)

        def clear_cache() -> None:
            try:
                get_config.cache_clear()
            except Exception as exc:
                errors.append(exc)

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures: list[Future[None]] = []
            for i in range(20):
                futures.append(pool.submit(clear_cache if i % 5 == 0 else fetch_config))
            for future in futures:
                future.result()

        assert errors == [], f"Concurrent access errors: {errors}"


@pytest.mark.os_agnostic
class TestValidateProfile:
    """Verify profile name validation."""

    @pytest.mark.parametrize("profile", ["staging", "production"])
    def test_accepts_simple_names(self, profile: str) -> None:
        """Plain names pass."""
        validate_profile(profile)

    @pytest.mark.parametrize("profile", ["", "../etc/passwd", "a/b"])
    def test_rejects_unsafe_names(self, profile: str) -> None:
        """Empty names and path separators are refused."""
        with pytest.raises(ValueError):
            validate_profile(profile)

    def test_rejects_names_over_max_length(self) -> None:
        """An explicit maximum length is enforced."""
        with pytest.raises(ValueError):
            validate_profile("abcdef", max_length=3)
