# ruff: noqa: S101

"""Tests for settings parsing."""

import pytest
from pydantic import ValidationError

from gemini_proxy.config.config import Settings, split_address


@pytest.mark.config
class TestSettings:
    """Tests for Settings."""

    @staticmethod
    def test_api_keys_split_in_order() -> None:
        """Keys are split on the delimiter and blank segments dropped."""
        settings = Settings(GEMINI_API_KEY="key-a; key-b;;key-c;")

        assert settings.api_keys == ["key-a", "key-b", "key-c"]

    @staticmethod
    def test_single_api_key() -> None:
        """A value without delimiter is one key."""
        assert Settings(GEMINI_API_KEY="only-key").api_keys == ["only-key"]

    @staticmethod
    def test_missing_api_key() -> None:
        """Without a key there is nothing to build a pool from."""
        assert Settings(GEMINI_API_KEY=None).api_keys == []

    @staticmethod
    def test_api_key_not_in_repr() -> None:
        """Keys never show up when settings are printed."""
        assert "secret-key" not in repr(Settings(GEMINI_API_KEY="secret-key"))

    @staticmethod
    def test_default_listen_addr() -> None:
        """The proxy listens on all interfaces, port 8080, by default."""
        settings = Settings(LISTEN_ADDR=":8080")

        assert settings.host == "0.0.0.0"  # noqa: S104
        assert settings.port == 8080  # noqa: PLR2004

    @staticmethod
    def test_empty_listen_addr_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty LISTEN_ADDR falls back to the default address."""
        monkeypatch.setenv("LISTEN_ADDR", "")

        settings = Settings()

        assert (settings.host, settings.port) == ("0.0.0.0", 8080)  # noqa: S104

    @staticmethod
    def test_listen_addr_with_host() -> None:
        """An explicit host is kept."""
        settings = Settings(LISTEN_ADDR="127.0.0.1:9000")

        assert (settings.host, settings.port) == ("127.0.0.1", 9000)

    @staticmethod
    @pytest.mark.parametrize("addr", ["8080", "localhost:", "host:http"])
    def test_invalid_listen_addr(addr: str) -> None:
        """Addresses without a numeric port are rejected."""
        with pytest.raises(ValidationError):
            Settings(LISTEN_ADDR=addr)

    @staticmethod
    def test_invalid_metrics_addr() -> None:
        """The metrics address is validated like the listen address."""
        with pytest.raises(ValidationError):
            Settings(METRICS_ADDR="metrics")

    @staticmethod
    def test_debug_downgraded_in_production() -> None:
        """Production never logs at debug level."""
        settings = Settings(ENV="production", LOG_LEVEL="DEBUG")

        assert settings.log_level == "INFO"


@pytest.mark.config
class TestSplitAddress:
    """Tests for split_address."""

    @staticmethod
    @pytest.mark.parametrize(
        ("addr", "expected"),
        [
            (":8080", ("0.0.0.0", 8080)),  # noqa: S104
            ("localhost:9090", ("localhost", 9090)),
            ("[::1]:8080", ("::1", 8080)),
        ],
    )
    def test_valid(addr: str, expected: tuple[str, int]) -> None:
        """Host and port are separated at the last colon."""
        assert split_address(addr) == expected
