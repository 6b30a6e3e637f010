"""Tests for trellis.config — StackConfig defaults and immutability."""

import pytest

from trellis.config import StackConfig


class TestStackConfig:
    def test_defaults(self) -> None:
        cfg = StackConfig()
        assert cfg.debug is False
        assert cfg.strict_continuations is True
        assert cfg.not_found_body == "Not Found"
        assert cfg.log_level == "warning"

    def test_override(self) -> None:
        cfg = StackConfig(debug=True, strict_continuations=False)
        assert cfg.debug is True
        assert cfg.strict_continuations is False

    def test_frozen(self) -> None:
        cfg = StackConfig()
        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]
