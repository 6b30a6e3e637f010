"""Tests for trellis.routing.methods — whitelist and method predicate."""

import pytest

from trellis.errors import ConfigurationError, UnsupportedMethod
from trellis.routing.methods import ALLOWED_METHODS, method_matches, normalize_method


class TestAllowedMethods:
    def test_whitelist(self) -> None:
        assert ALLOWED_METHODS == frozenset(
            {"GET", "POST", "PUT", "HEAD", "DELETE", "OPTIONS", "TRACE", "PATCH"}
        )

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ALLOWED_METHODS.add("PURGE")  # type: ignore[attr-defined]


class TestNormalizeMethod:
    def test_none_passes_through(self) -> None:
        assert normalize_method(None) is None

    @pytest.mark.parametrize("method", ["get", "Post", "PATCH", "trace"])
    def test_upper_cases(self, method: str) -> None:
        assert normalize_method(method) == method.upper()

    def test_unsupported_names_method(self) -> None:
        with pytest.raises(UnsupportedMethod) as exc_info:
            normalize_method("FOO")
        assert exc_info.value.method == "FOO"
        assert "FOO" in str(exc_info.value)

    def test_unsupported_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            normalize_method("CONNECT")


class TestMethodMatches:
    def test_none_matches_anything(self) -> None:
        for method in ("GET", "POST", "delete", "WHATEVER"):
            assert method_matches(None, method) is True

    def test_exact(self) -> None:
        assert method_matches("GET", "GET") is True

    def test_case_insensitive_both_sides(self) -> None:
        assert method_matches("get", "GET") is True
        assert method_matches("GET", "get") is True
        assert method_matches("pOsT", "PoSt") is True

    def test_mismatch(self) -> None:
        assert method_matches("GET", "POST") is False
