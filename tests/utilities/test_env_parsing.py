"""Tests for env parsing helpers."""

from __future__ import annotations

import pytest

from pulsewatch.utilities.env.parsing import (_env_flag, _env_float, _env_int,
                                              _env_int_range)


class TestEnvParsingHelpers:
    """Group env parsing helper tests so misconfiguration surfaces with the variable name."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("true", True),
            ("  YES ", True),
            ("1", True),
            ("on", True),
            ("false", False),
            ("0", False),
            ("off", False),
        ],
    )
    def test_env_flag_recognizes_truthy_tokens(
        self,
        monkeypatch: pytest.MonkeyPatch,
        value: str,
        expected: bool,
    ) -> None:
        monkeypatch.setenv("PULSEWATCH_TEST_FLAG", value)

        assert _env_flag("PULSEWATCH_TEST_FLAG") is expected

    def test_env_flag_returns_default_when_unset(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("PULSEWATCH_TEST_FLAG", raising=False)

        assert _env_flag("PULSEWATCH_TEST_FLAG", default=True) is True

    def test_env_int_enforces_bounds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PULSEWATCH_TEST_INT", "2")
        with pytest.raises(ValueError, match="at least 3"):
            _env_int("PULSEWATCH_TEST_INT", default=0, minimum=3)

        monkeypatch.setenv("PULSEWATCH_TEST_INT", "200")
        with pytest.raises(ValueError, match="at most 140"):
            _env_int("PULSEWATCH_TEST_INT", default=0, maximum=140)

    def test_env_int_rejects_text(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PULSEWATCH_TEST_INT", "ninety")

        with pytest.raises(ValueError, match="PULSEWATCH_TEST_INT must be an integer"):
            _env_int("PULSEWATCH_TEST_INT", default=0)

    def test_env_float_parses_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PULSEWATCH_TEST_FLOAT", "0.25")

        assert _env_float("PULSEWATCH_TEST_FLOAT", default=1.0) == 0.25

    def test_env_float_enforces_maximum(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PULSEWATCH_TEST_FLOAT", "1.5")

        with pytest.raises(ValueError):
            _env_float("PULSEWATCH_TEST_FLOAT", default=0.1, maximum=1.0)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("60-110", (60, 110)), (" 70-70 ", (70, 70))],
    )
    def test_env_int_range_parses_pairs(
        self,
        monkeypatch: pytest.MonkeyPatch,
        value: str,
        expected: tuple[int, int],
    ) -> None:
        monkeypatch.setenv("PULSEWATCH_TEST_RANGE", value)

        assert _env_int_range("PULSEWATCH_TEST_RANGE", default=(0, 1)) == expected

    @pytest.mark.parametrize("value", ["60", "a-b", "110-60"])
    def test_env_int_range_rejects_malformed(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("PULSEWATCH_TEST_RANGE", value)

        with pytest.raises(ValueError):
            _env_int_range("PULSEWATCH_TEST_RANGE", default=(0, 1))

    def test_env_int_range_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PULSEWATCH_TEST_RANGE", raising=False)

        assert _env_int_range("PULSEWATCH_TEST_RANGE", default=(68, 112)) == (68, 112)
