"""Tests for palette overrides and colour toggling."""

import pytest

import todo_theme as theme


@pytest.fixture(autouse=True)
def _no_env_file(monkeypatch):
    monkeypatch.setattr(theme, "_ENV_FILE", {})
    for key in ("TODO_PRIMARY", "TODO_PENDING", "TODO_COMPLETED"):
        monkeypatch.delenv(key, raising=False)


class TestPalette:
    """Tests for TODO_* colour overrides."""

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("TODO_PENDING", "#112233")
        assert theme._palette("TODO_PENDING", theme.HEX_PENDING_DEFAULT) == "#112233"

    def test_hash_prefix_is_optional(self, monkeypatch) -> None:
        monkeypatch.setenv("TODO_PRIMARY", "aabbcc")
        assert theme._palette("TODO_PRIMARY", theme.HEX_PRIMARY_DEFAULT) == "#aabbcc"

    @pytest.mark.parametrize("value", ["#12345", "#GGGGGG", "blue"])
    def test_invalid_hex_falls_back_to_default(self, monkeypatch, value: str) -> None:
        monkeypatch.setenv("TODO_COMPLETED", value)
        assert theme._palette("TODO_COMPLETED", theme.HEX_COMPLETED_DEFAULT) == theme.HEX_COMPLETED_DEFAULT

    def test_env_file_value(self, monkeypatch) -> None:
        monkeypatch.setattr(theme, "_ENV_FILE", {"TODO_PRIMARY": "#445566"})
        assert theme._palette("TODO_PRIMARY", theme.HEX_PRIMARY_DEFAULT) == "#445566"

    def test_environment_beats_env_file(self, monkeypatch) -> None:
        monkeypatch.setattr(theme, "_ENV_FILE", {"TODO_PRIMARY": "#445566"})
        monkeypatch.setenv("TODO_PRIMARY", "#778899")
        assert theme._palette("TODO_PRIMARY", theme.HEX_PRIMARY_DEFAULT) == "#778899"

    def test_unset_uses_default(self) -> None:
        assert theme._palette("TODO_PENDING", theme.HEX_PENDING_DEFAULT) == theme.HEX_PENDING_DEFAULT


class TestColor:
    """Tests for color() with colour output on and off."""

    def test_disabled_returns_text_unchanged(self, monkeypatch) -> None:
        monkeypatch.setattr(theme, "_ENABLE", False)
        assert theme.color("Buy milk", theme.BOLD, "\033[38;5;42m") == "Buy milk"

    def test_enabled_wraps_in_styles_and_reset(self, monkeypatch) -> None:
        monkeypatch.setattr(theme, "_ENABLE", True)
        monkeypatch.setattr(theme, "RESET", "\033[0m")
        assert theme.color("Buy milk", "\033[1m") == "\033[1mBuy milk\033[0m"

    def test_from_hex_is_empty_when_disabled(self, monkeypatch) -> None:
        monkeypatch.setattr(theme, "_ENABLE", False)
        assert theme._from_hex("#112233") == ""

    def test_from_hex_256_and_truecolor(self, monkeypatch) -> None:
        monkeypatch.setattr(theme, "_ENABLE", True)
        monkeypatch.setattr(theme, "_USE_TRUECOLOR", False)
        assert theme._from_hex("#ffffff") == "\033[38;5;231m"
        monkeypatch.setattr(theme, "_USE_TRUECOLOR", True)
        assert theme._from_hex("#112233") == "\033[38;2;17;34;51m"


class TestEnableFlags:
    """NO_COLOR / FORCE_COLOR are read when the module is loaded."""

    def _reload(self):
        import importlib
        return importlib.reload(theme)

    def test_no_color_disables(self, monkeypatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        try:
            assert self._reload()._ENABLE is False
        finally:
            monkeypatch.undo()
            self._reload()

    def test_force_color_enables_off_tty(self, monkeypatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        try:
            reloaded = self._reload()
            assert reloaded._ENABLE is True
            assert reloaded.color("x", reloaded.BOLD) == "\033[1mx\033[0m"
        finally:
            monkeypatch.undo()
            self._reload()
