"""
Tests for suiwallet configuration module.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError
from suicore.constants import SUI_COIN_TYPE

from suiwallet.config import Settings, get_settings
from suiwallet.wallet.models import PickMethod


class TestSettings:
    """Tests for Settings."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.pick_method == PickMethod.SMALLEST_FIRST
        assert settings.coin_type == SUI_COIN_TYPE
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SUI_PICK_METHOD", "largest_first")
        monkeypatch.setenv("SUI_LOG_LEVEL", "DEBUG")
        settings = get_settings()
        assert settings.pick_method == PickMethod.LARGEST_FIRST
        assert settings.log_level == "DEBUG"

    def test_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("SUI_PICK_METHOD=input_order\n")
        assert get_settings().pick_method == PickMethod.INPUT_ORDER

    def test_invalid_pick_method(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SUI_PICK_METHOD", "random")
        with pytest.raises(ValidationError):
            Settings()
