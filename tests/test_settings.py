"""Tests for configuration settings."""

import pytest

from famchart.config import settings
from famchart.config.settings import get_all_settings, get_setting, set_setting


@pytest.fixture
def restore_settings():
    saved = get_all_settings()
    yield
    settings.SETTINGS.clear()
    settings.SETTINGS.update(saved)


def test_known_settings_present():
    all_settings = get_all_settings()
    for name in ("h_gap", "v_gap", "node_width", "node_height",
                 "min_zoom", "max_zoom", "zoom_step"):
        assert name in all_settings


def test_unknown_setting_raises():
    with pytest.raises(KeyError) as exc_info:
        get_setting("typo_gap")
    assert "typo_gap" in str(exc_info.value)
    assert "Available settings:" in str(exc_info.value)


def test_set_setting_overrides(restore_settings):
    set_setting("h_gap", 12)
    assert get_setting("h_gap") == 12.0


def test_set_unknown_setting_raises():
    with pytest.raises(KeyError):
        set_setting("nope", 1.0)


def test_get_all_settings_returns_copy(restore_settings):
    original = get_setting("h_gap")
    copy = get_all_settings()
    copy["h_gap"] = original + 1.0
    assert get_setting("h_gap") == original
