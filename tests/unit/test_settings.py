# tests/unit/test_settings.py

from life_duel.protocol import Setting, SettingName
from life_duel.settings import DEFAULT_COLS, DEFAULT_ROWS, MatchSettings


def test_apply_returns_updated_copy() -> None:
    settings = MatchSettings()
    updated = settings.apply(Setting(SettingName.FIELD_WIDTH, 18))
    assert updated.field_width == 18
    assert settings.field_width == 0
    updated = updated.apply(Setting(SettingName.PLAYER_NAMES, ("a", "b")))
    assert updated.player_names == ("a", "b")


def test_dimensions_fall_back_until_both_known() -> None:
    settings = MatchSettings()
    assert settings.dimensions() == (DEFAULT_ROWS, DEFAULT_COLS)
    settings = settings.apply(Setting(SettingName.FIELD_HEIGHT, 5))
    assert settings.dimensions((3, 4)) == (3, 4)
    settings = settings.apply(Setting(SettingName.FIELD_WIDTH, 7))
    assert settings.dimensions((3, 4)) == (5, 7)
