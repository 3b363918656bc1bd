import pytest

from sketchjam.logic.settings import SettingsModel, derive_settings, clamp_level


@pytest.mark.parametrize("level", range(12))
def test_gains_always_sum_to_two(level):
    eq = derive_settings(level).eq
    assert eq.bass_gain + eq.treble_gain == pytest.approx(2.0)


def test_extremes():
    white = derive_settings(0)
    assert white.eq.bass_gain == pytest.approx(0.5)
    assert white.eq.treble_gain == pytest.approx(1.5)
    assert white.theme.background_gray == 255
    assert white.theme.use_dark_elements is True

    black = derive_settings(11)
    assert black.eq.bass_gain == pytest.approx(1.5)
    assert black.eq.treble_gain == pytest.approx(0.5)
    assert black.theme.background_gray == 0
    assert black.theme.use_dark_elements is False


def test_middle_level_leans_toward_bass():
    eq = derive_settings(6).eq
    assert eq.bass_gain == pytest.approx(1.045, abs=1e-3)
    assert eq.treble_gain == pytest.approx(0.955, abs=1e-3)
    assert eq.bass_gain != pytest.approx(1.0)


def test_theme_switches_at_half_brightness():
    # level 5 -> brightness 6/11 (> 0.5), level 6 -> 5/11
    assert derive_settings(5).theme.use_dark_elements is True
    assert derive_settings(6).theme.use_dark_elements is False
    assert derive_settings(6).theme.background_gray == round(5 / 11 * 255)


def test_out_of_range_levels_are_clamped():
    model = SettingsModel()
    assert model.set_level(-5) == model.set_level(0)
    assert model.set_level(99) == model.set_level(11)
    assert model.level == 11
    assert clamp_level(-1) == 0
    assert clamp_level(12) == 11


def test_default_level_is_six():
    assert SettingsModel().level == 6
