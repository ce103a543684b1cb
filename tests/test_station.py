import pytest

from padlights.animation import FRAME_SIZE, AnimationHotkey, AnimationOptions
from padlights.colors import COLOR_BLACK, COLORS, COLOR_RED, LEDFormat
from padlights.effects import (
    Chase,
    CustomTheme,
    CustomThemePressed,
    Rainbow,
    StaticColor,
    StaticTheme,
    ThemeLibrary,
)
from padlights.pixel import Pixel, PixelMatrix
from padlights.station import AnimationStation


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_matrix():
    return PixelMatrix([[Pixel(0, 1, [0, 1])], [Pixel(1, 2, [2])]], 1)


def make_station(**kwargs):
    clock = FakeClock()
    station = AnimationStation(make_matrix(), clock=clock, **kwargs)
    return station, clock


def test_new_station_starts_dark():
    station, _ = make_station()
    assert station.brightness() == 0
    assert station.brightness_x() == 0.0


def test_set_options_caps_brightness_at_steps():
    station, _ = make_station()
    station.set_options(AnimationOptions(brightness=10))
    assert station.brightness() == 5


def test_full_brightness_factor_is_one():
    station, _ = make_station()
    station.configure_brightness(255, 5)
    station.set_options(AnimationOptions(brightness=5))
    assert station.brightness_x() == pytest.approx(1.0)


def test_brightness_factor_is_clamped():
    station, _ = make_station()
    station.configure_brightness(255, 1)
    station.set_options(AnimationOptions(brightness=1))
    assert station.brightness_x() <= 1.0
    assert station.brightness_x() == pytest.approx(1.0)


def test_increase_brightness_stops_at_steps():
    station, _ = make_station()
    for _ in range(10):
        station.increase_brightness()
    assert station.brightness() == 5


def test_increase_then_decrease_returns():
    station, _ = make_station()
    station.increase_brightness()
    station.increase_brightness()
    assert station.brightness() == 2
    station.decrease_brightness()
    assert station.brightness() == 1
    station.decrease_brightness()
    station.decrease_brightness()
    assert station.brightness() == 0
    assert station.brightness_x() == 0.0


def test_configure_brightness_rejects_zero_steps():
    station, _ = make_station()
    with pytest.raises(ValueError):
        station.configure_brightness(100, 0)


def test_adjust_index_wraps():
    station, _ = make_station()
    station.set_mode(0)
    assert station.adjust_index(-1) == 3
    station.set_mode(3)
    assert station.adjust_index(1) == 0
    assert station.adjust_index(-1) == 2


def test_adjust_index_includes_custom_theme_when_present():
    library = ThemeLibrary()
    library.set_custom_theme({1: COLOR_RED})
    station, _ = make_station(library=library)
    station.set_mode(3)
    assert station.adjust_index(1) == 4


@pytest.mark.parametrize(
    "mode, base_type, button_type",
    [
        (0, StaticColor, StaticColor),
        (1, Rainbow, StaticColor),
        (2, Chase, StaticColor),
        (3, StaticTheme, StaticColor),
        (4, CustomTheme, CustomThemePressed),
        (9, StaticColor, StaticColor),
    ],
)
def test_set_mode_selects_effects(mode, base_type, button_type):
    station, _ = make_station()
    station.set_mode(mode)
    assert station.mode() == mode
    assert type(station.base_animation) is base_type
    assert type(station.button_animation) is button_type
    assert station.button_animation.filtered is True


def test_animate_without_mode_blanks_frame():
    station, _ = make_station()
    station.frame[0] = COLOR_RED
    station.animate()
    assert station.frame == [COLOR_BLACK] * FRAME_SIZE


def test_static_color_paints_pixels():
    station, _ = make_station()
    station.set_options(AnimationOptions(static_color_index=2))
    station.set_mode(0)
    station.animate()
    assert station.frame[0] == COLORS[2]
    assert station.frame[2] == COLORS[2]
    assert station.frame[3] == COLOR_BLACK


def test_pressed_pixels_use_button_color():
    station, _ = make_station()
    station.set_options(AnimationOptions(static_color_index=2, button_color_index=10))
    station.set_mode(0)
    station.handle_pressed([Pixel(1, 2, [2])])
    station.animate()
    assert station.frame[0] == COLORS[2]
    assert station.frame[2] == COLORS[10]
    assert station.last_pressed == [Pixel(1)]


def test_clear_pressed_forgets_pixels():
    station, _ = make_station()
    station.set_mode(0)
    station.handle_pressed([Pixel(0)])
    station.clear_pressed()
    assert station.last_pressed == []
    assert station.button_animation.pixels == []


def test_hotkey_changes_animation_and_waits():
    station, clock = make_station()
    station.set_mode(0)
    station.handle_event(AnimationHotkey.ANIMATION_UP)
    assert station.mode() == 1
    station.handle_event(AnimationHotkey.ANIMATION_UP)
    assert station.mode() == 1
    clock.now += 250
    station.handle_event(AnimationHotkey.ANIMATION_DOWN)
    assert station.mode() == 0


def test_hotkey_none_does_nothing():
    station, _ = make_station()
    station.set_mode(2)
    station.handle_event(AnimationHotkey.NONE)
    assert station.mode() == 2
    assert station.next_change == 0.0


def test_parameter_hotkeys_reach_animations():
    station, clock = make_station()
    station.set_mode(0)
    station.handle_event(AnimationHotkey.PARAMETER_UP)
    assert station.options.static_color_index == 1
    clock.now += 250
    station.handle_event(AnimationHotkey.PRESS_PARAMETER_DOWN)
    assert station.options.button_color_index == len(COLORS) - 1


def test_brightness_hotkey():
    station, _ = make_station()
    station.handle_event(AnimationHotkey.BRIGHTNESS_UP)
    assert station.brightness() == 1


def test_apply_brightness_packs_frame():
    station, _ = make_station(led_format=LEDFormat.GRB)
    station.configure_brightness(255, 5)
    station.set_options(AnimationOptions(brightness=5, static_color_index=2))
    station.set_mode(0)
    station.animate()
    values = station.apply_brightness()
    assert len(values) == FRAME_SIZE
    assert values[0] == COLOR_RED.value(LEDFormat.GRB, 1.0)
    assert values[5] == 0


def test_set_matrix_is_seen_by_running_animation():
    station, _ = make_station()
    station.set_options(AnimationOptions(static_color_index=4))
    station.set_mode(0)
    station.set_matrix(PixelMatrix([[Pixel(0, 1, [7])]], 1))
    station.animate()
    assert station.frame[7] == COLORS[4]
    assert station.frame[0] == COLOR_BLACK


def test_set_options_keeps_options_object_shared():
    station, _ = make_station()
    station.set_mode(0)
    station.set_options(AnimationOptions(static_color_index=6))
    assert station.base_animation.options is station.options
    assert station.base_animation.color_index() == 6