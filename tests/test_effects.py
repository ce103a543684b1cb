from padlights.animation import FRAME_SIZE, TOTAL_EFFECTS, AnimationOptions
from padlights.colors import (
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_WHITE,
    COLORS,
    RGB,
)
from padlights.effects import (
    Chase,
    CustomTheme,
    CustomThemePressed,
    Rainbow,
    StaticColor,
    StaticTheme,
    ThemeLibrary,
)
from padlights.pixel import NO_PIXEL, Pixel, PixelMatrix


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def two_button_matrix():
    matrix = PixelMatrix()
    matrix.setup([
        [Pixel(0, mask=1, positions=[0, 1])],
        [Pixel(1, mask=2, positions=[2]), NO_PIXEL],
    ])
    return matrix


def row_matrix(count):
    matrix = PixelMatrix()
    matrix.setup([[Pixel(i, positions=[i])] for i in range(count)])
    return matrix


def blank(color=COLOR_BLACK):
    return [color] * FRAME_SIZE


def test_static_color_paints_all_pixels():
    options = AnimationOptions(static_color_index=2)
    frame = blank()
    StaticColor(two_button_matrix(), options).animate(frame)
    assert frame[:3] == [COLOR_RED] * 3
    assert frame[3] == COLOR_BLACK


def test_static_color_filtered_uses_button_color():
    options = AnimationOptions(static_color_index=2, button_color_index=10)
    anim = StaticColor(two_button_matrix(), options, filtered=True)
    anim.update_pixels([Pixel(1)])
    frame = blank()
    anim.animate(frame)
    assert frame[0] == COLOR_BLACK
    assert frame[2] == COLORS[10]
    assert anim.color_index() == 10


def test_static_color_parameter_wraps():
    options = AnimationOptions(static_color_index=len(COLORS) - 1)
    anim = StaticColor(two_button_matrix(), options)
    anim.parameter_up()
    assert options.static_color_index == 0
    anim.parameter_down()
    assert options.static_color_index == len(COLORS) - 1


def test_static_color_save_index_respects_filter():
    options = AnimationOptions()
    StaticColor(two_button_matrix(), options, filtered=True).save_index(5)
    assert options.button_color_index == 5
    assert options.static_color_index == 0


def test_rainbow_waits_for_cycle_time():
    clock = FakeClock()
    options = AnimationOptions(rainbow_cycle_time=40)
    anim = Rainbow(two_button_matrix(), options, clock=clock)
    frame = blank()
    anim.animate(frame)
    assert frame[0] == RGB.wheel(0)
    frame = blank()
    anim.animate(frame)
    assert frame[0] == COLOR_BLACK
    clock.now = 40
    anim.animate(frame)
    assert frame[2] == RGB.wheel(1)


def test_rainbow_bounces_at_top():
    anim = Rainbow(two_button_matrix(), AnimationOptions(), clock=FakeClock())
    frame = blank()
    for _ in range(256):
        anim.animate(frame)
    assert frame[0] == RGB.wheel(255)
    anim.animate(frame)
    assert frame[0] == RGB.wheel(254)


def test_rainbow_parameter_floor():
    options = AnimationOptions(rainbow_cycle_time=0)
    anim = Rainbow(two_button_matrix(), options)
    anim.parameter_down()
    assert options.rainbow_cycle_time == 0
    anim.parameter_up()
    anim.parameter_up()
    anim.parameter_down()
    assert options.rainbow_cycle_time == 10


def test_chase_lights_head_first():
    anim = Chase(row_matrix(5), AnimationOptions(), clock=FakeClock())
    frame = blank(COLOR_WHITE)
    anim.animate(frame)
    assert frame[0] == RGB.wheel(0)
    assert frame[1:5] == [COLOR_BLACK] * 4
    assert anim.is_chase_pixel(1)
    assert not anim.is_chase_pixel(3)


def test_chase_current_pixel_wraps():
    anim = Chase(row_matrix(3), AnimationOptions(), clock=FakeClock())
    frame = blank()
    for _ in range(3):
        anim.animate(frame)
    assert anim.current_pixel == 0


def test_chase_wheel_frame_uses_truncating_remainder():
    anim = Chase(row_matrix(5), AnimationOptions(), clock=FakeClock())
    frame = blank()
    for _ in range(40):
        anim.animate(frame)
    assert anim.current_pixel == 0
    assert anim.wheel_frame(4) == anim.current_frame
    assert anim.wheel_frame(0) == anim.current_frame


def test_chase_wheel_frame_never_negative():
    anim = Chase(row_matrix(5), AnimationOptions(), clock=FakeClock())
    frame = blank()
    anim.animate(frame)
    assert anim.wheel_frame(0) == 0


def test_chase_parameter_floor():
    options = AnimationOptions(chase_cycle_time=0)
    anim = Chase(row_matrix(2), options)
    anim.parameter_down()
    assert options.chase_cycle_time == 0
    anim.parameter_up()
    assert options.chase_cycle_time == 10


def test_library_defaults():
    library = ThemeLibrary()
    assert library.effect_count() == TOTAL_EFFECTS
    assert not library.has_custom_theme()
    assert not library.has_custom_pressed_theme()


def test_static_theme_resets_bad_index_and_paints():
    library = ThemeLibrary()
    library.add_theme({1: COLOR_BLUE})
    options = AnimationOptions(theme_index=5)
    anim = StaticTheme(two_button_matrix(), options, library)
    assert options.theme_index == 0
    frame = blank(COLOR_WHITE)
    anim.animate(frame)
    assert frame[0] == COLOR_BLUE
    assert frame[2] == COLOR_BLACK


def test_static_theme_without_themes_leaves_frame():
    anim = StaticTheme(two_button_matrix(), AnimationOptions(), ThemeLibrary())
    frame = blank(COLOR_WHITE)
    anim.animate(frame)
    assert frame == blank(COLOR_WHITE)


def test_static_theme_parameter_cycles():
    library = ThemeLibrary()
    library.add_theme({1: COLOR_BLUE})
    library.add_theme({1: COLOR_RED})
    options = AnimationOptions()
    anim = StaticTheme(two_button_matrix(), options, library)
    anim.parameter_up()
    assert options.theme_index == 1
    anim.parameter_up()
    assert options.theme_index == 0
    anim.parameter_down()
    assert options.theme_index == 1


def test_clear_themes_empties_library():
    library = ThemeLibrary()
    library.add_theme({1: COLOR_BLUE})
    library.clear_themes()
    assert library.themes == []


def test_custom_theme_adds_effect_and_paints():
    library = ThemeLibrary()
    library.set_custom_theme({2: COLOR_GREEN})
    assert library.has_custom_theme()
    assert library.effect_count() == TOTAL_EFFECTS + 1
    anim = CustomTheme(two_button_matrix(), AnimationOptions(), library)
    frame = blank(COLOR_WHITE)
    anim.animate(frame)
    assert frame[2] == COLOR_GREEN
    assert frame[0] == COLOR_BLACK
    anim.parameter_up()
    assert library.custom_theme == {2: COLOR_GREEN}


def test_custom_theme_pressed_only_paints_pressed():
    library = ThemeLibrary()
    library.set_custom_pressed_theme({2: COLOR_RED})
    assert library.has_custom_pressed_theme()
    anim = CustomThemePressed(two_button_matrix(), AnimationOptions(), library)
    frame = blank(COLOR_WHITE)
    anim.animate(frame)
    assert frame == blank(COLOR_WHITE)
    anim.update_pixels([Pixel(0), Pixel(1)])
    anim.animate(frame)
    assert frame[0] == COLOR_BLACK
    assert frame[2] == COLOR_RED