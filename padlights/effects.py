"""The LED effects: static colours, rainbow, chase and themes."""

from __future__ import annotations

from collections.abc import Mapping

from padlights.animation import (
    TOTAL_EFFECTS,
    Animation,
    AnimationOptions,
    Clock,
    Frame,
)
from padlights.colors import COLOR_BLACK, COLORS, RGB
from padlights.pixel import NO_PIXEL, PixelMatrix

Theme = dict[int, RGB]


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _c_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend, as integer division truncates."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


class ThemeLibrary:
    """Static themes and the user's custom themes."""

    def __init__(self) -> None:
        self.themes: list[Theme] = []
        self.custom_theme: Theme = {}
        self.custom_pressed_theme: Theme = {}
        self._effect_count = TOTAL_EFFECTS

    def add_theme(self, theme: Mapping[int, RGB]) -> None:
        """Append a static theme mapping button masks to colours."""
        self.themes.append(dict(theme))

    def clear_themes(self) -> None:
        """Remove every static theme."""
        self.themes.clear()

    def set_custom_theme(self, theme: Mapping[int, RGB]) -> None:
        """Install the custom theme, which makes the custom effect selectable."""
        self.custom_theme = dict(theme)
        self._effect_count = TOTAL_EFFECTS + 1

    def set_custom_pressed_theme(self, theme: Mapping[int, RGB]) -> None:
        """Install the colours shown for pressed buttons in the custom theme."""
        self.custom_pressed_theme = dict(theme)

    def has_custom_theme(self) -> bool:
        return len(self.custom_theme) > 0

    def has_custom_pressed_theme(self) -> bool:
        return len(self.custom_pressed_theme) > 0

    def effect_count(self) -> int:
        """Number of base effects that can be cycled through."""
        return self._effect_count


def _paint_theme(animation: Animation, frame: Frame, theme: Mapping[int, RGB],
                 default: RGB) -> None:
    for column in animation.matrix.pixels:
        for pixel in column:
            if pixel.index == NO_PIXEL.index or animation.not_in_filter(pixel):
                continue
            color = theme.get(pixel.mask, default)
            for pos in pixel.positions:
                frame[pos] = color


class StaticColor(Animation):
    """Every pixel in one colour from the palette."""

    def animate(self, frame: Frame) -> None:
        color = COLORS[self.color_index()]
        for column in self.matrix.pixels:
            for pixel in column:
                if pixel.index == NO_PIXEL.index or self.not_in_filter(pixel):
                    continue
                for pos in pixel.positions:
                    frame[pos] = color

    def color_index(self) -> int:
        """Palette index in use: the button colour when filtered."""
        if self.filtered:
            return self.options.button_color_index
        return self.options.static_color_index

    def save_index(self, index: int) -> None:
        """Store ``index`` as the palette index in use."""
        if self.filtered:
            self.options.button_color_index = index
        else:
            self.options.static_color_index = index

    def parameter_up(self) -> None:
        index = self.color_index()
        self.save_index(index + 1 if index < len(COLORS) - 1 else 0)

    def parameter_down(self) -> None:
        index = self.color_index()
        self.save_index(index - 1 if index > 0 else len(COLORS) - 1)


class _Cycling(Animation):
    """Shared frame counter that bounces between 0 and 255."""

    def __init__(self, matrix: PixelMatrix, options: AnimationOptions, *,
                 filtered: bool = False, clock: Clock | None = None) -> None:
        super().__init__(matrix, options, filtered=filtered, clock=clock)
        self.current_frame = 0
        self.reverse = False
        self.next_run_time = 0.0

    def _due(self) -> bool:
        return self.clock() >= self.next_run_time

    def _advance_frame(self) -> None:
        if self.reverse:
            self.current_frame -= 1
            if self.current_frame < 0:
                self.current_frame = 1
                self.reverse = False
        else:
            self.current_frame += 1
            if self.current_frame > 255:
                self.current_frame = 254
                self.reverse = True


class Rainbow(_Cycling):
    """All pixels fade together around the colour wheel."""

    def animate(self, frame: Frame) -> None:
        if not self._due():
            return
        color = RGB.wheel(self.current_frame & 0xFF)
        for column in self.matrix.pixels:
            for pixel in column:
                if pixel.index == NO_PIXEL.index:
                    continue
                for pos in pixel.positions:
                    frame[pos] = color
        self._advance_frame()
        self.next_run_time = self.clock() + self.options.rainbow_cycle_time

    def parameter_up(self) -> None:
        self.options.rainbow_cycle_time = _int16(self.options.rainbow_cycle_time + 10)

    def parameter_down(self) -> None:
        if self.options.rainbow_cycle_time > 0:
            self.options.rainbow_cycle_time = _int16(self.options.rainbow_cycle_time - 10)


class Chase(_Cycling):
    """A three-pixel tail of colour running along the pixels."""

    def __init__(self, matrix: PixelMatrix, options: AnimationOptions, *,
                 filtered: bool = False, clock: Clock | None = None) -> None:
        super().__init__(matrix, options, filtered=filtered, clock=clock)
        self.current_pixel = 0

    def animate(self, frame: Frame) -> None:
        if not self._due():
            return
        for column in self.matrix.pixels:
            for pixel in column:
                if pixel.index == NO_PIXEL.index:
                    continue
                if self.is_chase_pixel(pixel.index):
                    color = RGB.wheel(self.wheel_frame(pixel.index) & 0xFF)
                else:
                    color = COLOR_BLACK
                for pos in pixel.positions:
                    frame[pos] = color

        self.current_pixel += 1
        if self.current_pixel > self.matrix.pixel_count() - 1:
            self.current_pixel = 0
        self._advance_frame()
        self.next_run_time = self.clock() + self.options.chase_cycle_time

    def is_chase_pixel(self, index: int) -> bool:
        """True if ``index`` is the head of the chase or one of its two followers."""
        return index in (self.current_pixel, self.current_pixel - 1, self.current_pixel - 2)

    def wheel_frame(self, index: int) -> int:
        """Colour wheel position for the pixel at ``index``."""
        frame = self.current_frame
        count = self.matrix.pixel_count()
        offset = 16 if self.reverse else -16
        if index == _c_mod(self.current_pixel - 1, count):
            frame += offset
        if index == _c_mod(self.current_pixel - 2, count):
            frame += offset * 2
        return max(frame, 0)

    def parameter_up(self) -> None:
        self.options.chase_cycle_time = _int16(self.options.chase_cycle_time + 10)

    def parameter_down(self) -> None:
        if self.options.chase_cycle_time > 0:
            self.options.chase_cycle_time = _int16(self.options.chase_cycle_time - 10)


class StaticTheme(Animation):
    """Colours each pixel from the selected static theme by its button mask."""

    def __init__(self, matrix: PixelMatrix, options: AnimationOptions,
                 library: ThemeLibrary, *, filtered: bool = False,
                 clock: Clock | None = None) -> None:
        super().__init__(matrix, options, filtered=filtered, clock=clock)
        self.library = library
        self.default_color = COLOR_BLACK
        if options.theme_index >= len(library.themes):
            options.theme_index = 0

    def animate(self, frame: Frame) -> None:
        if not self.library.themes:
            return
        theme = self.library.themes[self.options.theme_index]
        _paint_theme(self, frame, theme, self.default_color)

    def parameter_up(self) -> None:
        count = len(self.library.themes)
        if count == 0 or self.options.theme_index < count - 1:
            self.options.theme_index = (self.options.theme_index + 1) & 0xFF
        else:
            self.options.theme_index = 0

    def parameter_down(self) -> None:
        if self.options.theme_index > 0:
            self.options.theme_index -= 1
        else:
            self.options.theme_index = (len(self.library.themes) - 1) & 0xFF


class CustomTheme(Animation):
    """Colours each pixel from the user's custom theme."""

    def __init__(self, matrix: PixelMatrix, options: AnimationOptions,
                 library: ThemeLibrary, *, filtered: bool = False,
                 clock: Clock | None = None) -> None:
        super().__init__(matrix, options, filtered=filtered, clock=clock)
        self.library = library
        self.default_color = COLOR_BLACK

    def animate(self, frame: Frame) -> None:
        _paint_theme(self, frame, self.library.custom_theme, self.default_color)

    def parameter_up(self) -> None:
        """The custom theme has no parameter."""

    def parameter_down(self) -> None:
        """The custom theme has no parameter."""


class CustomThemePressed(Animation):
    """Colours pressed buttons from the user's custom pressed theme."""

    def __init__(self, matrix: PixelMatrix, options: AnimationOptions,
                 library: ThemeLibrary, *, clock: Clock | None = None) -> None:
        super().__init__(matrix, options, filtered=True, clock=clock)
        self.library = library
        self.default_color = COLOR_BLACK

    def animate(self, frame: Frame) -> None:
        _paint_theme(self, frame, self.library.custom_pressed_theme, self.default_color)

    def parameter_up(self) -> None:
        """The pressed theme has no parameter."""

    def parameter_down(self) -> None:
        """The pressed theme has no parameter."""