"""The animation station: picks effects, handles hotkeys and scales brightness."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import fields

from padlights.animation import (
    FRAME_SIZE,
    Animation,
    AnimationEffect,
    AnimationHotkey,
    AnimationOptions,
    Clock,
)
from padlights.colors import COLOR_BLACK, RGB, LEDFormat
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

HOTKEY_REPEAT_MS = 250
DEFAULT_BRIGHTNESS_MAX = 100
DEFAULT_BRIGHTNESS_STEPS = 5


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class AnimationStation:
    """Runs a base animation and a button-press animation over one LED frame."""

    def __init__(
        self,
        matrix: PixelMatrix | None = None,
        options: AnimationOptions | None = None,
        library: ThemeLibrary | None = None,
        *,
        led_format: LEDFormat = LEDFormat.GRB,
        clock: Clock | None = None,
    ) -> None:
        self.matrix = matrix if matrix is not None else PixelMatrix()
        self.options = options if options is not None else AnimationOptions()
        self.library = library if library is not None else ThemeLibrary()
        self.led_format = led_format
        self.clock: Clock = clock if clock is not None else _monotonic_ms
        self.base_animation: Animation | None = None
        self.button_animation: Animation | None = None
        self.last_pressed: list[Pixel] = []
        self.frame: list[RGB] = [COLOR_BLACK] * FRAME_SIZE
        self.next_change = 0.0
        self._brightness_max = DEFAULT_BRIGHTNESS_MAX
        self._brightness_steps = DEFAULT_BRIGHTNESS_STEPS
        self._brightness_x = 0.0
        self.set_brightness(1)

    def _step_size(self) -> int:
        return self._brightness_max // self._brightness_steps

    def configure_brightness(self, maximum: int, steps: int) -> None:
        """Set the brightest level and how many steps lead up to it."""
        if not 0 <= maximum <= 0xFF:
            raise ValueError(f"maximum brightness out of range: {maximum}")
        if not 1 <= steps <= 0xFF:
            raise ValueError(f"brightness steps out of range: {steps}")
        self._brightness_max = maximum
        self._brightness_steps = steps

    def handle_event(self, action: AnimationHotkey) -> None:
        """Apply a hotkey action, at most once per repeat interval."""
        if action == AnimationHotkey.NONE or self.clock() < self.next_change:
            return

        if action == AnimationHotkey.BRIGHTNESS_UP:
            self.increase_brightness()
        elif action == AnimationHotkey.BRIGHTNESS_DOWN:
            self.decrease_brightness()
        elif action == AnimationHotkey.ANIMATION_UP:
            self.change_animation(1)
        elif action == AnimationHotkey.ANIMATION_DOWN:
            self.change_animation(-1)
        elif action == AnimationHotkey.PARAMETER_UP:
            if self.base_animation is not None:
                self.base_animation.parameter_up()
        elif action == AnimationHotkey.PARAMETER_DOWN:
            if self.base_animation is not None:
                self.base_animation.parameter_down()
        elif action == AnimationHotkey.PRESS_PARAMETER_UP:
            if self.button_animation is not None:
                self.button_animation.parameter_up()
        elif action == AnimationHotkey.PRESS_PARAMETER_DOWN:
            if self.button_animation is not None:
                self.button_animation.parameter_down()

        self.next_change = self.clock() + HOTKEY_REPEAT_MS

    def change_animation(self, change: int) -> None:
        """Move ``change`` places through the base effects, wrapping around."""
        self.set_mode(self.adjust_index(change))

    def adjust_index(self, change: int) -> int:
        """The effect index ``change`` places from the current one, wrapped."""
        count = self.library.effect_count()
        new_index = self.options.base_animation_index + change
        if new_index >= count:
            return 0
        if new_index < 0:
            return count - 1
        return new_index & 0xFFFF

    def handle_pressed(self, pressed: Iterable[Pixel]) -> None:
        """Record the pressed pixels and hand them to the button animation."""
        self.last_pressed = list(pressed)
        if self.button_animation is not None:
            self.button_animation.update_pixels(self.last_pressed)

    def clear_pressed(self) -> None:
        """Forget every pressed pixel."""
        if self.button_animation is not None:
            self.button_animation.clear_pixels()
        self.last_pressed.clear()

    def animate(self) -> None:
        """Paint the next frame; without animations the frame is blanked."""
        if self.base_animation is None or self.button_animation is None:
            self.clear()
            return
        self.base_animation.animate(self.frame)
        self.button_animation.animate(self.frame)

    def clear(self) -> None:
        """Set every LED in the frame to black."""
        self.frame[:] = [COLOR_BLACK] * FRAME_SIZE

    def brightness_x(self) -> float:
        """Brightness as a factor between 0 and 1."""
        return self._brightness_x

    def brightness(self) -> int:
        """Brightness as a step number."""
        return self.options.brightness

    def mode(self) -> int:
        """Index of the current base effect."""
        return self.options.base_animation_index

    def set_mode(self, mode: int) -> None:
        """Switch to the base effect ``mode`` and its matching button effect."""
        mode &= 0xFF
        self.options.base_animation_index = mode
        self.clear()
        try:
            effect: AnimationEffect | None = AnimationEffect(mode)
        except ValueError:
            effect = None

        matrix, options, clock = self.matrix, self.options, self.clock
        button: Animation = StaticColor(matrix, options, filtered=True, clock=clock)
        base: Animation
        if effect == AnimationEffect.RAINBOW:
            base = Rainbow(matrix, options, clock=clock)
        elif effect == AnimationEffect.CHASE:
            base = Chase(matrix, options, clock=clock)
        elif effect == AnimationEffect.STATIC_THEME:
            base = StaticTheme(matrix, options, self.library, clock=clock)
        elif effect == AnimationEffect.CUSTOM_THEME:
            base = CustomTheme(matrix, options, self.library, clock=clock)
            button = CustomThemePressed(matrix, options, self.library, clock=clock)
        else:
            base = StaticColor(matrix, options, clock=clock)
        self.base_animation = base
        self.button_animation = button

    def set_matrix(self, matrix: PixelMatrix) -> None:
        """Replace the layout; running animations follow the change."""
        self.matrix.setup(matrix.pixels, matrix.leds_per_pixel)

    def set_options(self, options: AnimationOptions) -> None:
        """Take over every setting from ``options`` and reapply the brightness."""
        for option in fields(AnimationOptions):
            value = getattr(options, option.name)
            if isinstance(value, dict):
                value = dict(value)
            setattr(self.options, option.name, value)
        self.set_brightness(self.options.brightness)

    def apply_brightness(self) -> list[int]:
        """The frame packed for the LED format, scaled by the brightness."""
        return [color.value(self.led_format, self._brightness_x) for color in self.frame]

    def set_brightness(self, brightness: int) -> None:
        """Cap the stored brightness at the step count and recompute the factor."""
        if brightness > self._brightness_steps:
            self.options.brightness = self._brightness_steps
        factor = (self.options.brightness * self._step_size()) / 255.0
        self._brightness_x = min(max(factor, 0.0), 1.0)

    def decrease_brightness(self) -> None:
        """Dim by one step, stopping at zero."""
        if self.options.brightness > 0:
            self.options.brightness -= 1
            self.set_brightness(self.options.brightness)

    def increase_brightness(self) -> None:
        """Brighten by one step, stopping at the step count."""
        step = self._step_size()
        if self.options.brightness < step:
            self.options.brightness = (self.options.brightness + 1) & 0xFF
            self.set_brightness(self.options.brightness)
        elif self.options.brightness > step:
            self.set_brightness(self._brightness_steps)