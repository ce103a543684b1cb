"""Animation options, hotkeys and the base class for LED effects."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, MutableSequence
from dataclasses import dataclass, field
from enum import IntEnum

from padlights.colors import RGB
from padlights.pixel import Pixel, PixelMatrix

FRAME_SIZE = 100
TOTAL_EFFECTS = 4  # the custom theme is only counted once one is present

BUTTON_NAMES: tuple[str, ...] = (
    "up", "down", "left", "right",
    "b1", "b2", "b3", "b4",
    "l1", "r1", "l2", "r2",
    "s1", "s2", "l3", "r3",
    "a1", "a2",
)

Frame = MutableSequence[RGB]
Clock = Callable[[], float]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class AnimationEffect(IntEnum):
    """Base animations, in the order they are cycled through."""

    STATIC_COLOR = 0
    RAINBOW = 1
    CHASE = 2
    STATIC_THEME = 3
    CUSTOM_THEME = 4


class AnimationHotkey(IntEnum):
    """Actions that a hotkey combination can ask of the LEDs."""

    NONE = 0
    ANIMATION_UP = 1
    ANIMATION_DOWN = 2
    PARAMETER_UP = 3
    PRESS_PARAMETER_UP = 4
    PRESS_PARAMETER_DOWN = 5
    PARAMETER_DOWN = 6
    BRIGHTNESS_UP = 7
    BRIGHTNESS_DOWN = 8


def _button_colors() -> dict[str, int]:
    return dict.fromkeys(BUTTON_NAMES, 0)


@dataclass
class AnimationOptions:
    """Persistent settings shared by the animation station and its effects."""

    checksum: int = 0
    base_animation_index: int = 0
    brightness: int = 0
    static_color_index: int = 0
    button_color_index: int = 0
    chase_cycle_time: int = 0
    rainbow_cycle_time: int = 0
    theme_index: int = 0
    has_custom_theme: bool = False
    custom_theme: dict[str, int] = field(default_factory=_button_colors)
    custom_theme_pressed: dict[str, int] = field(default_factory=_button_colors)


class Animation(ABC):
    """An effect that paints colours into a frame of LEDs.

    A filtered animation only paints the pixels handed to it through
    :meth:`update_pixels`, which is how button-press effects are drawn.
    """

    def __init__(
        self,
        matrix: PixelMatrix,
        options: AnimationOptions,
        *,
        filtered: bool = False,
        clock: Clock | None = None,
    ) -> None:
        self.matrix = matrix
        self.options = options
        self.filtered = filtered
        self.clock: Clock = clock if clock is not None else _monotonic_ms
        self.pixels: list[Pixel] = []

    def update_pixels(self, pixels: Iterable[Pixel]) -> None:
        """Replace the pixels this animation is filtered to."""
        self.pixels = list(pixels)

    def clear_pixels(self) -> None:
        """Forget the filtered pixels."""
        self.pixels.clear()

    def not_in_filter(self, pixel: Pixel) -> bool:
        """True if the animation is filtered and ``pixel`` is not among its pixels."""
        if not self.filtered:
            return False
        return pixel not in self.pixels

    @abstractmethod
    def animate(self, frame: Frame) -> None:
        """Paint the next step of the effect into ``frame``."""

    @abstractmethod
    def parameter_up(self) -> None:
        """Raise the effect's adjustable parameter."""

    @abstractmethod
    def parameter_down(self) -> None:
        """Lower the effect's adjustable parameter."""