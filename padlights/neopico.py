"""A strip of addressable RGB(W) LEDs driven one 32-bit word per pixel."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

from padlights.colors import LEDFormat

FRAME_SIZE = 100
DEFAULT_LATCH_SECONDS = 0.010

Sink = Callable[[int], None]


class NeoPico:
    """Holds a frame of packed colours and shifts them out to a sink."""

    def __init__(
        self,
        led_pin: int,
        num_pixels: int,
        format: LEDFormat = LEDFormat.GRB,
        *,
        sink: Sink | None = None,
        latch_seconds: float = DEFAULT_LATCH_SECONDS,
    ) -> None:
        if not 0 <= num_pixels <= FRAME_SIZE:
            raise ValueError(f"pixel count must be between 0 and {FRAME_SIZE}: {num_pixels}")
        self.led_pin = led_pin
        self.num_pixels = num_pixels
        self.format = LEDFormat(format)
        self.sink = sink
        self.latch_seconds = latch_seconds
        self.frame: list[int] = [0] * FRAME_SIZE
        self.clear()
        self._latch()

    @property
    def rgbw(self) -> bool:
        """True if the strip has a white channel."""
        return self.format in (LEDFormat.GRBW, LEDFormat.RGBW)

    def encode(self, value: int) -> int:
        """The word sent for one pixel: three-channel colours are left-aligned."""
        if self.rgbw:
            return value & 0xFFFFFFFF
        return (value << 8) & 0xFFFFFFFF

    def clear(self) -> None:
        """Zero the frame without sending it."""
        self.frame[:] = [0] * FRAME_SIZE

    def set_frame(self, frame: Sequence[int]) -> None:
        """Replace the frame with ``frame``, which holds one value per slot."""
        if len(frame) != FRAME_SIZE:
            raise ValueError(f"expected {FRAME_SIZE} values, got {len(frame)}")
        self.frame[:] = [value & 0xFFFFFFFF for value in frame]

    def show(self) -> list[int]:
        """Send the frame to the strip and return the words sent."""
        words = [self.encode(value) for value in self.frame[:self.num_pixels]]
        if self.sink is not None:
            for word in words:
                self.sink(word)
        self._latch()
        return words

    def off(self) -> list[int]:
        """Clear the frame and send it, turning every LED off."""
        self.clear()
        return self.show()

    def _latch(self) -> None:
        if self.latch_seconds > 0:
            time.sleep(self.latch_seconds)