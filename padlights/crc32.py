"""CRC-32 checksum computed four bits at a time."""

from __future__ import annotations

from collections.abc import Iterable

_TABLE = (
    0x00000000, 0x1DB71064, 0x3B6E20C8, 0x26D930AC,
    0x76DC4190, 0x6B6B51F4, 0x4DB26158, 0x5005713C,
    0xEDB88320, 0xF00F9344, 0xD6D6A3E8, 0xCB61B38C,
    0x9B64C2B0, 0x86D3D2D4, 0xA00AE278, 0xBDBDF21C,
)

_MASK = 0xFFFFFFFF


class CRC32:
    """Incremental CRC-32 calculator."""

    def __init__(self) -> None:
        self._state = _MASK

    def reset(self) -> None:
        """Start a new checksum."""
        self._state = _MASK

    def _update_byte(self, byte: int) -> None:
        state = self._state
        state = _TABLE[(state ^ byte) & 0x0F] ^ (state >> 4)
        state = _TABLE[(state ^ (byte >> 4)) & 0x0F] ^ (state >> 4)
        self._state = state

    def update(self, data: int | bytes | bytearray | memoryview | Iterable[int]) -> None:
        """Feed a single byte value or a sequence of bytes."""
        if isinstance(data, int):
            if not 0 <= data <= 0xFF:
                raise ValueError(f"byte value out of range: {data}")
            self._update_byte(data)
            return
        for byte in bytes(data):
            self._update_byte(byte)

    def finalize(self) -> int:
        """The checksum of everything fed so far."""
        return ~self._state & _MASK


def crc32(data: bytes | bytearray | memoryview | Iterable[int]) -> int:
    """Checksum of ``data`` in one call."""
    calculator = CRC32()
    calculator.update(data)
    return calculator.finalize()