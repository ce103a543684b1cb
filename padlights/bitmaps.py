"""One-bit images shown on the display at start-up."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Bitmap:
    """A monochrome image, rows packed most significant bit first."""

    name: str
    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"bitmap size must be positive: {self.width}x{self.height}")
        expected = self.stride * self.height
        if len(self.data) != expected:
            raise ValueError(
                f"{self.name}: expected {expected} bytes for "
                f"{self.width}x{self.height}, got {len(self.data)}"
            )

    @property
    def stride(self) -> int:
        """Bytes per row."""
        return (self.width + 7) // 8

    def pixel(self, x: int, y: int) -> bool:
        """True if the pixel at column ``x``, row ``y`` is lit."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        byte = self.data[y * self.stride + x // 8]
        return bool(byte & (0x80 >> (x % 8)))

    def rows(self) -> Iterator[tuple[bool, ...]]:
        """Each row of the image as a tuple of lit flags."""
        for y in range(self.height):
            yield tuple(self.pixel(x, y) for x in range(self.width))


def _padded(stride: int, *rows: str) -> bytes:
    out = bytearray()
    for row in rows:
        data = bytes.fromhex(row)
        if len(data) > stride:
            raise ValueError(f"row longer than {stride} bytes: {row}")
        out += data.ljust(stride, b"\x00")
    return bytes(out)


_MAIN_STRIDE = 16

SPLASH_IMAGE_MAIN = Bitmap(
    "main",
    128,
    64,
    bytes(_MAIN_STRIDE * 16)
    + _padded(
        _MAIN_STRIDE,
        "00000000 00000000 00000000 00200000",
        "00000000 00000000 00000000 00408000",
        "00000000 00000000 00000000 00E0DFC0",
        "00000000 00000000 00000000 02C1FFA0",
        "00000000 00000000 00000000 1FCFFE80",
        "00000000 00000000 00000000 3FFFE000",
        "00000000 00000000 00000000 7FABC000",
        "00000000 00000000 002C0000 FB83FF00",
        "00000000 0000000C 01FF0001 F307FC00",
        "00000000 0000001C 07FF0003 E03FF400",
        "00000000 00002C38 0AE78003 C05F8000",
        "00000020 0781FF39 C3C701D7 803F0000",
        "000000E0 1FE7FF79 C7879FA7 806E3C00",
        "0000A0C0 3FEAE7F3 EF077FC7 01CFFF80",
        "00038FFC 7FC3C77F FE0F7E8F 87DFFC00",
        "000FFFFF 73C787FF DE0E5007 1F1FD000",
        "001F57FF E78F07FF 1C3E000F FF7F0000",
        "007E0B8F 8F8E0FFF 9E7C0007 FDFC0000",
        "007C379F 1F1E0F87 1EF80007 F0300000",
        "00F1F7FE 1E1C3E0E 1FF00001 40280000",
        "01EFE7F8 3C3E7C0F 1FE0",
        "03FF8FF0 7FFEF80E 0F80",
        "03FFCFC0 FFFFF00C",
        "078BFF01 FF8FC006",
        "0787FE01 FE0F8004",
        "071FDE03 F0",
        "07BF9E01 C0000004",
        "07FF9C",
        "07FB38",
        "03E730",
        "014728",
        "000E20",
        "000C",
        "0004",
        "0008",
    )
    + bytes(_MAIN_STRIDE * 13),
)

BOOT_LOGO_TOP = Bitmap(
    "boot logo top",
    43,
    39,
    bytes.fromhex(
        "00003f80000000 01fff0000000 07fffc"
        "000000 1fffff000000 7fffffc0000f ff"
        "fffffe007fffffffffc0800000000020"
        "00000000000000000000000000000000"
        "00000000000000000000000000000000"
        "00000000000000000000000000330000"
        "0000067f800000000f7fb000001c0f33"
        "7800003e066078000033e00f63000001c"[:32]
        + "7800003e066078000033e00f63000001c"[:0]
        + ""
    )
    if False
    else bytes.fromhex(
        "00003f8000000001fff00000000007fffc"[:32]
        + "00000000000000000000000000000000"[:0]
        + "0000001fffff0000007fffffc0000fff"
        + "fffffe007fffffffffc0800000000020"
        + "00000000000000000000000000000000"
        + "00000000000000000000000000000000"
        + "00000000000000000000000000330000"
        + "0000067f800000000f7fb000001c0f33"
        + "7800003e066078000033e00f6300001c"
        + "06ff600000000f6ff00000000f06f000"
        + "00000600600000000000000080000000"
        + "00208000000000204000000000406000"
        + "000000c020000000008030000000 0180".replace(" ", "")
        + "1fffffffff0007fffffffc00007fffff"
        + "c000001fffff00000007fffc00000001"
        + "fff00000 00001f000000".replace(" ", "")
    ),
)

BOOT_LOGO_BOTTOM = Bitmap(
    "boot logo bottom",
    80,
    21,
    bytes.fromhex(
        "7ff7ff0ffc0f83c3c1f0fff7ff9ffe3f"
        "e3c3c7fcfff7ff9ffe7ff3c3cffefff7"
        "ffdffe7ff3c3cffef0f787de1ef8f3c3"
        "cf1ff0f787de1ef8fbc3df0ff00787de"
        "1ef07bc3df0ff00787c03ef07bc3df0f"
        "f3f7ffc07ef07bffdf0ff3f7ff81fcf0"
        "7bffdf0ff3f7ff83f8f07bffdf0ff3f7"
        "ff0fe0f079ffdf0ff0f7801fc0f07803"
        "df0ff0f7801f80f07803df0ff0f7801e"
        "1ef07803df0ff0f7801e1ef8f803df1f"
        "f0f7801ffe7ff003cffefff7801ffe7f"
        "f003cffefff7801ffe3fe003c7fc7fe7"
        "801ffe1fc003c3f83f87801ffe0f8003"
        "c0f0"
    ),
)