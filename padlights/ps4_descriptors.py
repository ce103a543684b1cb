"""USB descriptors and the input report of the PS4 gamepad."""

from __future__ import annotations

from dataclasses import dataclass, field

from padlights.hid_descriptors import (
    HID_BUTTONS_MASK,
    HID_JOYSTICK_MID,
    configuration_descriptor,
    device_descriptor,
    hid_descriptor,
)

PS4_VENDOR_ID = 0x1532
PS4_PRODUCT_ID = 0x0401

PS4_HAT_NOTHING = 0x0F

PS4_REPORT_SIZE = 64
MYSTERY_SIZE = 22
MYSTERY_2_SIZE = 21

STRING_LANGUAGE = bytes([0x09, 0x04])
STRING_MANUFACTURER = "Open Stick Community"
STRING_PRODUCT = "Open Stick (PS4)"
STRING_VERSION = "1.0"

STRING_DESCRIPTORS: tuple[bytes | str, ...] = (
    STRING_LANGUAGE,
    STRING_MANUFACTURER,
    STRING_PRODUCT,
    STRING_VERSION,
)

REPORT_DESCRIPTOR = bytes([
    0x05, 0x01,        # Usage Page (Generic Desktop Ctrls)
    0x09, 0x05,        # Usage (Game Pad)
    0xA1, 0x01,        # Collection (Application)
    0x85, 0x01,        #   Report ID (1)
    0x09, 0x30,        #   Usage (X)
    0x09, 0x31,        #   Usage (Y)
    0x09, 0x32,        #   Usage (Z)
    0x09, 0x35,        #   Usage (Rz)
    0x15, 0x00,        #   Logical Minimum (0)
    0x26, 0xFF, 0x00,  #   Logical Maximum (255)
    0x75, 0x08,        #   Report Size (8)
    0x95, 0x04,        #   Report Count (4)
    0x81, 0x02,        #   Input

    0x09, 0x39,        #   Usage (Hat switch)
    0x15, 0x00,        #   Logical Minimum (0)
    0x25, 0x07,        #   Logical Maximum (7)
    0x35, 0x00,        #   Physical Minimum (0)
    0x46, 0x3B, 0x01,  #   Physical Maximum (315)
    0x65, 0x14,        #   Unit (English Rotation)
    0x75, 0x04,        #   Report Size (4)
    0x95, 0x01,        #   Report Count (1)
    0x81, 0x42,        #   Input (Null State)

    0x65, 0x00,        #   Unit (None)
    0x05, 0x09,        #   Usage Page (Button)
    0x19, 0x01,        #   Usage Minimum (0x01)
    0x29, 0x0E,        #   Usage Maximum (0x0E)
    0x15, 0x00,        #   Logical Minimum (0)
    0x25, 0x01,        #   Logical Maximum (1)
    0x75, 0x01,        #   Report Size (1)
    0x95, 0x0E,        #   Report Count (14)
    0x81, 0x02,        #   Input

    0x06, 0x00, 0xFF,  #   Usage Page (Vendor Defined 0xFF00)
    0x09, 0x20,        #   Usage (0x20)
    0x75, 0x06,        #   Report Size (6)
    0x95, 0x01,        #   Report Count (1)
    0x81, 0x02,        #   Input

    0x05, 0x01,        #   Usage Page (Generic Desktop Ctrls)
    0x09, 0x33,        #   Usage (Rx)
    0x09, 0x34,        #   Usage (Ry)
    0x15, 0x00,        #   Logical Minimum (0)
    0x26, 0xFF, 0x00,  #   Logical Maximum (255)
    0x75, 0x08,        #   Report Size (8)
    0x95, 0x02,        #   Report Count (2)
    0x81, 0x02,        #   Input

    0x06, 0x00, 0xFF,  #   Usage Page (Vendor Defined 0xFF00)
    0x09, 0x21,        #   Usage (0x21)
    0x95, 0x36,        #   Report Count (54)
    0x81, 0x02,        #   Input

    0x85, 0x05,        #   Report ID (5)
    0x09, 0x22,        #   Usage (0x22)
    0x95, 0x1F,        #   Report Count (31)
    0x91, 0x02,        #   Output

    0x85, 0x03,        #   Report ID (3)
    0x0A, 0x21, 0x27,  #   Usage (0x2721)
    0x95, 0x2F,        #   Report Count (47)
    0xB1, 0x02,        #   Feature
    0xC0,              # End Collection

    0x06, 0xF0, 0xFF,  # Usage Page (Vendor Defined 0xFFF0)
    0x09, 0x40,        # Usage (0x40)
    0xA1, 0x01,        # Collection (Application)
    0x85, 0xF0,        #   Report ID (0xF0) auth
    0x09, 0x47,        #   Usage (0x47)
    0x95, 0x3F,        #   Report Count (63)
    0xB1, 0x02,        #   Feature
    0x85, 0xF1,        #   Report ID (0xF1) auth
    0x09, 0x48,        #   Usage (0x48)
    0x95, 0x3F,        #   Report Count (63)
    0xB1, 0x02,        #   Feature
    0x85, 0xF2,        #   Report ID (0xF2) auth
    0x09, 0x49,        #   Usage (0x49)
    0x95, 0x0F,        #   Report Count (15)
    0xB1, 0x02,        #   Feature
    0x85, 0xF3,        #   Report ID (0xF3) auth reset
    0x0A, 0x01, 0x47,  #   Usage (0x4701)
    0x95, 0x07,        #   Report Count (7)
    0xB1, 0x02,        #   Feature
    0xC0,              # End Collection
])

DEVICE_DESCRIPTOR = device_descriptor(PS4_VENDOR_ID, PS4_PRODUCT_ID)
HID_DESCRIPTOR = hid_descriptor(REPORT_DESCRIPTOR)
CONFIGURATION_DESCRIPTOR = configuration_descriptor(REPORT_DESCRIPTOR)


def _check(name: str, value: int, bits: int) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must fit in {bits} bits: {value}")
    return value


@dataclass
class TouchpadXY:
    """One touchpad finger: a 7-bit counter, a not-touching flag and 12-bit X/Y."""

    counter: int = 0
    unpressed: bool = False
    data: bytearray = field(default_factory=lambda: bytearray(3))

    def set_x(self, x: int) -> None:
        """Store the low 12 bits of ``x``, leaving Y untouched."""
        self.data[0] = x & 0xFF
        self.data[1] = (self.data[1] & 0xF0) | ((x >> 8) & 0x0F)

    def set_y(self, y: int) -> None:
        """Store the low 12 bits of ``y``, leaving X untouched."""
        self.data[1] = (self.data[1] & 0x0F) | ((y & 0x0F) << 4)
        self.data[2] = (y >> 4) & 0xFF

    @property
    def x(self) -> int:
        return self.data[0] | ((self.data[1] & 0x0F) << 8)

    @property
    def y(self) -> int:
        return (self.data[1] >> 4) | (self.data[2] << 4)

    def pack(self) -> bytes:
        """The four bytes of this finger's entry."""
        _check("touchpad counter", self.counter, 7)
        if len(self.data) != 3:
            raise ValueError(f"touchpad data must be 3 bytes, got {len(self.data)}")
        return bytes([self.counter | (int(bool(self.unpressed)) << 7)]) + bytes(self.data)


@dataclass
class PS4Report:
    """The 64-byte PS4 input report.

    ``buttons`` holds the same bits as the HID button masks, starting with
    the west (square) button; ``dpad`` a hat value or ``PS4_HAT_NOTHING``.
    """

    report_id: int = 0x01
    left_stick_x: int = HID_JOYSTICK_MID
    left_stick_y: int = HID_JOYSTICK_MID
    right_stick_x: int = HID_JOYSTICK_MID
    right_stick_y: int = HID_JOYSTICK_MID
    dpad: int = PS4_HAT_NOTHING
    buttons: int = 0
    report_counter: int = 0
    left_trigger: int = 0
    right_trigger: int = 0
    mystery: bytes = bytes(MYSTERY_SIZE)
    touchpad_p1: TouchpadXY = field(default_factory=TouchpadXY)
    touchpad_p2: TouchpadXY = field(default_factory=TouchpadXY)
    mystery_2: bytes = bytes(MYSTERY_2_SIZE)

    def pack(self) -> bytes:
        """The report as sent over the interrupt endpoint."""
        head = bytes([
            _check("report id", self.report_id, 8),
            _check("left stick x", self.left_stick_x, 8),
            _check("left stick y", self.left_stick_y, 8),
            _check("right stick x", self.right_stick_x, 8),
            _check("right stick y", self.right_stick_y, 8),
        ])
        _check("dpad", self.dpad, 4)
        if not 0 <= self.buttons <= HID_BUTTONS_MASK:
            raise ValueError(f"buttons must fit in 14 bits: {self.buttons:#x}")
        _check("report counter", self.report_counter, 6)
        _check("left trigger", self.left_trigger, 8)
        _check("right trigger", self.right_trigger, 8)
        bits = (
            self.dpad
            | (self.buttons << 4)
            | (self.report_counter << 18)
            | (self.left_trigger << 24)
            | (self.right_trigger << 32)
        )
        if len(self.mystery) != MYSTERY_SIZE:
            raise ValueError(f"mystery must be {MYSTERY_SIZE} bytes, got {len(self.mystery)}")
        if len(self.mystery_2) != MYSTERY_2_SIZE:
            raise ValueError(
                f"mystery_2 must be {MYSTERY_2_SIZE} bytes, got {len(self.mystery_2)}"
            )
        return b"".join((
            head,
            bits.to_bytes(8, "little"),
            bytes(self.mystery),
            self.touchpad_p1.pack(),
            self.touchpad_p2.pack(),
            bytes(self.mystery_2),
        ))