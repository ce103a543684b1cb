"""USB descriptors and the input report of the generic HID (D-Input) gamepad."""

from __future__ import annotations

import struct
from dataclasses import dataclass

HID_ENDPOINT_SIZE = 64
ENDPOINT0_SIZE = 64

VENDOR_ID = 0x10C4
PRODUCT_ID = 0x82C0

GAMEPAD_INTERFACE = 0
GAMEPAD_ENDPOINT = 1
GAMEPAD_SIZE = 64

HID_HAT_UP = 0x00
HID_HAT_UPRIGHT = 0x01
HID_HAT_RIGHT = 0x02
HID_HAT_DOWNRIGHT = 0x03
HID_HAT_DOWN = 0x04
HID_HAT_DOWNLEFT = 0x05
HID_HAT_LEFT = 0x06
HID_HAT_UPLEFT = 0x07
HID_HAT_NOTHING = 0x08

HID_MASK_SQUARE = 1 << 0
HID_MASK_CROSS = 1 << 1
HID_MASK_CIRCLE = 1 << 2
HID_MASK_TRIANGLE = 1 << 3
HID_MASK_L1 = 1 << 4
HID_MASK_R1 = 1 << 5
HID_MASK_L2 = 1 << 6
HID_MASK_R2 = 1 << 7
HID_MASK_SELECT = 1 << 8
HID_MASK_START = 1 << 9
HID_MASK_L3 = 1 << 10
HID_MASK_R3 = 1 << 11
HID_MASK_PS = 1 << 12
HID_MASK_TP = 1 << 13

HID_BUTTONS_MASK = 0x3FFF

HID_JOYSTICK_MIN = 0x00
HID_JOYSTICK_MID = 0x80
HID_JOYSTICK_MAX = 0xFF

STRING_LANGUAGE = bytes([0x09, 0x04])
STRING_MANUFACTURER = "Open Stick Community"
STRING_PRODUCT = "Open Stick (D-Input)"
STRING_VERSION = "1.0"

STRING_DESCRIPTORS: tuple[bytes | str, ...] = (
    STRING_LANGUAGE,
    STRING_MANUFACTURER,
    STRING_PRODUCT,
    STRING_VERSION,
)

REPORT_DESCRIPTOR = bytes([
    0x05, 0x01,        # USAGE_PAGE (Generic Desktop)
    0x09, 0x05,        # USAGE (Gamepad)
    0xA1, 0x01,        # COLLECTION (Application)
    0x15, 0x00,        #   LOGICAL_MINIMUM (0)
    0x25, 0x01,        #   LOGICAL_MAXIMUM (1)
    0x35, 0x00,        #   PHYSICAL_MINIMUM (0)
    0x45, 0x01,        #   PHYSICAL_MAXIMUM (1)
    0x75, 0x01,        #   REPORT_SIZE (1)
    0x95, 0x0E,        #   REPORT_COUNT (14)
    0x05, 0x09,        #   USAGE_PAGE (Button)
    0x19, 0x01,        #   USAGE_MINIMUM (Button 1)
    0x29, 0x0E,        #   USAGE_MAXIMUM (Button 14)
    0x81, 0x02,        #   INPUT (Data,Var,Abs)
    0x95, 0x02,        #   REPORT_COUNT (2)
    0x81, 0x01,        #   INPUT (Cnst,Ary,Abs)
    0x05, 0x01,        #   USAGE_PAGE (Generic Desktop)
    0x25, 0x07,        #   LOGICAL_MAXIMUM (7)
    0x46, 0x3B, 0x01,  #   PHYSICAL_MAXIMUM (315)
    0x75, 0x04,        #   REPORT_SIZE (4)
    0x95, 0x01,        #   REPORT_COUNT (1)
    0x65, 0x14,        #   UNIT (Eng Rot:Angular Pos)
    0x09, 0x39,        #   USAGE (Hat switch)
    0x81, 0x42,        #   INPUT (Data,Var,Abs,Null)
    0x65, 0x00,        #   UNIT (None)
    0x95, 0x01,        #   REPORT_COUNT (1)
    0x81, 0x01,        #   INPUT (Cnst,Ary,Abs)
    0x26, 0xFF, 0x00,  #   LOGICAL_MAXIMUM (255)
    0x46, 0xFF, 0x00,  #   PHYSICAL_MAXIMUM (255)
    0x09, 0x30,        #   USAGE (X)
    0x09, 0x31,        #   USAGE (Y)
    0x09, 0x32,        #   USAGE (Z)
    0x09, 0x35,        #   USAGE (Rz)
    0x75, 0x08,        #   REPORT_SIZE (8)
    0x95, 0x04,        #   REPORT_COUNT (4)
    0x81, 0x02,        #   INPUT (Data,Var,Abs)
    0x06, 0x00, 0xFF,  #   USAGE_PAGE (Vendor Specific)
    0x09, 0x20,
    0x09, 0x21,
    0x09, 0x22,
    0x09, 0x23,
    0x09, 0x24,
    0x09, 0x25,
    0x09, 0x26,
    0x09, 0x27,
    0x09, 0x28,
    0x09, 0x29,
    0x09, 0x2A,
    0x09, 0x2B,
    0x95, 0x0C,        #   REPORT_COUNT (12)
    0x81, 0x02,        #   INPUT (Data,Var,Abs)
    0x0A, 0x21, 0x26,
    0x95, 0x08,        #   REPORT_COUNT (8)
    0xB1, 0x02,        #   FEATURE (Data,Var,Abs)
    0xC0,              # END_COLLECTION
])


def _lsb(value: int) -> int:
    return value & 0xFF


def _msb(value: int) -> int:
    return (value >> 8) & 0xFF


def _check_word(name: str, value: int) -> int:
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{name} must fit in 16 bits: {value}")
    return value


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in 8 bits: {value}")
    return value


def device_descriptor(vendor_id: int = VENDOR_ID, product_id: int = PRODUCT_ID) -> bytes:
    """The 18-byte USB device descriptor for a gamepad with these ids."""
    _check_word("vendor id", vendor_id)
    _check_word("product id", product_id)
    return bytes([
        18,                 # bLength
        1,                  # bDescriptorType
        0x00, 0x02,         # bcdUSB
        0,                  # bDeviceClass
        0,                  # bDeviceSubClass
        0,                  # bDeviceProtocol
        ENDPOINT0_SIZE,     # bMaxPacketSize0
        _lsb(vendor_id), _msb(vendor_id),
        _lsb(product_id), _msb(product_id),
        0x00, 0x01,         # bcdDevice
        1,                  # iManufacturer
        2,                  # iProduct
        0,                  # iSerialNumber
        1,                  # bNumConfigurations
    ])


def _report_length(report_descriptor: bytes) -> int:
    return _check_word("report descriptor length", len(report_descriptor))


def hid_descriptor(report_descriptor: bytes = REPORT_DESCRIPTOR) -> bytes:
    """The HID class descriptor announcing ``report_descriptor``."""
    length = _report_length(report_descriptor)
    return bytes([
        0x09,               # bLength
        0x21,               # bDescriptorType (HID)
        0x11, 0x01,         # bcdHID 1.11
        0x00,               # bCountryCode
        0x01,               # bNumDescriptors
        0x22,               # bDescriptorType[0] (Report)
        _lsb(length), _msb(length),
    ])


CONFIG1_DESC_SIZE = 9 + 9 + 9 + 7


def configuration_descriptor(report_descriptor: bytes = REPORT_DESCRIPTOR) -> bytes:
    """Configuration, interface, HID and endpoint descriptors in one block."""
    length = _report_length(report_descriptor)
    return bytes([
        # configuration descriptor
        9, 2,
        _lsb(CONFIG1_DESC_SIZE), _msb(CONFIG1_DESC_SIZE),
        1,                  # bNumInterfaces
        1,                  # bConfigurationValue
        0,                  # iConfiguration
        0x80,               # bmAttributes
        50,                 # bMaxPower
        # interface descriptor
        9, 4,
        GAMEPAD_INTERFACE,
        0,                  # bAlternateSetting
        1,                  # bNumEndpoints
        0x03,               # bInterfaceClass (HID)
        0x00,               # bInterfaceSubClass
        0x00,               # bInterfaceProtocol
        0,                  # iInterface
        # HID descriptor
        9, 0x21,
        0x11, 0x01,
        0,
        1,
        0x22,
        _lsb(length), _msb(length),
        # endpoint descriptor
        7, 5,
        GAMEPAD_ENDPOINT | 0x80,
        0x03,               # interrupt
        GAMEPAD_SIZE, 0,
        1,                  # bInterval (1 ms)
    ])


DEVICE_DESCRIPTOR = device_descriptor()
HID_DESCRIPTOR = hid_descriptor()
CONFIGURATION_DESCRIPTOR = configuration_descriptor()

_REPORT_FORMAT = "<HB16B"
HID_REPORT_SIZE = struct.calcsize(_REPORT_FORMAT)

_BYTE_FIELDS = (
    "direction",
    "l_x_axis", "l_y_axis", "r_x_axis", "r_y_axis",
    "right_axis", "left_axis", "up_axis", "down_axis",
    "triangle_axis", "circle_axis", "cross_axis", "square_axis",
    "l1_axis", "r1_axis", "l2_axis", "r2_axis",
)


@dataclass
class HIDReport:
    """The D-Input gamepad input report.

    ``buttons`` holds the ``HID_MASK_*`` bits; ``direction`` a ``HID_HAT_*`` value.
    """

    buttons: int = 0
    direction: int = HID_HAT_NOTHING
    l_x_axis: int = HID_JOYSTICK_MID
    l_y_axis: int = HID_JOYSTICK_MID
    r_x_axis: int = HID_JOYSTICK_MID
    r_y_axis: int = HID_JOYSTICK_MID
    right_axis: int = 0
    left_axis: int = 0
    up_axis: int = 0
    down_axis: int = 0
    triangle_axis: int = 0
    circle_axis: int = 0
    cross_axis: int = 0
    square_axis: int = 0
    l1_axis: int = 0
    r1_axis: int = 0
    l2_axis: int = 0
    r2_axis: int = 0

    def pressed(self, mask: int) -> bool:
        """True if every button in ``mask`` is held."""
        return (self.buttons & mask) == mask

    def pack(self) -> bytes:
        """The report as sent over the interrupt endpoint."""
        if not 0 <= self.buttons <= HID_BUTTONS_MASK:
            raise ValueError(f"buttons must fit in 14 bits: {self.buttons:#x}")
        values = [_check_byte(name, getattr(self, name)) for name in _BYTE_FIELDS]
        return struct.pack(_REPORT_FORMAT, self.buttons, *values)