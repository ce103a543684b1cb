"""I2C bus helpers: probing, scanning, register access and device discovery."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum


class I2CError(OSError):
    """A transfer was not acknowledged by the device."""


class Device(IntEnum):
    """Kinds of device that :meth:`BitBangI2C.discover_device` can recognise."""

    UNKNOWN = 0
    SSD1306 = 1
    SH1106 = 2
    VL53L0X = 3
    BMP180 = 4
    BMP280 = 5
    BME280 = 6
    MPU6000 = 7
    MPU9250 = 8
    MCP9808 = 9
    LSM6DS3 = 10
    ADXL345 = 11
    ADS1115 = 12
    MAX44009 = 13
    MAG3110 = 14
    CCS811 = 15
    HTS221 = 16
    LPS25H = 17
    LSM9DS1 = 18
    LM8330 = 19
    DS3231 = 20
    LIS3DH = 21
    LIS3DSH = 22
    INA219 = 23
    SHT3X = 24
    HDC1080 = 25
    MPU6886 = 26
    BME680 = 27
    AXP202 = 28
    AXP192 = 29
    EEPROM_24AAXXXE64 = 30
    DS1307 = 31


_EEPROM_OUIS = frozenset({0x000004A3, 0x00001EC0, 0x00D88039, 0x005410EC})


class I2CBus(ABC):
    """A hardware I2C controller.

    ``write`` and ``read`` raise :class:`OSError` (usually :class:`I2CError`)
    when the addressed device does not acknowledge.
    """

    @abstractmethod
    def configure(self, sda: int, scl: int, clock: int) -> None:
        """Route the controller to the given pins at ``clock`` Hz."""

    @abstractmethod
    def write(self, address: int, data: bytes, keep_control: bool) -> None:
        """Send ``data``; with ``keep_control`` the bus is not released after."""

    @abstractmethod
    def read(self, address: int, length: int, keep_control: bool) -> bytes:
        """Read ``length`` bytes."""


def pins_valid(sda: int, scl: int, block: int) -> bool:
    """True if ``sda`` and ``scl`` can carry controller ``block``'s signals."""
    return (sda + 2 * block) % 4 == 0 and (scl + 3 + 2 * block) % 4 == 0


class BitBangI2C:
    """An I2C connection on a pair of pins served by one controller block."""

    def __init__(self, bus: I2CBus, sda: int, scl: int, block: int = 0) -> None:
        self.bus = bus
        self.sda = sda
        self.scl = scl
        self.block = block
        self.initialized = False

    def init(self, clock: int) -> bool:
        """Configure the controller; pins that cannot serve the block are left alone."""
        if not pins_valid(self.sda, self.scl, self.block):
            return False
        self.bus.configure(self.sda, self.scl, clock)
        self.initialized = True
        return True

    def test(self, address: int) -> bool:
        """True if a device acknowledges at ``address``."""
        try:
            self.bus.read(address, 1, False)
        except OSError:
            return False
        return True

    def scan(self) -> bytes:
        """A 16-byte bitmap (LSB first) of the addresses 1-127 that respond."""
        bitmap = bytearray(16)
        for address in range(1, 128):
            if self.test(address):
                bitmap[address >> 3] |= 1 << (address & 7)
        return bytes(bitmap)

    def write(self, address: int, data: bytes) -> int:
        """Send ``data`` keeping control of the bus; returns the bytes written."""
        data = bytes(data)
        self.bus.write(address, data, True)
        return len(data)

    def read(self, address: int, length: int) -> bytes:
        """Read ``length`` bytes from ``address``."""
        if length < 0:
            raise ValueError(f"negative read length: {length}")
        return bytes(self.bus.read(address, length, False))

    def read_register(self, address: int, register: int, length: int) -> bytes:
        """Read ``length`` bytes starting at internal ``register``."""
        self.bus.write(address, bytes([register & 0xFF]), True)
        return self.read(address, length)

    def discover_device(self, address: int) -> Device:
        """Guess which device sits at ``address`` from its register contents."""
        buffer = bytearray(8)

        def load(register: int, length: int, offset: int = 0) -> None:
            # A failed read leaves the buffer as it was.
            try:
                data = self.read_register(address, register, length)[:length]
            except OSError:
                return
            buffer[offset:offset + len(data)] = data

        if address in (0x3C, 0x3D):
            load(0x00, 1)
            status = buffer[0] & 0xBF
            if status == 0x08:
                return Device.SH1106
            if status in (3, 6):
                return Device.SSD1306
            return Device.UNKNOWN

        if address in (0x34, 0x35):
            load(0x03, 1)
            if buffer[0] == 0x41:
                return Device.AXP202
            if buffer[0] == 0x03:
                return Device.AXP192

        if 0x40 <= address <= 0x4F:
            load(0x00, 2)
            if buffer[0] == 0x39 and buffer[1] == 0x9F:
                return Device.INA219

        if 0x50 <= address <= 0x57:
            oui = bytearray(4)
            try:
                data = self.read_register(address, 0xF8, 3)[:3]
                oui[:len(data)] = data
            except OSError:
                pass
            if int.from_bytes(oui, "little") in _EEPROM_OUIS:
                return Device.EEPROM_24AAXXXE64

        load(0xFF, 2)
        if buffer[0] == 0x10 and buffer[1] == 0x50:
            return Device.HDC1080

        if address in (0x76, 0x77):
            load(0xD0, 1)
            if buffer[0] == 0x61:
                return Device.BME680

        load(0xC0, 3)
        if buffer[0] == 0xEE and buffer[1] == 0xAA and buffer[2] == 0x10:
            return Device.VL53L0X

        load(0x20, 1)
        if buffer[0] == 0x81:
            return Device.CCS811

        for who_am_i, device in (
            (0x3F, Device.LIS3DSH),
            (0x33, Device.LIS3DH),
            (0x68, Device.LSM9DS1),
            (0xBD, Device.LPS25H),
            (0xBC, Device.HTS221),
        ):
            load(0x0F, 1)
            if buffer[0] == who_am_i:
                return device

        load(0x07, 1)
        if buffer[0] == 0xC4:
            return Device.MAG3110

        load(0x80, 2)
        if buffer[0] == 0x00 and buffer[1] == 0x84:
            return Device.LM8330

        if address in (0x4A, 0x4B):
            for register in range(8):
                load(register, 1, register)
            if buffer[2] in (2, 3) and buffer[6] == 0 and buffer[7] == 0xFF:
                return Device.MAX44009

        load(0x02, 2, 0)
        load(0x03, 2, 2)
        if buffer[0] == 0x80 and buffer[1] == 0x00 and buffer[2] == 0x7F and buffer[3] == 0xFF:
            return Device.ADS1115

        load(0x06, 2, 0)
        load(0x07, 2, 2)
        if buffer[0] == 0 and buffer[1] == 0x54 and buffer[2] == 0x04 and buffer[3] == 0x00:
            return Device.MCP9808

        load(0xD0, 1)
        if buffer[0] == 0x55:
            return Device.BMP180
        if buffer[0] == 0x58:
            return Device.BMP280
        if buffer[0] == 0x60:
            return Device.BME280

        load(0x0F, 1)
        if buffer[0] == 0x69:
            return Device.LSM6DS3

        load(0x00, 1)
        if buffer[0] == 0xE5:
            return Device.ADXL345

        load(0x75, 1)
        if buffer[0] == (address & 0xFE):
            return Device.MPU6000
        if buffer[0] == 0x71:
            return Device.MPU9250
        if buffer[0] == 0x19:
            return Device.MPU6886

        load(0x0E, 1)
        if address == 0x68 and buffer[0] == 0x1C:
            return Device.DS3231

        load(0x07, 1)
        if address == 0x68 and buffer[0] == 0x03:
            return Device.DS1307

        return Device.UNKNOWN