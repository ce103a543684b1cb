"""Driver for the ADS1219 24-bit, four-channel analogue-to-digital converter."""

from __future__ import annotations

from enum import IntEnum

from padlights.i2c import BitBangI2C, I2CBus

CONFIG_REGISTER_ADDRESS = 0x40
STATUS_REGISTER_ADDRESS = 0x24

MUX_MASK = 0x1F
MUX_DIFF_0_1 = 0x00
MUX_DIFF_2_3 = 0x20
MUX_DIFF_1_2 = 0x40
MUX_SINGLE_0 = 0x60
MUX_SINGLE_1 = 0x80
MUX_SINGLE_2 = 0xA0
MUX_SINGLE_3 = 0xC0
MUX_SHORTED = 0xE0

GAIN_MASK = 0xEF
DATA_RATE_MASK = 0xF3
MODE_MASK = 0xFD
VREF_MASK = 0xFE

DATA_RATE_20 = 0x00
DATA_RATE_90 = 0x04
DATA_RATE_330 = 0x08
DATA_RATE_1000 = 0x0C

REGISTER_STATUS_DRDY = 0x40

COMMAND_RESET = 0x06
COMMAND_START = 0x08
COMMAND_POWERDOWN = 0x02
COMMAND_RDATA = 0x10
COMMAND_RREG = 0x20

DEFAULT_ADDRESS = 0x40

_SINGLE_ENDED = {0: MUX_SINGLE_0, 1: MUX_SINGLE_1, 2: MUX_SINGLE_2, 3: MUX_SINGLE_3}
_DATA_RATES = {20: DATA_RATE_20, 90: DATA_RATE_90, 330: DATA_RATE_330, 1000: DATA_RATE_1000}


class Gain(IntEnum):
    ONE = 0x00
    FOUR = 0x10


class ConversionMode(IntEnum):
    SINGLE_SHOT = 0x00
    CONTINUOUS = 0x02


class VoltageReference(IntEnum):
    INTERNAL = 0x00
    EXTERNAL = 0x01


class Register(IntEnum):
    CONFIG = 0x00
    STATUS = 0x01


class ADS1219:
    """An ADS1219 on an I2C bus, keeping a copy of its configuration register."""

    def __init__(
        self,
        bus: I2CBus,
        sda: int,
        scl: int,
        block: int = 0,
        speed: int = 400_000,
        address: int = DEFAULT_ADDRESS,
    ) -> None:
        self._i2c = BitBangI2C(bus, sda, scl, block)
        self.speed = speed
        self.address = address
        self.config = 0x00
        self.single_shot = True

    def begin(self) -> None:
        """Set up the bus and reset the converter."""
        self._i2c.init(self.speed)
        self.reset()

    def _command(self, command: int) -> None:
        self._i2c.write(self.address, bytes([command]))

    def _write_register(self, data: int) -> None:
        self._i2c.write(self.address, bytes([CONFIG_REGISTER_ADDRESS, data & 0xFF]))

    def _update(self, mask: int, bits: int) -> None:
        self.config = (self.config & mask) | bits
        self._write_register(self.config)

    def reset(self) -> None:
        """Return the device to its power-on state."""
        self._command(COMMAND_RESET)

    def reset_config(self) -> None:
        """Write zero to the configuration register on the device."""
        self._write_register(0x00)

    def start(self) -> None:
        """Start (or restart) a conversion."""
        self._command(COMMAND_START)

    def power_down(self) -> None:
        """Put the device into power-down mode, keeping its registers."""
        self._command(COMMAND_POWERDOWN)

    def read_register(self, register: Register) -> int:
        """Read the configuration or status register."""
        register = Register(register)
        self._command(COMMAND_RREG | (register << 2))
        return self._i2c.read(self.address, 1)[0]

    def read_conversion_result(self) -> int:
        """The latest conversion as a signed 24-bit value."""
        self._command(COMMAND_RDATA)
        value = int.from_bytes(self._i2c.read(self.address, 3), "big")
        if value >= 0x800000:
            value -= 0x1000000
        return value

    def _read_mux(self, mux: int) -> int:
        self._update(MUX_MASK, mux)
        return self.read_conversion_result()

    def read_single_ended(self, channel: int) -> int:
        """Convert one input against ground; an unknown channel selects input 0-1."""
        return self._read_mux(_SINGLE_ENDED.get(channel, MUX_DIFF_0_1))

    def read_differential_0_1(self) -> int:
        return self._read_mux(MUX_DIFF_0_1)

    def read_differential_2_3(self) -> int:
        return self._read_mux(MUX_DIFF_2_3)

    def read_differential_1_2(self) -> int:
        return self._read_mux(MUX_DIFF_1_2)

    def read_shorted(self) -> int:
        """Convert with the inputs shorted, for offset calibration."""
        return self._read_mux(MUX_SHORTED)

    def set_gain(self, gain: Gain) -> None:
        self._update(GAIN_MASK, Gain(gain))

    def set_data_rate(self, rate: int) -> None:
        """Select 20, 90, 330 or 1000 samples per second; other rates select 20."""
        self._update(DATA_RATE_MASK, _DATA_RATES.get(rate, DATA_RATE_20))

    def set_conversion_mode(self, mode: ConversionMode) -> None:
        mode = ConversionMode(mode)
        self._update(MODE_MASK, mode)
        self.single_shot = mode != ConversionMode.CONTINUOUS

    def set_voltage_reference(self, vref: VoltageReference) -> None:
        self._update(VREF_MASK, VoltageReference(vref))

    def set_channel(self, channel: int) -> None:
        """Select a single-ended input without converting."""
        self._update(MUX_MASK, _SINGLE_ENDED.get(channel, MUX_DIFF_0_1))