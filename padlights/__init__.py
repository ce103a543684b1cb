"""LED colours and animations, a flash-backed settings cache, CRC32, I2C and ADS1219 helpers, and USB gamepad report layouts."""

__version__ = "0.1.0"