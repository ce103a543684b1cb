# padlights

Building blocks for arcade-style gamepad firmware, as a plain Python library
with no dependencies outside the standard library.

## What is in it

- `padlights.colors`: `RGB` colours (`RGB.from_packed`, `RGB.wheel`,
  `RGB.value`) packed for `LEDFormat.GRB`, `RGB`, `GRBW` and `RGBW` strips,
  and a fixed palette `COLORS`.
- `padlights.pixel`: `Pixel` (index, button mask, LED positions) and
  `PixelMatrix` with `led_count()` and `pixel_count()`.
- `padlights.animation`: `AnimationOptions`, the `AnimationEffect` and
  `AnimationHotkey` enums, and the abstract `Animation` base class.
- `padlights.effects`: `StaticColor`, `Rainbow`, `Chase`, `StaticTheme`,
  `CustomTheme`, `CustomThemePressed`, and `ThemeLibrary`, which holds the
  static and custom themes.
- `padlights.station`: `AnimationStation`, which switches between a base
  effect and a button-press effect, handles hotkeys (with a 250 ms repeat
  guard), keeps a 100-LED frame and scales it by brightness
  (`apply_brightness()`).
- `padlights.neopico`: `NeoPico`, which holds a frame of packed colours and
  encodes it into the 32-bit words sent to a strip.
- `padlights.crc32`: an incremental `CRC32` class and a one-shot `crc32()`.
- `padlights.eeprom`: `FlashPROM`, an in-memory cache of a flash region whose
  commits are debounced so that a burst of changes is written once.
- `padlights.i2c`: the abstract `I2CBus`, `BitBangI2C` with `test`, `scan`,
  `read`, `write`, `read_register` and `discover_device`, the `Device` enum
  and `pins_valid()`.
- `padlights.ads1219`: an `ADS1219` 24-bit ADC driver on top of an `I2CBus`.
- `padlights.hid_descriptors` and `padlights.ps4_descriptors`: USB device,
  HID and configuration descriptors, and `HIDReport` / `PS4Report` classes
  whose `pack()` gives the bytes of an input report.
- `padlights.enums`: button layout, splash screen, on-board LED and
  configuration-type enums.
- `padlights.bitmaps`: `Bitmap` and the start-up images `SPLASH_IMAGE_MAIN`,
  `BOOT_LOGO_TOP` and `BOOT_LOGO_BOTTOM`.
- `padlights.tones`: `Tone` frequencies, `Song`, and `INTRO_SONG` and
  `CONFIG_MODE_SONG`.

## Installation

```
pip install padlights
```

To run the tests:

```
pip install "padlights[test]"
pytest
```

## Examples

Pack a colour for a GRB strip at half brightness:

```python
from padlights.colors import RGB, LEDFormat

red = RGB(255, 0, 0)
word = red.value(LEDFormat.GRB, 0.5)
```

Render a frame with the animation station:

```python
from padlights.animation import AnimationOptions
from padlights.pixel import Pixel, PixelMatrix
from padlights.station import AnimationStation

matrix = PixelMatrix([[Pixel(0, positions=[0])], [Pixel(1, positions=[1])]])
options = AnimationOptions(brightness=5, static_color_index=2)
station = AnimationStation(matrix, options)
station.set_mode(0)          # static colour
station.animate()
words = station.apply_brightness()
```

Checksum a block of settings:

```python
from padlights.crc32 import crc32

checksum = crc32(b"settings")
```

Read and write the settings cache:

```python
from padlights.eeprom import FlashPROM

prom = FlashPROM(writer=lambda image: None)
prom.start(bytes(8192))
prom.set(0, b"\x01\x02\x03")
prom.commit()                # written after the write wait
data = prom.get(0, 3)
prom.flush()                 # or write now
```

Look up a song and how long it plays:

```python
from padlights.tones import Song, Tone

song = Song(150, [Tone.E5, Tone.E5, Tone.G4])
print(song.duration_ms())
```

## What it does not do

The package talks to no hardware by itself. `NeoPico` hands its words to an
optional `sink` callable, `FlashPROM` keeps its flash image in memory and
passes it to an optional `writer` callable, and `BitBangI2C` and `ADS1219`
need an `I2CBus` subclass that you provide. There is no command-line tool,
no USB stack and no display driver; the descriptors and reports are bytes
for you to send.