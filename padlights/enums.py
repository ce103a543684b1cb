"""Layout, splash-screen, on-board LED and configuration choices."""

from __future__ import annotations

from enum import IntEnum


class ButtonLayout(IntEnum):
    """Layouts drawn on the left half of the display."""

    STICK = 0
    STICKLESS = 1
    BUTTONS_ANGLED = 2
    BUTTONS_BASIC = 3
    KEYBOARD_ANGLED = 4
    KEYBOARDA = 5
    DANCEPADA = 6
    TWINSTICKA = 7
    BLANKA = 8
    VLXA = 9
    FIGHTBOARD_STICK = 10
    FIGHTBOARD_MIRRORED = 11
    CUSTOMA = 12


class ButtonLayoutRight(IntEnum):
    """Layouts drawn on the right half of the display."""

    ARCADE = 0
    STICKLESSB = 1
    BUTTONS_ANGLEDB = 2
    VEWLIX = 3
    VEWLIX7 = 4
    CAPCOM = 5
    CAPCOM6 = 6
    SEGA2P = 7
    NOIR8 = 8
    KEYBOARDB = 9
    DANCEPADB = 10
    TWINSTICKB = 11
    BLANKB = 12
    VLXB = 13
    FIGHTBOARD = 14
    FIGHTBOARD_STICK_MIRRORED = 15
    CUSTOMB = 16


class SplashMode(IntEnum):
    """How the splash image is shown at start-up."""

    STATIC_SPLASH = 0
    CLOSE_IN = 1
    CLOSE_IN_CUSTOM = 2
    NO_SPLASH = 3


class SplashChoice(IntEnum):
    """Which splash image is shown."""

    MAIN = 0
    X = 1
    Y = 2
    Z = 3
    CUSTOM = 4
    LEGACY = 5


class OnBoardLedMode(IntEnum):
    """What the board's own LED indicates."""

    OFF = 0
    MODE_INDICATOR = 1
    INPUT_TEST = 2


class ConfigType(IntEnum):
    """Ways the controller can be configured."""

    WEB = 0
    SERIAL = 1
    DISPLAY = 2