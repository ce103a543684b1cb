import pytest

from padlights.tones import CONFIG_MODE_SONG, INTRO_SONG, Song, Tone


def test_tone_lookup_by_frequency():
    assert Tone(440) is Tone.A4
    assert Tone(0) is Tone.PAUSE


def test_unknown_frequency_rejected():
    with pytest.raises(ValueError):
        Tone(441)


def test_song_converts_numbers_to_tones():
    song = Song(100, [440, 0])
    assert song.tones == (Tone.A4, Tone.PAUSE)


def test_single_tone_duration():
    assert Song(100, [Tone.A4]).duration_ms() == 100


def test_empty_song_has_no_duration():
    assert Song(100, []).duration_ms() == 0


def test_duration_grows_with_each_tone():
    one = Song(150, [Tone.E5])
    two = Song(150, [Tone.E5, Tone.E5])
    assert two.duration_ms() == 2 * one.duration_ms()


def test_intro_song():
    assert INTRO_SONG.tone_duration == 100
    assert len(INTRO_SONG.tones) == 16
    assert INTRO_SONG.tones[0] is Tone(587)
    assert INTRO_SONG.tones[-1] is Tone(4978)
    assert INTRO_SONG.duration_ms() == 1600


def test_config_mode_song():
    assert CONFIG_MODE_SONG.tone_duration == 150
    assert CONFIG_MODE_SONG.tones == (Tone.E5, Tone.E5, Tone.G4, Tone.FS5, Tone.E5)
    assert CONFIG_MODE_SONG.tones[2] is Tone(392)
    assert CONFIG_MODE_SONG.duration_ms() == 750


def test_duration_out_of_range_rejected():
    with pytest.raises(ValueError):
        Song(-1, [Tone.A4])
    with pytest.raises(ValueError):
        Song(0x10000, [Tone.A4])


def test_invalid_tone_rejected():
    with pytest.raises(ValueError):
        Song(100, [12345])