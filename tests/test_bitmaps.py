import pytest

from padlights.bitmaps import BOOT_LOGO_BOTTOM, BOOT_LOGO_TOP, SPLASH_IMAGE_MAIN, Bitmap


def _pack(bitmap):
    out = bytearray()
    for row in bitmap.rows():
        for start in range(0, bitmap.width, 8):
            byte = 0
            for offset, lit in enumerate(row[start:start + 8]):
                if lit:
                    byte |= 0x80 >> offset
            out.append(byte)
    return bytes(out)


def test_pixels_are_most_significant_bit_first():
    bitmap = Bitmap("t", 8, 2, bytes([0x80, 0x01]))
    assert bitmap.pixel(0, 0) is True
    assert bitmap.pixel(1, 0) is False
    assert bitmap.pixel(7, 1) is True
    assert bitmap.pixel(0, 1) is False


def test_rows_have_image_shape():
    rows = list(BOOT_LOGO_TOP.rows())
    assert len(rows) == BOOT_LOGO_TOP.height
    assert all(len(row) == BOOT_LOGO_TOP.width for row in rows)


@pytest.mark.parametrize("bitmap", [SPLASH_IMAGE_MAIN, BOOT_LOGO_TOP, BOOT_LOGO_BOTTOM])
def test_rows_round_trip_to_data(bitmap):
    assert _pack(bitmap) == bitmap.data


def test_main_splash_size():
    assert (SPLASH_IMAGE_MAIN.width, SPLASH_IMAGE_MAIN.height) == (128, 64)
    assert len(SPLASH_IMAGE_MAIN.data) == 16 * 64
    assert SPLASH_IMAGE_MAIN.pixel(127, 63) is False
    with pytest.raises(IndexError):
        SPLASH_IMAGE_MAIN.pixel(128, 0)
    with pytest.raises(IndexError):
        SPLASH_IMAGE_MAIN.pixel(0, 64)


def test_main_splash_top_rows_are_blank():
    rows = list(SPLASH_IMAGE_MAIN.rows())
    assert list(rows[0]) == [False] * 128
    assert SPLASH_IMAGE_MAIN.pixel(106, 16) is True
    assert SPLASH_IMAGE_MAIN.pixel(105, 16) is False
    assert SPLASH_IMAGE_MAIN.pixel(11, 32) is True
    assert SPLASH_IMAGE_MAIN.pixel(10, 32) is False


def test_bottom_logo_first_pixels():
    assert BOOT_LOGO_BOTTOM.pixel(0, 0) is False
    assert BOOT_LOGO_BOTTOM.pixel(1, 0) is True


def test_wrong_data_length_rejected():
    with pytest.raises(ValueError):
        Bitmap("t", 9, 1, bytes([0xFF]))


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        Bitmap("t", 0, 1, b"")


def test_pixel_outside_image_rejected():
    bitmap = Bitmap("t", 8, 1, bytes([0xFF]))
    with pytest.raises(IndexError):
        bitmap.pixel(8, 0)
    with pytest.raises(IndexError):
        bitmap.pixel(0, -1)