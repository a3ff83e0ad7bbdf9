import pytest

from plasmatic.greetz import GREETZ_HEIGHT, GREETZ_WIDTH, Bitmap, greetz_bitmap


def test_lowest_bit_is_top_left_pixel():
    bitmap = Bitmap(8, 8, [1])
    assert bitmap.get_pixel(0, 0) == 1
    assert bitmap.get_pixel(1, 0) == 0
    assert bitmap.get_pixel(0, 1) == 0


def test_bits_are_row_major():
    width = 8
    bitmap = Bitmap(width, 8, [1 << (3 * width + 5)])
    assert bitmap.get_pixel(5, 3) == 1
    assert sum(sum(row) for row in bitmap.pixels()) == 1


def test_pixels_span_several_words():
    bitmap = Bitmap(16, 8, [0, 1])
    assert bitmap.get_pixel(0, 4) == 1
    assert bitmap.get_pixel(15, 3) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8, 0), (0, 8), (100, 100)])
def test_out_of_bounds_is_blank(x, y):
    bitmap = Bitmap(8, 8, [(1 << 64) - 1])
    assert bitmap.get_pixel(x, y) == 0


def test_wrong_word_count_raises():
    with pytest.raises(ValueError):
        Bitmap(8, 8, [0, 0])


def test_oversized_word_raises():
    with pytest.raises(ValueError):
        Bitmap(8, 8, [1 << 64])


def test_negative_word_raises():
    with pytest.raises(ValueError):
        Bitmap(8, 8, [-1])


def test_pixels_shape_and_agreement():
    bitmap = Bitmap(16, 4, [0x0123456789ABCDEF])
    rows = list(bitmap.pixels())
    assert len(rows) == 4
    assert all(len(row) == 16 for row in rows)
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            assert value == bitmap.get_pixel(x, y)


def test_full_word_sets_every_pixel():
    bitmap = Bitmap(8, 8, [(1 << 64) - 1])
    assert sum(sum(row) for row in bitmap.pixels()) == 64


def test_greetz_dimensions_match_source():
    bitmap = greetz_bitmap()
    assert (bitmap.width, bitmap.height) == (GREETZ_WIDTH, GREETZ_HEIGHT)
    assert (GREETZ_WIDTH, GREETZ_HEIGHT) == (256, 136)
    assert len(bitmap.words) == 544


def test_greetz_pixel_count_matches_words():
    bitmap = greetz_bitmap()
    total = sum(sum(row) for row in bitmap.pixels())
    assert total == sum(bin(word).count("1") for word in bitmap.words)
    assert total > 0


def test_greetz_edges_are_blank():
    rows = list(greetz_bitmap().pixels())
    assert sum(rows[0]) == 0
    assert sum(rows[-1]) == 0


def test_greetz_has_text_rows():
    rows = list(greetz_bitmap().pixels())
    lit_rows = [y for y, row in enumerate(rows) if any(row)]
    assert len(lit_rows) == lit_rows[-1] - lit_rows[0] + 1
    assert 0 < lit_rows[0] < lit_rows[-1] < GREETZ_HEIGHT - 1


def test_greetz_first_text_row_pixels():
    rows = list(greetz_bitmap().pixels())
    first = next(y for y, row in enumerate(rows) if any(row))
    lit = [x for x, value in enumerate(rows[first]) if value]
    assert lit == list(range(150, 164)) + [165]


def test_greetz_repeated_calls_agree():
    first = greetz_bitmap()
    second = greetz_bitmap()
    assert first.words == second.words
    assert list(first.pixels()) == list(second.pixels())