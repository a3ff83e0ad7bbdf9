import pytest

from plasmatic.greetz import GREETZ_WIDTH, greetz_bitmap
from plasmatic.scenes import (
    FRAME_SIZE,
    MARGIN,
    TEXT_OFF,
    TEXT_ON,
    X_RES,
    Y_RES,
    NoiseScene,
    PlasmaScene,
    TextScene,
)


def _border_indices():
    for y in range(Y_RES):
        for x in range(X_RES):
            if not (MARGIN <= x < X_RES - MARGIN and MARGIN <= y < Y_RES - MARGIN):
                yield y * X_RES + x


@pytest.fixture(scope="module")
def plasma_frames():
    first = PlasmaScene(seed=1234)
    second = PlasmaScene(seed=1234)
    return first, first.render(), second.render()


@pytest.fixture(scope="module")
def noise_frame():
    scene = NoiseScene()
    return scene, scene.render()


def test_plasma_frame_size(plasma_frames):
    _, frame, _ = plasma_frames
    assert len(frame) == FRAME_SIZE


def test_plasma_border_stays_black(plasma_frames):
    _, frame, _ = plasma_frames
    assert all(frame[i] == 0 for i in _border_indices())


def test_plasma_is_deterministic_for_seed(plasma_frames):
    _, a, b = plasma_frames
    assert a == b


def test_plasma_advances_time(plasma_frames):
    scene, _, _ = plasma_frames
    assert scene.demotime == 1


def test_toggle_greetz_flips():
    scene = PlasmaScene(seed=1)
    assert scene.toggle_greetz() is True
    assert scene.show_greetz is True
    assert scene.toggle_greetz() is False
    assert scene.show_greetz is False


def test_mask_all_open_without_greetz():
    scene = PlasmaScene(seed=1)
    scene.update_mask()
    assert set(scene.mask) == {255}


def test_mask_matches_bitmap_on_first_frame():
    scene = PlasmaScene(seed=1)
    scene.toggle_greetz()
    scene.update_mask()
    bitmap = greetz_bitmap()
    for y in range(MARGIN, Y_RES - MARGIN):
        for x in range(MARGIN, X_RES - MARGIN):
            expected = 255 if bitmap.get_pixel(x - MARGIN, y - MARGIN) else 0
            assert scene.mask[y * X_RES + x] == expected
    assert scene.greetz_offset == 5


def test_mask_hidden_count_equals_text_pixels():
    scene = PlasmaScene(seed=1)
    scene.toggle_greetz()
    scene.update_mask()
    text_pixels = sum(sum(row) for row in greetz_bitmap().pixels())
    opened = scene.mask.count(255)
    assert opened == text_pixels


def test_greetz_offset_wraps_only_past_width():
    scene = PlasmaScene(seed=1)
    scene.toggle_greetz()
    scene.greetz_offset = GREETZ_WIDTH - 5
    scene.update_mask()
    assert scene.greetz_offset == GREETZ_WIDTH
    scene.update_mask()
    assert scene.greetz_offset == 0


def test_plasma_with_greetz_blanks_outside_text():
    scene = PlasmaScene(seed=7)
    scene.toggle_greetz()
    frame = scene.render()
    bitmap = greetz_bitmap()
    for y in range(MARGIN, Y_RES - MARGIN):
        for x in range(MARGIN, X_RES - MARGIN):
            if not bitmap.get_pixel(x - MARGIN, y - MARGIN):
                assert frame[y * X_RES + x] == 0


def test_noise_frame_size_and_time(noise_frame):
    scene, frame = noise_frame
    assert len(frame) == FRAME_SIZE
    assert scene.time == 1


def test_noise_is_zero_at_lattice_origin(noise_frame):
    _, frame = noise_frame
    assert frame[0] == 0


def test_text_scene_draws_bitmap():
    frame = TextScene().render()
    bitmap = greetz_bitmap()
    for y, row in enumerate(bitmap.pixels()):
        for x, pixel in enumerate(row):
            expected = TEXT_ON if pixel else TEXT_OFF
            assert frame[(y + MARGIN) * X_RES + x + MARGIN] == expected


def test_text_scene_border_black_and_stable():
    scene = TextScene()
    frame = scene.render()
    assert all(frame[i] == 0 for i in _border_indices())
    assert scene.render() == frame