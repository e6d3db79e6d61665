import pytest

from backend.bots.excusebot.compositor.fitter import (
    BoundingBox,
    fit_text,
    measure_advance,
    to_fixed,
)
from backend.bots.excusebot.utils.errors import DrawError, TextTooLongError

SHORT_BOX = BoundingBox(140, 215, 220, 250)
WIDE_BOX = BoundingBox(0, 0, 1000, 50)


def test_text_that_fits_keeps_start_size(excuse_font):
    fit = fit_text("hi", 28.0, WIDE_BOX, excuse_font)

    assert fit.size == 28.0
    assert fit.advance == measure_advance(excuse_font, "hi", 28.0)
    assert fit.start_x + fit.advance // 2 == to_fixed(WIDE_BOX.mid_x)


def test_wide_text_shrinks_in_whole_steps(excuse_font):
    fit = fit_text("compiling", 26.0, SHORT_BOX, excuse_font)

    assert fit.size < 26.0
    assert (26.0 - fit.size).is_integer()
    assert to_fixed(SHORT_BOX.min_x) + fit.advance < to_fixed(SHORT_BOX.max_x)

    # one step bigger must not have fitted
    bigger = measure_advance(excuse_font, "compiling", fit.size + 1.0)
    assert to_fixed(SHORT_BOX.min_x) + bigger >= to_fixed(SHORT_BOX.max_x)


def test_fitted_text_is_centered(excuse_font):
    box = BoundingBox(60, 75, 350, 120)
    fit = fit_text('"compiling my code"', 28.0, box, excuse_font)

    assert box.mid_x == 205
    assert fit.start_x + fit.advance // 2 == to_fixed(box.mid_x)
    assert fit.start_x >= to_fixed(box.min_x)


def test_empty_text_fits_immediately(excuse_font):
    fit = fit_text("", 12.0, SHORT_BOX, excuse_font)

    assert fit.size == 12.0
    assert fit.advance == 0
    assert fit.start_x == to_fixed(SHORT_BOX.mid_x)


def test_advance_is_nonzero_at_small_sizes(excuse_font):
    for size in (1.0, 2.0, 3.0):
        assert measure_advance(excuse_font, "x", size) > 0
        assert measure_advance(excuse_font, "x" * 500, size) > to_fixed(10)


def test_advance_keeps_subpixel_precision(excuse_font):
    advances = [measure_advance(excuse_font, "x", float(size)) for size in range(1, 9)]

    assert any(a % 64 for a in advances)
    assert advances == sorted(advances)


def test_advance_scales_with_repetition(excuse_font):
    one = measure_advance(excuse_font, "x", 3.0)

    assert measure_advance(excuse_font, "x" * 10, 3.0) == 10 * one


def test_advance_tracks_the_pixel_width(excuse_font):
    text = "compiling my code"
    pixels = excuse_font.face(28.0).getlength(text)

    assert abs(measure_advance(excuse_font, text, 28.0) - pixels * 64) <= 64 * len(text)


def test_text_that_never_fits_hits_the_floor(excuse_font):
    with pytest.raises(TextTooLongError) as exc_info:
        fit_text("x" * 500, 28.0, BoundingBox(0, 0, 10, 10), excuse_font, min_size=1.0)

    assert isinstance(exc_info.value, DrawError)


def test_custom_floor_stops_early(excuse_font):
    with pytest.raises(TextTooLongError):
        fit_text("compiling", 26.0, SHORT_BOX, excuse_font, min_size=25.0)


@pytest.mark.parametrize("size", [0.0, -3.0])
def test_rejects_non_positive_start_size(excuse_font, size):
    with pytest.raises(ValueError):
        fit_text("hi", size, WIDE_BOX, excuse_font)


def test_rejects_zero_width_box(excuse_font):
    with pytest.raises(ValueError):
        fit_text("hi", 28.0, BoundingBox(10, 0, 10, 10), excuse_font)


def test_bounding_box_geometry():
    box = BoundingBox.from_seq([140, 215, 220, 250])

    assert box == SHORT_BOX
    assert box.width == 80
    assert box.mid_x == 180
