import numpy as np
import pytest

from physics3d.glyphs import Rect, glyph_rects, rect_triangles, text_rects


def test_space_draws_nothing():
    assert glyph_rects(" ", 0.0, 0.0) == []


def test_f_has_three_strokes():
    rects = glyph_rects("F", 0.0, 0.0)
    assert len(rects) == 3
    assert rects[0].x == 0.0 and rects[0].y == 0.0


def test_s_and_5_share_a_shape():
    assert glyph_rects("S", 3.0, 4.0, 2.0) == glyph_rects("5", 3.0, 4.0, 2.0)
    assert glyph_rects("s", 3.0, 4.0, 2.0) == glyph_rects("5", 3.0, 4.0, 2.0)


def test_unknown_character_is_one_square():
    rects = glyph_rects("?", 0.0, 0.0, 3.0)
    assert len(rects) == 1
    assert rects[0].width == rects[0].height


def test_glyphs_stay_inside_cell():
    for char in "FPS:0123456789.m":
        for rect in glyph_rects(char, 0.0, 0.0, 1.0):
            assert rect.x >= 0.0
            assert rect.y >= 0.0
            assert rect.x + rect.width <= 6.0 + 1e-9
            assert rect.y + rect.height <= 10.0 + 1e-9


def test_glyph_translation():
    base = glyph_rects("8", 0.0, 0.0, 2.0)
    moved = glyph_rects("8", 5.0, 7.0, 2.0)
    for a, b in zip(base, moved):
        assert b.x == pytest.approx(a.x + 5.0)
        assert b.y == pytest.approx(a.y + 7.0)
        assert (a.width, a.height) == (b.width, b.height)


def test_glyph_scaling():
    small = glyph_rects("8", 0.0, 0.0, 1.0)
    large = glyph_rects("8", 0.0, 0.0, 2.0)
    for a, b in zip(small, large):
        assert b.x == pytest.approx(a.x * 2)
        assert b.y == pytest.approx(a.y * 2)
        assert b.width == pytest.approx(a.width * 2)
        assert b.height == pytest.approx(a.height * 2)


def test_percent_has_corner_dots():
    rects = glyph_rects("%", 0.0, 0.0, 1.0)
    assert rects[0] == Rect(0.0, 0.0, 1.0, 1.0)
    assert len(rects) > 2


def test_glyph_rejects_multiple_characters():
    with pytest.raises(ValueError):
        glyph_rects("ab", 0.0, 0.0)


def test_text_rect_count_is_sum_of_glyphs():
    text = "FPS: 60"
    expected = sum(len(glyph_rects(c, 0.0, 0.0)) for c in text)
    assert len(text_rects(text, 10.0, 20.0, 2.0)) == expected


def test_text_advances_cursor():
    rects = text_rects("11", 0.0, 0.0, 1.0)
    first = glyph_rects("1", 0.0, 0.0, 1.0)
    second = rects[len(first):]
    assert rects[: len(first)] == first
    assert all(b.x > a.x for a, b in zip(first, second))
    assert all(b.y == a.y for a, b in zip(first, second))


def test_newline_returns_to_start_column():
    rects = text_rects("1\n1", 2.0, 0.0, 1.0)
    first = glyph_rects("1", 2.0, 0.0, 1.0)
    second = rects[len(first):]
    assert [r.x for r in second] == [r.x for r in first]
    assert second == glyph_rects("1", 2.0, 14.0, 1.0)


def test_rect_triangles_cover_corners():
    rect = Rect(1.0, 2.0, 3.0, 4.0)
    points = rect_triangles(rect).reshape(-1, 2)
    assert points.shape == (6, 2)
    assert tuple(points[0]) == (rect.x, rect.y)
    assert points[:, 0].max() == rect.x + rect.width
    assert points[:, 1].max() == rect.y + rect.height
    assert {tuple(p) for p in points} == {
        (1.0, 2.0), (4.0, 2.0), (1.0, 6.0), (4.0, 6.0)
    }


def test_rect_triangles_area_matches_rect():
    rect = Rect(0.0, 0.0, 5.0, 2.0)
    points = rect_triangles(rect).reshape(2, 3, 2).astype(np.float64)
    area = 0.0
    for a, b, c in points:
        area += abs(np.cross(b - a, c - a)) / 2
    assert area == pytest.approx(rect.width * rect.height)