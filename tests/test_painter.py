"""Tests for terminal rendering."""

import math

from rich.style import Style

from namewheel.entries import Entry
from namewheel.painter import PALETTE, POINTER, Canvas, WheelPainter
from namewheel.pointer import get_index_at_pointer

WIDTH, HEIGHT = 41, 15


def _bgcolor_at(text, x, y):
    offset = y * (WIDTH + 1) + x
    for span in text.spans:
        if span.start <= offset < span.end:
            return span.style.bgcolor
    return None


def _draw(entries, angle=0.0, dark_mode=False):
    canvas = Canvas(WIDTH, HEIGHT)
    WheelPainter().draw(canvas, angle, entries, entries, None, dark_mode)
    return canvas.text


def test_frame_shape_and_pointer():
    entries = [Entry(name) for name in ("alpha", "bravo", "charlie", "delta")]
    text = _draw(entries)
    lines = text.plain.split("\n")
    assert len(lines) == HEIGHT
    assert all(len(line) == WIDTH for line in lines)
    assert lines[0].strip() == POINTER
    for letter in "ABCD":
        assert letter in text.plain


def test_slice_under_pointer_matches_pointer_index():
    entries = [Entry(str(i)) for i in range(6)]
    for angle in (0.0, 1.0, 2.5, 4.0, 6.0):
        text = _draw(entries, angle)
        index = get_index_at_pointer(entries, angle)
        # Top of the wheel, straight below the pointer
        assert _bgcolor_at(text, 20, 2) == Style(bgcolor=PALETTE[index]).bgcolor


def test_empty_wheel_message():
    canvas = Canvas(WIDTH, HEIGHT)
    WheelPainter().draw(canvas, 0.0, [], [Entry("off", enabled=False)], None, False)
    assert "All entries disabled" in canvas.text.plain


def test_tiny_canvas_draws_nothing():
    canvas = Canvas(2, 2)
    WheelPainter().draw(canvas, math.pi, [Entry("a")], [Entry("a")], None, True)
    assert canvas.text.plain == ""


def test_refresh_drops_cached_geometry():
    entries = [Entry("a"), Entry("b")]
    painter = WheelPainter()
    painter.draw(Canvas(WIDTH, HEIGHT), 0.0, entries, entries, None, False)
    entries[0].weight = 3
    painter.refresh()
    canvas = Canvas(WIDTH, HEIGHT)
    painter.draw(canvas, 0.0, entries, entries, None, False)
    assert canvas.text.plain
