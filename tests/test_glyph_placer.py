"""Tests for per-character placement and jitter."""

from __future__ import annotations

import random
from typing import Any

import pytest

from handscript.layout import JitterSettings, RandomSource, Style, place


class SequenceSource:
    """Random source replaying a fixed sequence."""

    def __init__(self, values: list[float]) -> None:
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


def _ten(text: str, style: Style) -> float:
    return 10.0


def test_one_placement_per_character_in_order(style: Style, char_measure: Any) -> None:
    line = "hello world"
    placements = place(line, 50, 80, style, char_measure, rng=random.Random(0))
    assert len(placements) == len(line)
    assert "".join(p.char for p in placements) == line


def test_empty_line(style: Style, char_measure: Any) -> None:
    assert place("", 0, 0, style, char_measure) == []


def test_y_is_constant(style: Style, char_measure: Any) -> None:
    placements = place("abc def", 50, 123.5, style, char_measure, rng=random.Random(1))
    assert {p.y for p in placements} == {123.5}


def test_cursor_advances_and_widens_spaces() -> None:
    style = Style(font="f", size=20, word_spacing=2.0)
    placements = place("ab c", 5, 0, style, _ten, rng=random.Random(2))
    assert [p.x for p in placements] == [5, 15, 25, 45]


def test_cursor_is_monotonic(style: Style, char_measure: Any) -> None:
    placements = place("the quick brown fox", 50, 80, style, char_measure, rng=random.Random(3))
    xs = [p.x for p in placements]
    assert xs == sorted(xs)
    assert xs[0] == 50


def test_jitter_within_bounds(style: Style, char_measure: Any) -> None:
    placements = place("x" * 500, 0, 0, style, char_measure, rng=random.Random(4))
    assert all(-1.0 <= p.offset_x <= 1.0 for p in placements)
    assert all(-1.0 <= p.offset_y <= 1.0 for p in placements)
    assert all(-0.5 <= p.rotation <= 0.5 for p in placements)
    assert len({p.offset_x for p in placements}) > 1


def test_jitter_does_not_move_cursor(style: Style, char_measure: Any) -> None:
    a = place("jitter test", 0, 0, style, char_measure, rng=random.Random(5))
    b = place("jitter test", 0, 0, style, char_measure, rng=random.Random(6))
    assert [p.x for p in a] == [p.x for p in b]
    assert [p.offset_x for p in a] != [p.offset_x for p in b]


def test_seeded_source_is_reproducible(style: Style, char_measure: Any) -> None:
    a = place("repeat me", 0, 0, style, char_measure, rng=random.Random(7))
    b = place("repeat me", 0, 0, style, char_measure, rng=random.Random(7))
    assert a == b


def test_unseeded_calls_differ(style: Style, char_measure: Any) -> None:
    line = "natural handwriting varies"
    a = place(line, 0, 0, style, char_measure)
    b = place(line, 0, 0, style, char_measure)
    assert [p.x for p in a] == [p.x for p in b]
    assert [(p.offset_x, p.offset_y, p.rotation) for p in a] != [
        (p.offset_x, p.offset_y, p.rotation) for p in b
    ]


def test_draw_order_and_scaling(style: Style) -> None:
    source = SequenceSource([0.0, 0.75, 0.25])
    (placement,) = place("a", 0, 0, style, _ten, rng=source)
    assert placement.offset_x == pytest.approx(-1.0)
    assert placement.offset_y == pytest.approx(0.5)
    assert placement.rotation == pytest.approx(-0.25)


def test_custom_jitter_settings(style: Style) -> None:
    still = JitterSettings(max_offset=0.0, max_rotation=0.0)
    placements = place("abc", 0, 0, style, _ten, rng=random.Random(8), jitter=still)
    assert all(p.offset_x == 0 and p.offset_y == 0 and p.rotation == 0 for p in placements)

    wild = JitterSettings(max_offset=5.0, max_rotation=3.0)
    source = SequenceSource([0.0, 0.0, 0.0])
    (placement,) = place("a", 0, 0, style, _ten, rng=source, jitter=wild)
    assert placement.offset_x == pytest.approx(-5.0)
    assert placement.rotation == pytest.approx(-3.0)


def test_measurement_fault_uses_single_glyph_estimate(style: Style) -> None:
    def broken(text: str, s: Style) -> float:
        raise ValueError("no font")

    placements = place("ab c", 0, 0, style, broken, rng=random.Random(9))
    xs = [p.x for p in placements]
    assert xs[:3] == pytest.approx([0.0, 12.0, 24.0])
    assert xs[3] == pytest.approx(24.0 + 12.0 * 1.1)


def test_random_random_is_a_random_source() -> None:
    assert isinstance(random.Random(), RandomSource)
    assert isinstance(SequenceSource([]), RandomSource)


def test_placement_to_dict(style: Style) -> None:
    (placement,) = place("q", 1, 2, style, _ten, rng=SequenceSource([0.5, 0.5, 0.5]))
    assert placement.to_dict() == {
        "char": "q",
        "x": 1,
        "y": 2,
        "rotation": 0.0,
        "offset_x": 0.0,
        "offset_y": 0.0,
    }
