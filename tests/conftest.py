"""Shared fixtures for the layout tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from handscript.layout import Style

MeasureFn = Callable[[str, Style], float]


def _char_measure(text: str, style: Style) -> float:
    return len(text) * style.size * 0.6


@pytest.fixture
def char_measure() -> MeasureFn:
    """Deterministic measurer: every character is ``0.6 * size`` wide."""

    return _char_measure


@pytest.fixture
def style() -> Style:
    return Style(
        font="Caveat",
        size=20,
        slant=0,
        line_spacing=1.5,
        word_spacing=1.1,
        ink_color="#000000",
    )
