"""Tests for glyph measurement and its fallback policy."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any

import pytest
from reportlab.pdfbase.pdfmetrics import stringWidth

from handscript.layout import ReportlabMeasurer, Style, estimate_width, measure_with_fallback


def test_estimate_width(style: Style) -> None:
    assert estimate_width("abc", style) == pytest.approx(36.0)
    assert estimate_width("", style) == 0.0
    assert estimate_width("ab", style, ratio=0.5) == pytest.approx(20.0)


def test_returns_measured_width(style: Style) -> None:
    assert measure_with_fallback(lambda t, s: 7, "abc", style) == 7.0
    assert isinstance(measure_with_fallback(lambda t, s: 7, "abc", style), float)


@pytest.mark.parametrize(
    "result",
    [math.nan, math.inf, -math.inf, 10**400, None, "12", True, [1.0]],
)
def test_bad_results_fall_back(result: Any, style: Style) -> None:
    assert measure_with_fallback(lambda t, s: result, "abcd", style) == pytest.approx(48.0)


def test_raising_measurer_falls_back(style: Style, caplog: pytest.LogCaptureFixture) -> None:
    def broken(text: str, s: Style) -> float:
        raise OSError("font file vanished")

    caplog.set_level(logging.DEBUG, logger="handscript")
    assert measure_with_fallback(broken, "ab", style) == pytest.approx(24.0)
    assert "OSError" in caplog.text


def test_reportlab_standard_font() -> None:
    style = Style(font="Helvetica", size=20)
    measure = ReportlabMeasurer()
    assert measure("Hello", style) == pytest.approx(stringWidth("Hello", "Helvetica", 20))
    assert measure.resolve_font("Helvetica") == "Helvetica"


def test_reportlab_unknown_font_uses_fallback(caplog: pytest.LogCaptureFixture) -> None:
    style = Style(font="NoSuchHand", size=12)
    measure = ReportlabMeasurer(fallback_font="Courier")
    with caplog.at_level(logging.WARNING, logger="handscript"):
        width = measure("abc", style)
    assert width == pytest.approx(stringWidth("abc", "Courier", 12))
    assert "NoSuchHand" in caplog.text
    assert measure.resolve_font("NoSuchHand") == "Courier"


def test_reportlab_unreadable_font_file_uses_fallback(tmp_path: Path) -> None:
    (tmp_path / "Broken.ttf").write_bytes(b"not a font")
    measure = ReportlabMeasurer(tmp_path)
    assert measure.resolve_font("Broken") == "Helvetica"


def test_reportlab_font_files_mapping(tmp_path: Path) -> None:
    measure = ReportlabMeasurer(tmp_path, font_files={"QEDavidReid": "QEDavidReid.ttf"})
    assert measure.resolve_font("QEDavidReid") == "Helvetica"


def test_reportlab_measurer_in_layout() -> None:
    from handscript.layout import wrap

    style = Style(font="Times-Roman", size=14)
    measure = ReportlabMeasurer()
    text = "Sphinx of black quartz, judge my vow. " * 12
    lines = wrap(text, style, measure)
    assert len(lines) > 1
    for line in lines:
        assert stringWidth(line, "Times-Roman", 14) <= 495
