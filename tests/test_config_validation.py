"""Tests for configuration overrides and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from handscript.config import load_config
from handscript.config.schema import deep_merge_dicts
from handscript.utils.errors import UnknownStyleError


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "cfg.yml"
    path.write_text(body, encoding="utf-8")
    return path


def test_override_is_deep_merged(tmp_path: Path) -> None:
    path = _write(tmp_path, "default_style: blue\njitter:\n  max_offset: 2.0\n")
    cfg = load_config(path, env={})
    assert cfg.default_style == "blue"
    assert cfg.jitter.max_offset == 2.0
    assert cfg.jitter.max_rotation == 0.5
    assert cfg.style().ink_color == "#1b3fd6"


def test_new_style_preset(tmp_path: Path) -> None:
    body = (
        "styles:\n"
        "  red:\n"
        "    font: Helvetica\n"
        "    size: 16\n"
        "    line_spacing: 1.2\n"
        "    word_spacing: 1.0\n"
        "    ink_color: '#cc0000'\n"
    )
    cfg = load_config(_write(tmp_path, body), env={})
    assert cfg.style("red").font == "Helvetica"
    assert cfg.style("red").slant == 0.0
    assert "black" in cfg.styles


def test_empty_override_file(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path, ""), env={})
    assert cfg.default_style == "black"


@pytest.mark.parametrize(
    "body",
    [
        "unknown: true\n",
        "default_style: purple\n",
        "page:\n  margin_left: 400\n  margin_right: 400\n",
        "page:\n  margin_top: 800\n",
        "jitter:\n  max_rotation: -1\n",
        "styles:\n  black:\n    size: 0\n",
        "styles:\n  black:\n    ink_color: black\n",
        "schema_version: 0\n",
        "page:\n  height: .inf\n",
        "page:\n  margin_left: .nan\n",
        "jitter:\n  max_offset: .inf\n",
        "styles:\n  black:\n    slant: .nan\n",
    ],
)
def test_invalid_config_rejected(tmp_path: Path, body: str) -> None:
    with pytest.raises(ValidationError):
        load_config(_write(tmp_path, body), env={})


def test_unknown_style_name() -> None:
    cfg = load_config(env={})
    with pytest.raises(UnknownStyleError):
        cfg.style("purple")


def test_font_dir_from_environment() -> None:
    cfg = load_config(env={"HANDSCRIPT_FONT_DIR": "/opt/fonts"})
    assert cfg.fonts.dir == "/opt/fonts"


def test_font_dir_env_empty_is_ignored() -> None:
    cfg = load_config(env={"HANDSCRIPT_FONT_DIR": ""})
    assert cfg.fonts.dir is None


def test_deep_merge_dicts() -> None:
    a = {"x": {"y": 1, "z": 2}, "k": 1}
    b = {"x": {"z": 3}, "n": 4}
    assert deep_merge_dicts(a, b) == {"x": {"y": 1, "z": 3}, "k": 1, "n": 4}
    assert a == {"x": {"y": 1, "z": 2}, "k": 1}
