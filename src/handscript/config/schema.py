"""Typed configuration schema and loader for the handscript package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, constr, model_validator

from handscript.fonts import FontInfo
from handscript.layout.geometry import PageGeometry
from handscript.layout.glyph_placer import JitterSettings
from handscript.layout.style import Style
from handscript.utils.errors import UnknownStyleError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PageSettings(BaseModel):
    """Page size and margins in layout units."""

    width: confloat(gt=0.0, allow_inf_nan=False)
    height: confloat(gt=0.0, allow_inf_nan=False)
    margin_left: confloat(ge=0.0, allow_inf_nan=False)
    margin_right: confloat(ge=0.0, allow_inf_nan=False)
    margin_top: confloat(ge=0.0, allow_inf_nan=False)
    margin_bottom: confloat(ge=0.0, allow_inf_nan=False)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_usable_area(self) -> "PageSettings":
        if self.width - self.margin_left - self.margin_right <= 0:
            raise ValueError("margins leave no usable width")
        if self.height - self.margin_top - self.margin_bottom <= 0:
            raise ValueError("margins leave no usable height")
        return self


class MeasurementSettings(BaseModel):
    """Glyph measurement settings."""

    fallback_font: str

    model_config = ConfigDict(extra="forbid")


class JitterConfig(BaseModel):
    """Amplitudes of the per-character hand-drawn perturbation."""

    max_offset: confloat(ge=0.0, allow_inf_nan=False)
    max_rotation: confloat(ge=0.0, allow_inf_nan=False)

    model_config = ConfigDict(extra="forbid")


class StylePreset(BaseModel):
    """A named handwriting style."""

    font: str
    size: confloat(gt=0.0, allow_inf_nan=False)
    slant: confloat(allow_inf_nan=False) = 0.0
    line_spacing: confloat(gt=0.0, allow_inf_nan=False)
    word_spacing: confloat(gt=0.0, allow_inf_nan=False)
    ink_color: constr(pattern=r"^#[0-9a-fA-F]{6}$")

    model_config = ConfigDict(extra="forbid")


class FontSettings(BaseModel):
    """Location of font files and the font catalogue."""

    dir_env: str
    dir: str | None = None
    catalogue: list[FontInfo]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    page: PageSettings
    measurement: MeasurementSettings
    jitter: JitterConfig
    default_style: str
    styles: dict[str, StylePreset]
    fonts: FontSettings

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_default_style(self) -> "ConfigModel":
        if self.default_style not in self.styles:
            raise ValueError(f"default_style '{self.default_style}' is not a defined style")
        return self

    def style(self, name: str | None = None) -> Style:
        """Return the preset ``name`` (or the default preset) as a :class:`Style`.

        Raises
        ------
        UnknownStyleError
            If ``name`` is not a configured preset.
        """

        key = self.default_style if name is None else name
        preset = self.styles.get(key)
        if preset is None:
            raise UnknownStyleError(key)
        return Style(**preset.model_dump())

    def geometry(self) -> PageGeometry:
        """Return the configured page geometry."""

        return PageGeometry(**self.page.model_dump())

    def jitter_settings(self) -> JitterSettings:
        """Return the configured jitter amplitudes."""

        return JitterSettings(**self.jitter.model_dump())


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``fonts.dir_env`` for the font directory.
    """

    with (
        importlib_resources.files("handscript.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    dir_env = cfg.fonts.dir_env
    if environ.get(dir_env):
        cfg.fonts.dir = environ[dir_env]

    return cfg


__all__ = [
    "ConfigModel",
    "PageSettings",
    "MeasurementSettings",
    "JitterConfig",
    "StylePreset",
    "FontSettings",
    "deep_merge_dicts",
    "load_config",
]
