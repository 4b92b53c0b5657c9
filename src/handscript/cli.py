"""Typer-based command line interface for the layout engine.

``handscript layout`` reads a plain text file, wraps and paginates it with a
style preset and writes either the full layout (``.json``, including jittered
character placements) or the wrapped lines (``.txt``).  ``handscript styles``
and ``handscript fonts`` list the configured presets and font catalogue.

Exit codes
----------
0 success
3 I/O error (missing reader/writer, filesystem issues)
4 configuration error (invalid YAML, unknown style preset)
5 layout error (unexpected exception while laying out)
"""

from __future__ import annotations

import os
import random
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer

from .config import ConfigModel, load_config
from .fonts import font_files, font_path
from .io import get_extension, read_file, supported_output_extensions, write_file
from .layout import ReportlabMeasurer, build_layout, estimate_width
from .layout.measure import Measurer
from .utils.errors import UnknownStyleError, UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="handscript",
    help="Hand-drawn text layout. Use 'handscript layout' to lay out a text file.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load_config_or_exit(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except Exception as exc:  # noqa: BLE001 - yaml, pydantic and OS errors alike
        _safe_exit(4, str(exc).splitlines()[0])


def _build_measurer(cfg: ConfigModel, *, font_dir: Path | None, estimate: bool) -> Measurer:
    if estimate:
        return estimate_width
    return ReportlabMeasurer(
        font_dir if font_dir is not None else cfg.fonts.dir,
        fallback_font=cfg.measurement.fallback_font,
        font_files=font_files(cfg.fonts.catalogue),
    )


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the handscript command group."""
    pass


@app.command()
def layout(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input text file (.txt)"
    ),
    out_path: Path = typer.Option(  # noqa: B008
        ..., "--out", help="Output file (.json for placements, .txt for wrapped lines)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    style_name: Optional[str] = typer.Option(  # noqa: B008
        None, "--style", help="Style preset name (see 'handscript styles')"
    ),
    font_dir: Optional[Path] = typer.Option(  # noqa: B008
        None, "--font-dir", help="Directory holding TrueType font files"
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed the jitter for reproducible placements"
    ),
    page: Optional[int] = typer.Option(  # noqa: B008
        None, "--page", min=1, help="Only lay out this page (1-based)"
    ),
    placements: bool = typer.Option(  # noqa: B008
        True,
        "--placements/--no-placements",
        help="Include per-character placements in JSON output",
    ),
    estimate: bool = typer.Option(  # noqa: B008
        False, "--estimate", help="Measure with the average glyph width heuristic"
    ),
    encoding_in: str = typer.Option("utf-8-sig", help="Input file encoding"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Lay out ``in_path`` and write the result to ``out_path``."""

    configure_logging(verbose)

    cfg = _load_config_or_exit(config_path)
    try:
        style = cfg.style(style_name)
    except UnknownStyleError as exc:
        known = ", ".join(sorted(cfg.styles))
        _safe_exit(4, f"Unknown style '{exc.args[0]}' (known: {known})")
    if verbose:
        typer.echo(f"Loaded config; style {style.font} {style.size:g}pt", err=True)

    if get_extension(out_path) not in supported_output_extensions():
        _safe_exit(3, f"Unsupported output extension: '{get_extension(out_path)}'")

    try:
        text = read_file(in_path, encoding=encoding_in)
    except (FileNotFoundError, UnsupportedFormatError, UnicodeDecodeError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Read {len(text)} chars", err=True)

    measure = _build_measurer(cfg, font_dir=font_dir, estimate=estimate)
    rng = random.Random(seed) if seed is not None else None

    try:
        with Timing() as t_layout:
            result = build_layout(
                text,
                style,
                measure,
                geometry=cfg.geometry(),
                rng=rng,
                jitter=cfg.jitter_settings(),
                include_placements=placements,
                page_number=page,
            )
    except Exception as exc:  # pragma: no cover - unexpected
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)
    if verbose:
        typer.echo(
            f"Laid out {result.line_count} lines on {len(result.pages)} pages "
            f"in {t_layout.ms:.1f} ms",
            err=True,
        )

    try:
        write_file(out_path, result)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Wrote {out_path}", err=True)


@app.command()
def styles(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """List the configured style presets."""

    cfg = _load_config_or_exit(config_path)
    for name, preset in sorted(cfg.styles.items()):
        marker = " (default)" if name == cfg.default_style else ""
        typer.echo(
            f"{name}{marker}: {preset.font} {preset.size:g}pt slant {preset.slant:g} "
            f"line {preset.line_spacing:g} word {preset.word_spacing:g} {preset.ink_color}"
        )


@app.command()
def fonts(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    font_dir: Optional[Path] = typer.Option(  # noqa: B008
        None, "--font-dir", help="Directory holding TrueType font files"
    ),
) -> None:
    """List the font catalogue and whether each file is present."""

    cfg = _load_config_or_exit(config_path)
    directory = font_dir if font_dir is not None else cfg.fonts.dir
    for info in cfg.fonts.catalogue:
        status = ""
        if directory is not None:
            status = " [found]" if font_path(info, directory).is_file() else " [missing]"
        typer.echo(f"{info.name}: {info.display_name} ({info.file_name}){status}")
