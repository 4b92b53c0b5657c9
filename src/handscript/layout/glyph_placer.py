"""Per-character placement with hand-drawn jitter.

:func:`place` walks a line left to right with a horizontal cursor.  Every
character records the cursor position, then the cursor advances by the
character's measured width (spaces are widened by ``style.word_spacing``).
Jitter offsets and rotation are drawn per character from a random source and
are presentation-only: they never move the cursor.

Randomness must be supplied by the caller through any object with a
``random() -> float`` method returning values in ``[0, 1)``, such as
:class:`random.Random`.  Without one, each call creates its own OS-seeded
generator, so repeated calls on the same line give different jitter.
"""

from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Protocol, runtime_checkable

from .measure import Measurer, measure_with_fallback
from .style import Style


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniform floats in ``[0, 1)``."""

    def random(self) -> float:
        ...


@dataclass(slots=True, frozen=True)
class JitterSettings:
    """Amplitudes of the per-character perturbation.

    Offsets are drawn uniformly from ``[-max_offset, max_offset]`` layout
    units and rotation from ``[-max_rotation, max_rotation]`` degrees.
    """

    max_offset: float = 1.0
    max_rotation: float = 0.5


DEFAULT_JITTER = JitterSettings()


@dataclass(slots=True, frozen=True)
class CharacterPlacement:
    """Where and how to draw a single character.

    ``x``/``y`` are the un-jittered cursor position; renderers draw at
    ``(x + offset_x, y + offset_y)`` rotated by ``rotation`` degrees.
    """

    char: str
    x: float
    y: float
    rotation: float
    offset_x: float
    offset_y: float

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def _symmetric(rng: RandomSource, amplitude: float) -> float:
    return (rng.random() - 0.5) * 2 * amplitude


def place(
    line: str,
    start_x: float,
    start_y: float,
    style: Style,
    measure: Measurer,
    *,
    rng: RandomSource | None = None,
    jitter: JitterSettings = DEFAULT_JITTER,
) -> list[CharacterPlacement]:
    """Return one :class:`CharacterPlacement` per character of ``line``.

    Parameters
    ----------
    line:
        Text of a single wrapped line.
    start_x, start_y:
        Position of the first character; ``y`` is constant along the line.
    style:
        Style handed to ``measure``; ``word_spacing`` widens spaces.
    measure:
        Width measurer, called once per character.  Faults fall back to
        ``style.size * 0.6``.
    rng:
        Random source for jitter.  Draws happen in the order ``offset_x``,
        ``offset_y``, ``rotation`` for each character.
    jitter:
        Jitter amplitudes.
    """

    if rng is None:
        rng = random.Random()

    placements: list[CharacterPlacement] = []
    cursor = start_x
    for char in line:
        offset_x = _symmetric(rng, jitter.max_offset)
        offset_y = _symmetric(rng, jitter.max_offset)
        rotation = _symmetric(rng, jitter.max_rotation)

        width = measure_with_fallback(measure, char, style)
        advance = width * style.word_spacing if char == " " else width

        placements.append(
            CharacterPlacement(
                char=char,
                x=cursor,
                y=start_y,
                rotation=rotation,
                offset_x=offset_x,
                offset_y=offset_y,
            )
        )
        cursor += advance
    return placements


__all__ = [
    "CharacterPlacement",
    "DEFAULT_JITTER",
    "JitterSettings",
    "RandomSource",
    "place",
]
