"""Colour thresholds for usage percentages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Mode(str, Enum):
    """What pod usage is compared against."""

    REQUESTS = "requests"
    LIMITS = "limits"


@dataclass(frozen=True)
class ColorThresholds:
    """Red at or above red, yellow at or above yellow, green at or above cyan, else cyan."""

    red_threshold: float
    yellow_threshold: float
    cyan_threshold: float


_DEFAULTS = {
    Mode.REQUESTS: (0.0, -20.0, -90.0),
    Mode.LIMITS: (-10.0, -40.0, -80.0),
}


def validate_color_thresholds(thresholds: ColorThresholds) -> None:
    """Raise ValueError unless cyan < yellow < red."""
    t = thresholds
    if t.cyan_threshold >= t.yellow_threshold:
        raise ValueError(
            f"cyan threshold ({t.cyan_threshold:.1f}%) must be less than "
            f"yellow threshold ({t.yellow_threshold:.1f}%)"
        )
    if t.yellow_threshold >= t.red_threshold:
        raise ValueError(
            f"yellow threshold ({t.yellow_threshold:.1f}%) must be less than "
            f"red threshold ({t.red_threshold:.1f}%)"
        )


def default_thresholds(mode, red=None, yellow=None, cyan=None) -> ColorThresholds:
    """Return thresholds for ``mode``, filling any None with the mode's default."""
    given = (red, yellow, cyan)
    return ColorThresholds(
        *(float(d if v is None else v) for v, d in zip(given, _DEFAULTS[Mode(mode)]))
    )