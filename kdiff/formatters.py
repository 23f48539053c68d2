"""Text formatting of memory sizes and usage percentages."""

from __future__ import annotations

from termcolor import colored

from kdiff.thresholds import ColorThresholds

_UNIT = 1024
_PREFIXES = "KMGTPE"


def format_memory(num_bytes: int) -> str:
    """Format a byte count with binary prefixes, e.g. ``1.5Ki``."""
    if num_bytes == 0:
        return "0"
    if num_bytes < _UNIT:
        return f"{num_bytes} B"
    div, exp = _UNIT, 0
    n = num_bytes // _UNIT
    while n >= _UNIT and exp < len(_PREFIXES) - 1:
        div *= _UNIT
        exp += 1
        n //= _UNIT
    return f"{num_bytes / div:.1f}{_PREFIXES[exp]}i"


def format_percentage(p: float, has_comparison: bool, thresholds: ColorThresholds) -> str:
    """Format a percentage difference, coloured by where it falls among the thresholds.

    Without a request or limit to compare against the result is a magenta ``inf%``.
    """
    if not has_comparison:
        return colored("inf%", "magenta")
    if p >= thresholds.red_threshold:
        colour = "red"
    elif p >= thresholds.yellow_threshold:
        colour = "yellow"
    elif p >= thresholds.cyan_threshold:
        colour = "green"
    else:
        colour = "cyan"
    return colored(f"{p:.2f}%", colour)