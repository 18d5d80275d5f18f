from __future__ import annotations

import colorsys
import re
from typing import Callable, Iterable, List, Tuple

HEX_LETTERS = "0123456789ABCDEF"
COLOR_SPACE = 0x1000000

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and bool(_HEX_COLOR.match(value))


def random_color(uniform: Callable[[], float]) -> str:
    """Six random hex digits, one uniform draw per digit."""
    digits = [HEX_LETTERS[min(int(uniform() * 16), 15)] for _ in range(6)]
    return "#" + "".join(digits)


def build_palette(count: int, *, exclude: Iterable[str] = ()) -> List[str]:
    """``count`` distinct hex colors spread over the hue circle.

    Neighbouring hues round to the same RGB value once ``count`` grows past a
    few hundred; a taken color is walked forward through the RGB cube to the
    next free value, so the result never repeats or hits ``exclude``.
    """
    taken = {hex_to_int(color) for color in exclude}
    if count > COLOR_SPACE - len(taken):
        raise ValueError(f"Cannot build {count} distinct colors")
    colors = []
    for i in range(count):
        hue = (i / max(count, 1)) % 1.0
        r, g, b = colorsys.hsv_to_rgb(hue, 0.65, 0.9)
        value = (int(r * 255) << 16) | (int(g * 255) << 8) | int(b * 255)
        while value in taken:
            value = (value + 1) % COLOR_SPACE
        taken.add(value)
        colors.append("#{:06X}".format(value))
    return colors


def hex_to_int(color: str) -> int:
    return int(color.lstrip("#"), 16)


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    color = color.lstrip("#")
    return tuple(int(color[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb)
