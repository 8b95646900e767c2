import re

from sealcut.config import DEFAULT_RGB, PRESET_COLORS

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """
    Parse a ``#rrggbb`` color.

    Short (``#f00``), 8-digit and named colors are not supported; anything
    that does not parse yields the default seal red (217, 0, 0).

    Args:
        value: Hex color string, case-insensitive

    Returns:
        (r, g, b) tuple
    """
    if not isinstance(value, str):
        return DEFAULT_RGB
    match = _HEX_RE.match(value.strip())
    if not match:
        return DEFAULT_RGB
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(rgb) -> str:
    return "#{:02x}{:02x}{:02x}".format(*(int(c) for c in rgb[:3]))


def preset_color(name: str) -> str | None:
    """Look up a named palette color (e.g. ``trust-navy``)."""
    return PRESET_COLORS.get(name.strip().lower().replace(" ", "-").replace("_", "-"))


def resolve_color(value: str) -> str:
    """Accept either a palette name or a hex string."""
    return preset_color(value) or value
