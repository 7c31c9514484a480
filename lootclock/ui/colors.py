"""Theme colors and color utilities for the UI."""

from typing import Optional


class AppColors:
    """Dark timer theme with light panels for the other tabs."""

    TIMER_BG = "#000000"
    TIMER_TEXT = "#FFFFFF"
    # finished fill when no reward is selected
    FINISHED_DEFAULT = "#34C759"

    PANEL_BG = "#F5F7FA"
    PRIMARY = "#007AFF"
    PRIMARY_DARK = "#0051A8"

    XP_TRACK = "#8E8E93"
    XP_FILL = "#007AFF"

    TEXT_PRIMARY = "#1C1C1E"
    TEXT_MUTED = "#6E6E73"

    TILE_BORDER = "rgba(0, 0, 0, 0.12)"


def _parse_hex(value: str) -> Optional[tuple[int, int, int]]:
    value = value.strip()
    if not (value.startswith("#") and len(value) == 7):
        return None
    try:
        return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)
    except ValueError:
        return None


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b. Bad input returns ``a``."""
    first, second = _parse_hex(a), _parse_hex(b)
    if first is None or second is None:
        return a
    t = max(0.0, min(1.0, float(t)))
    r, g, bl = (int(x + (y - x) * t) for x, y in zip(first, second))
    return f"#{r:02X}{g:02X}{bl:02X}"


def text_color_for(background: str) -> str:
    """Black or white, whichever reads better on ``background``."""
    rgb = _parse_hex(background)
    if rgb is None:
        return AppColors.TIMER_TEXT
    r, g, b = rgb
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return "#000000" if luminance > 160 else "#FFFFFF"
