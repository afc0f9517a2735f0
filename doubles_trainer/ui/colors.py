"""Theme colors and color utilities for the UI."""

from __future__ import annotations

from typing import Optional


class TrainerColors:
    """Light theme palette."""

    BG_TOP = "#e8f5e9"
    BG_BOTTOM = "#c8e6c9"

    PRIMARY = "#2e7d32"
    PRIMARY_LIGHT = "#60ad5e"
    PRIMARY_DARK = "#005005"

    HIT = "#43a047"
    MISS = "#e53935"
    EMPTY = "#9e9e9e"

    CARD_BG = "rgba(255, 255, 255, 0.85)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"

    TEXT_PRIMARY = "#1b2e1c"
    TEXT_SECONDARY = "#4a6572"
    TEXT_MUTED = "#78909c"

    TABLE_HEADER = "#e6e6e6"


# Hit-rate gradient anchors. Adjacent segments share an anchor so the
# mapping is continuous at 5% and 10%.
RATE_UNDEFINED = "#CCCCCC"
RATE_RED_LOW = "#960000"
RATE_RED_HIGH = "#FF7800"
RATE_ORANGE_HIGH = "#AAC800"
RATE_GREEN_HIGH = "#00A000"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"


def hit_rate_color(rate: Optional[float]) -> str:
    """Map a hit-rate percentage to a display color.

    Red below 5%, orange from 5% to 10%, green from 10% up. ``None`` (no
    attempts) and negative values map to neutral gray.
    """
    if rate is None or rate < 0:
        return RATE_UNDEFINED
    if rate >= 10:
        return blend_hex(RATE_ORANGE_HIGH, RATE_GREEN_HIGH, (rate - 10) / 90)
    if rate >= 5:
        return blend_hex(RATE_RED_HIGH, RATE_ORANGE_HIGH, (rate - 5) / 5)
    return blend_hex(RATE_RED_LOW, RATE_RED_HIGH, rate / 5)
