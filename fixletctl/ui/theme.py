"""
fixletctl visual design system.

All colors and styles as named constants.
Import from here — never hardcode markup strings in other modules.
"""

from rich.style import Style
from rich.theme import Theme


# ── Color palette ─────────────────────────────────────────────────────────────
# 24-bit hex, readable on both dark and light backgrounds.

COLOR_CRITICAL = "#E05252"      # Warm severity red
COLOR_HIGH     = "#D4870A"      # Amber
COLOR_MEDIUM   = "#5BA3C9"      # Slate blue
COLOR_LOW      = "#4DBD74"      # Calm sage-green
COLOR_BRAND    = "#7B9FD4"      # Periwinkle blue
COLOR_DIM      = "#787878"      # Medium gray


# ── Rich styles ───────────────────────────────────────────────────────────────

STYLE_CRITICAL = Style(color=COLOR_CRITICAL, bold=True)
STYLE_HIGH     = Style(color=COLOR_HIGH,     bold=True)
STYLE_MEDIUM   = Style(color=COLOR_MEDIUM)
STYLE_LOW      = Style(color=COLOR_LOW)


# ── Criticality ───────────────────────────────────────────────────────────────
# Keys are lowercase; unknown values render unstyled.

CRITICALITY_STYLES: dict[str, Style] = {
    "critical": STYLE_CRITICAL,
    "high": STYLE_HIGH,
    "medium": STYLE_MEDIUM,
    "low": STYLE_LOW,
}


def criticality_style(criticality: str) -> Style | str:
    """Return the style for a criticality value, or "" when it is unknown."""
    return CRITICALITY_STYLES.get(criticality.strip().lower(), "")


# ── Rich Theme ────────────────────────────────────────────────────────────────

FIXLETCTL_THEME = Theme(
    {
        "dim": COLOR_DIM,
    }
)
