"""Color theme presets for static maze images.

Themes are frozen dataclasses that group all image styling constants, so
``render_maze_image`` can swap palettes via ``--theme`` or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of image style tokens."""

    wall_color: str = "#263238"
    floor_color: str = "#F5F5F5"
    pending_color: str = "#B0BEC5"
    solution_color: str = "#E53935"
    # Indexed by agent color (0-7), mirroring the terminal palette.
    agent_colors: tuple[str, ...] = (
        "#9E9E9E",
        "#F44336",
        "#4CAF50",
        "#FFC107",
        "#2196F3",
        "#9C27B0",
        "#00BCD4",
        "#FFFFFF",
    )
    background_color: str = "#FFFFFF"


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    wall_color="#000000",
    floor_color="#FFFFFF",
    pending_color="#DDDDDD",
    solution_color="#d62728",
    agent_colors=(
        "#7f7f7f",
        "#d62728",
        "#2ca02c",
        "#bcbd22",
        "#1f77b4",
        "#9467bd",
        "#17becf",
        "#333333",
    ),
)

DARK_THEME = Theme(
    wall_color="#CFD8DC",
    floor_color="#1A1A1A",
    pending_color="#333333",
    solution_color="#FF7043",
    background_color="#0D0D0D",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Return the registered theme called ``name``, ignoring case."""
    theme = REGISTERED_THEMES.get(name.lower())
    if theme is None:
        choices = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r} (choose from: {choices})")
    return theme
