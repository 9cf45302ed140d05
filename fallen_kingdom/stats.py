"""Text lines of the player statistics page."""

from __future__ import annotations

STAT_X = 1180.0
STAT_FONT_SIZE = 48
STAT_OUTLINE = 4.0
STATS_BACKGROUND = "assets/img/bg.png"

# label, player attribute, vertical position
_ROWS = (
    ("ATTACK", "attack", 247.0),
    ("ARMOR", "armor", 354.0),
    ("SPEED", "speed", 461.0),
    ("LEVEL", "level", 568.0),
    ("EXPERIENCE", "experience", 675.0),
    ("LIFE", "energy", 782.0),
)


def stat_texts(player) -> list[tuple[str, tuple[float, float]]]:
    """Each statistic as its display text and position, top to bottom."""
    return [
        (f"{label}:  {getattr(player, attribute)}", (STAT_X, y))
        for label, attribute, y in _ROWS
    ]