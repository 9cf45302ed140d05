"""Fade to black and back, used when the player goes through a door."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

FADE_STEP = 10
FADE_MAX = 255
STEP_SECONDS = 0.001
OVERLAY_OFFSET = (900.0, 400.0)
OVERLAY_SIZE = (1920.0, 1080.0)


class _Phase(Enum):
    IDLE = auto()
    DARKENING = auto()
    BRIGHTENING = auto()


@dataclass
class Fade:
    """State of the black overlay that fades in and then out."""

    transparency: int = 0
    _phase: _Phase = field(default=_Phase.IDLE, repr=False)

    @property
    def active(self) -> bool:
        """True while a fade is in progress."""
        return self._phase is not _Phase.IDLE

    @property
    def alpha(self) -> int:
        """Overlay opacity clamped to a drawable value."""
        return min(max(self.transparency, 0), FADE_MAX)

    def start(self) -> None:
        """Begin darkening the screen."""
        self._phase = _Phase.DARKENING

    def update(self, elapsed: float) -> bool:
        """Advance the fade; return True when a step was taken and the clock restarts."""
        stepped = False
        if self._phase is _Phase.DARKENING:
            if self.transparency >= FADE_MAX:
                self._phase = _Phase.BRIGHTENING
            elif elapsed > STEP_SECONDS:
                self.transparency += FADE_STEP
                stepped = True
        if self._phase is _Phase.BRIGHTENING:
            if stepped:
                elapsed = 0.0
            if self.transparency <= 0:
                self._phase = _Phase.IDLE
            elif elapsed > STEP_SECONDS:
                self.transparency -= FADE_STEP
                stepped = True
        return stepped

    def is_opaque(self) -> bool:
        """True while the screen is fully dark."""
        return self.transparency >= FADE_MAX