"""Non-player characters that idle in place and speak when approached."""

from __future__ import annotations

from dataclasses import dataclass

from .core import Rect

BOT_FRAME = 32
BOT_STRIP_END = 128
BOT_SCALE = 3.0
TALK_MARGIN = 20.0
TALK_GROWTH = 80.0
MESSAGE_OFFSET = 100.0
MESSAGE_SCALE = 0.5


@dataclass
class Bot:
    """A character standing at ``position`` and cycling through its idle frames."""

    position: tuple[float, float]
    duration: float
    image: str = ""
    message_image: str = ""
    elapsed: float = 0.0
    frame_left: int = 0
    talking: bool = False

    @property
    def bounds(self) -> Rect:
        """Area covered by the scaled sprite."""
        size = BOT_FRAME * BOT_SCALE
        return Rect(self.position[0], self.position[1], size, size)

    @property
    def message_position(self) -> tuple[float, float]:
        """Where the speech bubble is drawn."""
        return (self.position[0], self.position[1] - MESSAGE_OFFSET)

    @property
    def texture_rect(self) -> tuple[int, int, int, int]:
        """Area of the sprite sheet currently shown."""
        return (self.frame_left, 0, BOT_FRAME, BOT_FRAME)

    def talk_area(self) -> Rect:
        """Area in which the player makes the bot speak."""
        return self.bounds.grown(TALK_MARGIN, TALK_MARGIN, TALK_GROWTH, TALK_GROWTH)

    def update(self, seconds: float, player_position: tuple[float, float]) -> bool:
        """Advance by ``seconds``; return True when the message is to be shown."""
        self.talking = self.talk_area().contains(*player_position)
        if not self.talking:
            self._animate(seconds)
        return self.talking

    def _animate(self, seconds: float) -> None:
        self.elapsed += seconds
        if self.elapsed >= self.duration:
            self.elapsed = 0.0
            if self.frame_left + BOT_FRAME >= BOT_STRIP_END:
                self.frame_left = 0
            else:
                self.frame_left += BOT_FRAME