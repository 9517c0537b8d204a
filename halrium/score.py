"""Scores of both sides, with a rolling display counter and HUD layout."""

from __future__ import annotations

import enum

from .geometry import Rect

NUM_PLACE = 5
MAX_SCORE = 10**NUM_PLACE - 1

_SCROLL_STEP = 1
_BASE_WIDTH = 1280.0
_BASE_HEIGHT = 720.0
_POS_Y = 25.0
_PLAYER_POS_X = 20.0
_RIGHT_MARGIN = 20.0


class Side(enum.Enum):
    """Who won the round; NONE until the scores are compared."""

    PLAYER = "player"
    ENEMY = "enemy"
    NONE = "none"


def digits(value: int, places: int) -> list[int]:
    """Decimal digits of ``value``, most significant first, truncated to ``places``."""
    return [(value % 10 ** (places - i)) // 10 ** (places - i - 1) for i in range(places)]


def _clamp(value: int) -> int:
    return max(0, min(value, MAX_SCORE))


def _scroll_towards(shown: int, target: int) -> int:
    gap = abs(shown - target)
    step = _SCROLL_STEP
    if gap > 200:
        step = _SCROLL_STEP + 4
    # Checked after the larger gap, so any gap above 50 ends up at this step.
    if gap > 50:
        step = _SCROLL_STEP + 1
    if shown < target:
        return min(shown + step, target)
    if shown > target:
        return max(shown - step, target)
    return shown


class ScoreBoard:
    """Scores of the player and the enemy, and the counters shown on screen."""

    def __init__(self):
        self.enemy = 0
        self.player = 0
        self.enemy_shown = 0
        self.player_shown = 0
        self.winner = Side.NONE
        self.enemy_digits = [0] * NUM_PLACE
        self.player_digits = [0] * NUM_PLACE

    def change_enemy(self, value: int) -> None:
        """Add ``value`` to the enemy score, clamped to the displayable range."""
        self.enemy = _clamp(self.enemy + value)

    def change_player(self, value: int) -> None:
        """Add ``value`` to the player score, clamped to the displayable range."""
        self.player = _clamp(self.player + value)

    def scroll(self) -> None:
        """Move both shown counters one step towards the real scores."""
        self.enemy_shown = _scroll_towards(self.enemy_shown, self.enemy)
        self.player_shown = _scroll_towards(self.player_shown, self.player)

    def update(self) -> tuple[list[int], list[int]]:
        """Advance one frame and return the enemy and player digits to draw."""
        self.scroll()
        self.enemy_digits = digits(self.enemy_shown, NUM_PLACE)
        self.player_digits = digits(self.player_shown, NUM_PLACE)
        return self.enemy_digits, self.player_digits

    def compare(self) -> Side:
        """Decide the winner; a tie goes to the player."""
        self.winner = Side.PLAYER if self.player >= self.enemy else Side.ENEMY
        return self.winner


def score_layout(screen_width: float, screen_height: float) -> dict[str, object]:
    """Rectangles of the digits and frames of both score panels."""
    size_x = 72.2 * 0.55 * (screen_width / _BASE_WIDTH)
    size_y = 76.0 * 0.55 * (screen_height / _BASE_HEIGHT)
    enemy_x = screen_width - size_x * NUM_PLACE - _RIGHT_MARGIN

    def digit_rects(origin_x: float) -> list[Rect]:
        return [
            Rect(origin_x + i * size_x, _POS_Y, origin_x + i * size_x + size_x, _POS_Y + size_y)
            for i in range(NUM_PLACE)
        ]

    enemy_frame = Rect(
        enemy_x - 30,
        _POS_Y - 25,
        enemy_x + size_x * NUM_PLACE + 30,
        _POS_Y + size_y + 15,
    )
    # The player frame width is derived from the digit height, as the HUD art expects.
    player_frame = Rect(
        _PLAYER_POS_X - 30,
        _POS_Y - 25,
        _PLAYER_POS_X + size_y * NUM_PLACE + 30,
        _POS_Y + size_y + 15,
    )
    return {
        "enemy_digits": digit_rects(enemy_x),
        "enemy_frame": enemy_frame,
        "player_digits": digit_rects(_PLAYER_POS_X),
        "player_frame": player_frame,
    }