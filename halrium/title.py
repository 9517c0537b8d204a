"""The title screen: logo fade-in, blinking start prompt and the one/two player cursor."""

from __future__ import annotations

import enum

LOGO_FADE_STEP = 0.005
APPEAR_START_FRAMES = 60
BLINK_PERIOD = 80
BLINK_VISIBLE = 60
MODE_CHOICES = 2


class PlayMode(enum.IntEnum):
    """How many people play the round."""

    SINGLE = 0
    DOUBLE = 1


class TitleScreen:
    """State of the title screen, advanced once per frame."""

    def __init__(self):
        self.play_mode = PlayMode.SINGLE
        self.mode_select_shown = False
        self.cursor = 0
        self.appear_count = 0
        self.logo_alpha = 0.0
        self.blink_count = 0
        self.start_visible = False

    def _skip_intro(self) -> None:
        self.logo_alpha = 1.0
        self.appear_count = APPEAR_START_FRAMES

    def update(
        self,
        start_pressed: bool,
        up_pressed: bool = False,
        down_pressed: bool = False,
        fade_idle: bool = True,
    ) -> bool:
        """Advance one frame; return True when the player asks to start the game."""
        if self.logo_alpha < 1.0:
            self.logo_alpha = min(1.0, self.logo_alpha + LOGO_FADE_STEP)
        else:
            self.appear_count += 1
            if self.appear_count > APPEAR_START_FRAMES:
                self.blink_count = (self.blink_count + 1) % BLINK_PERIOD
                self.start_visible = self.blink_count <= BLINK_VISIBLE

        start_requested = False
        if start_pressed:
            if self.appear_count == 0:
                self._skip_intro()
            else:
                start_requested = True

        if self.mode_select_shown and fade_idle:
            if up_pressed:
                self.cursor = (self.cursor - 1) % MODE_CHOICES
            elif down_pressed:
                self.cursor = (self.cursor + 1) % MODE_CHOICES

        return start_requested