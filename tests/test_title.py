import pytest

from halrium.title import (
    APPEAR_START_FRAMES,
    LOGO_FADE_STEP,
    PlayMode,
    TitleScreen,
)


def test_initial_state():
    title = TitleScreen()
    assert title.play_mode is PlayMode.SINGLE
    assert title.cursor == 0
    assert title.logo_alpha == 0.0
    assert title.start_visible is False


def test_logo_fades_in_by_step():
    title = TitleScreen()
    assert title.update(False) is False
    assert title.logo_alpha == pytest.approx(LOGO_FADE_STEP)
    assert title.appear_count == 0


def test_logo_alpha_clamped_at_one():
    title = TitleScreen()
    for _ in range(300):
        title.update(False)
        assert title.logo_alpha <= 1.0
    assert title.logo_alpha == 1.0


def test_first_start_press_skips_intro():
    title = TitleScreen()
    assert title.update(True) is False
    assert title.logo_alpha == 1.0
    assert title.appear_count == APPEAR_START_FRAMES


def test_second_start_press_requests_game():
    title = TitleScreen()
    title.update(True)
    assert title.update(True) is True


def test_start_prompt_blinks_after_intro():
    title = TitleScreen()
    title.update(True)
    title.update(False)
    assert title.start_visible is True
    visible = 0
    for _ in range(80):
        title.update(False)
        visible += title.start_visible
    assert visible == 61


def test_cursor_ignored_without_mode_select():
    title = TitleScreen()
    title.update(False, up_pressed=True)
    assert title.cursor == 0


def test_cursor_wraps_up_and_down():
    title = TitleScreen()
    title.mode_select_shown = True
    title.update(False, up_pressed=True)
    assert title.cursor == 1
    title.update(False, down_pressed=True)
    assert title.cursor == 0
    title.update(False, down_pressed=True)
    assert title.cursor == 1


def test_up_wins_over_down():
    title = TitleScreen()
    title.mode_select_shown = True
    title.update(False, up_pressed=True, down_pressed=True)
    assert title.cursor == 1


def test_cursor_frozen_while_fading():
    title = TitleScreen()
    title.mode_select_shown = True
    title.update(False, up_pressed=True, fade_idle=False)
    assert title.cursor == 0


def test_cursor_stays_in_range():
    title = TitleScreen()
    title.mode_select_shown = True
    for step in range(10):
        title.update(False, up_pressed=step % 3 == 0, down_pressed=step % 2 == 0)
        assert title.cursor in (PlayMode.SINGLE, PlayMode.DOUBLE)