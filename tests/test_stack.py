import pytest

from halrium.seiza import Constellation, Zodiac
from halrium.stack import STACK_MAX, StackBar


def _constellations():
    return [Constellation(Zodiac(i), 1, 0) for i in range(12)]


def test_new_bar_has_inactive_slots():
    bar = StackBar(1280.0, 720.0)
    assert len(bar.slots) == STACK_MAX
    assert all(not s.active and s.tex_num == 0 for s in bar.slots)


def test_slots_are_contiguous_squares_on_bottom_edge():
    bar = StackBar(1280.0, 720.0)
    for i in range(STACK_MAX):
        rect = bar.slot_rect(i)
        assert rect.width == pytest.approx(rect.height)
        assert rect.bottom == pytest.approx(720.0)
        if i + 1 < STACK_MAX:
            assert rect.right == pytest.approx(bar.slot_rect(i + 1).left)
    assert bar.slot_rect(0).left == 0.0
    assert bar.slot_rect(STACK_MAX - 1).right == pytest.approx(1280.0)


def test_slot_rect_out_of_range():
    bar = StackBar(1280.0, 720.0)
    with pytest.raises(IndexError):
        bar.slot_rect(STACK_MAX)
    with pytest.raises(IndexError):
        bar.slot_rect(-1)


def test_update_marks_completed_constellations_by_owner():
    bar = StackBar(1280.0, 720.0)
    cs = _constellations()
    cs[2].is_connected = True
    cs[2].belong = Zodiac.PLAYER_ONE
    cs[5].is_connected = True
    cs[5].belong = Zodiac.PLAYER_TWO
    bar.update(cs)
    assert bar.slots[2].active and bar.slots[2].tex_num == 0
    assert bar.slots[5].active and bar.slots[5].tex_num == 1
    assert [i for i, s in enumerate(bar.slots) if s.active] == [2, 5]


def test_slot_stays_active_once_set():
    bar = StackBar(1280.0, 720.0)
    cs = _constellations()
    cs[0].is_connected = True
    cs[0].belong = Zodiac.PLAYER_TWO
    bar.update(cs)
    cs[0].is_connected = False
    bar.update(cs)
    assert bar.slots[0].active
    assert bar.slots[0].tex_num == 1


def test_completed_without_owner_keeps_colour():
    bar = StackBar(1280.0, 720.0)
    cs = _constellations()
    cs[3].is_connected = True
    bar.update(cs)
    assert bar.slots[3].active
    assert bar.slots[3].tex_num == 0