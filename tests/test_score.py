import pytest

from halrium.score import MAX_SCORE, ScoreBoard, Side, digits, score_layout


def test_digits_most_significant_first():
    assert digits(12345, 5) == [1, 2, 3, 4, 5]


def test_digits_pads_with_zeros():
    assert digits(42, 5) == [0, 0, 0, 4, 2]


def test_digits_truncates_high_places():
    assert digits(987654, 5) == [8, 7, 6, 5, 4]


def test_new_board_is_empty():
    board = ScoreBoard()
    assert (board.enemy, board.player) == (0, 0)
    assert board.winner is Side.NONE


def test_scores_clamp_at_zero():
    board = ScoreBoard()
    board.change_player(-10)
    board.change_enemy(-1)
    assert board.player == 0
    assert board.enemy == 0


def test_scores_clamp_at_maximum():
    board = ScoreBoard()
    board.change_player(99999)
    board.change_player(500)
    board.change_enemy(100000)
    assert board.player == MAX_SCORE == 99999
    assert board.enemy == MAX_SCORE


def test_scores_accumulate():
    board = ScoreBoard()
    board.change_player(30)
    board.change_player(12)
    board.change_enemy(7)
    assert board.player == 42
    assert board.enemy == 7


def test_small_gap_scrolls_one_per_frame():
    board = ScoreBoard()
    board.change_player(10)
    board.scroll()
    assert board.player_shown == 1


def test_scroll_never_overshoots_and_converges():
    board = ScoreBoard()
    board.change_player(300)
    board.change_enemy(57)
    previous = board.player_shown
    for _ in range(1000):
        board.scroll()
        assert previous <= board.player_shown <= board.player
        assert 0 <= board.enemy_shown <= board.enemy
        previous = board.player_shown
    assert board.player_shown == board.player
    assert board.enemy_shown == board.enemy


def test_scroll_downwards_after_loss():
    board = ScoreBoard()
    board.change_enemy(80)
    for _ in range(200):
        board.scroll()
    board.change_enemy(-80)
    board.scroll()
    assert 0 < board.enemy_shown < 80
    for _ in range(200):
        board.scroll()
    assert board.enemy_shown == 0


def test_update_returns_digits_of_shown_counters():
    board = ScoreBoard()
    board.change_player(3)
    board.change_enemy(1)
    for _ in range(10):
        enemy_digits, player_digits = board.update()
    assert player_digits == digits(board.player_shown, 5)
    assert enemy_digits == digits(board.enemy_shown, 5)
    assert player_digits == [0, 0, 0, 0, 3]
    assert board.enemy_digits == enemy_digits


@pytest.mark.parametrize(
    "player, enemy, expected",
    [(10, 5, Side.PLAYER), (5, 10, Side.ENEMY), (7, 7, Side.PLAYER)],
)
def test_compare(player, enemy, expected):
    board = ScoreBoard()
    board.change_player(player)
    board.change_enemy(enemy)
    assert board.compare() is expected
    assert board.winner is expected


def test_layout_enemy_panel_is_right_aligned():
    layout = score_layout(1280, 720)
    rects = layout["enemy_digits"]
    assert len(rects) == 5
    assert rects[-1].right + 20 == pytest.approx(1280)
    for left, right in zip(rects, rects[1:]):
        assert left.right == pytest.approx(right.left)


def test_layout_player_panel_starts_at_margin():
    layout = score_layout(1280, 720)
    rects = layout["player_digits"]
    assert rects[0].left == pytest.approx(20.0)
    assert all(r.top == pytest.approx(25.0) for r in rects)
    assert all(r.width == pytest.approx(rects[0].width) for r in rects)


def test_layout_frames_surround_digits():
    layout = score_layout(1920, 1080)
    for side in ("enemy", "player"):
        frame = layout[f"{side}_frame"]
        rects = layout[f"{side}_digits"]
        assert frame.top == pytest.approx(0.0)
        assert frame.left < rects[0].left
        assert frame.bottom > rects[0].bottom


def test_layout_scales_with_screen():
    small = score_layout(1280, 720)["player_digits"][0]
    big = score_layout(2560, 1440)["player_digits"][0]
    assert big.width == pytest.approx(small.width * 2)
    assert big.height == pytest.approx(small.height * 2)