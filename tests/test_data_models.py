import pytest

from flappy.data_models import Bird, Box, GameState, PipePair, Snapshot


def test_box_intersection():
    bird = Box(0, 0, 34, 24)
    assert bird.intersects(Box(20, 10, 64, 512))
    assert not bird.intersects(Box(100, 0, 64, 512))


def test_touching_boxes_do_not_intersect():
    box = Box(0, 0, 10, 10)
    assert not box.intersects(Box(10, 0, 10, 10))
    assert not box.intersects(Box(0, 10, 10, 10))
    assert box.intersects(Box(9, 9, 10, 10))


def test_box_rejects_empty_size():
    with pytest.raises(ValueError):
        Box(0, 0, 0, 10)
    with pytest.raises(ValueError):
        Box(0, 0, 10, -1)


def test_box_edges():
    box = Box(5, 7, 10, 20)
    assert (box.right, box.bottom) == (15, 27)
    assert box.rect.size == (10, 20)


def test_gravity_accumulates_closed_form():
    bird = Bird(Box(45, 320, 34, 24))
    for n in range(1, 21):
        bird.advance(1)
        assert bird.velocity == n
        assert bird.y == 320 + n * (n + 1) // 2


def test_bird_clamped_at_top():
    bird = Bird(Box(45, 5, 34, 24))
    bird.jump(-9)
    bird.advance(1)
    assert bird.y == 0
    assert bird.velocity == -8
    for _ in range(5):
        bird.advance(1)
        assert bird.y >= 0


def test_jump_ignores_previous_velocity():
    bird = Bird(Box(45, 320, 34, 24), velocity=25)
    bird.jump(-9)
    assert bird.velocity == -9
    bird.jump(-9)
    assert bird.velocity == -9


def make_pair(x=360, y=-256):
    return PipePair(Box(x, y, 64, 512), Box(x, y + 512 + 160, 64, 512))


def test_pair_moves_both_pipes():
    pair = make_pair()
    pair.advance(-4)
    assert pair.top.x == pair.bottom.x == 356
    assert pair.x == 356
    assert pair.top.y == -256


def test_pair_offscreen_only_past_left_edge():
    pair = make_pair(x=-64)
    assert not pair.is_offscreen()
    pair.advance(-1)
    assert pair.is_offscreen()


def test_pass_flag():
    pair = make_pair()
    assert not pair.is_passed()
    pair.mark_passed()
    assert pair.is_passed()


def test_snapshot_truncates_score():
    snapshot = Snapshot(bird=Box(0, 0, 34, 24), raw_score=1.5, state=GameState.GAME_OVER)
    assert snapshot.score == 1
    assert snapshot.game_over
