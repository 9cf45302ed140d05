import pytest

from fallen_kingdom.bots import Bot


def make_bot():
    return Bot(position=(1495.0, 1580.0), duration=0.2)


def test_talk_area_contains_bot_position():
    bot = make_bot()
    assert bot.talk_area().contains(*bot.position)


def test_talk_area_extends_margin_above_and_left():
    bot = make_bot()
    x, y = bot.position
    area = bot.talk_area()
    assert area.contains(x - 20.0, y - 20.0)
    assert not area.contains(x - 21.0, y)
    assert not area.contains(x, y - 21.0)


def test_talk_area_is_larger_than_bounds():
    bot = make_bot()
    area = bot.talk_area()
    assert area.width > bot.bounds.width
    assert area.height > bot.bounds.height


def test_message_position_above_bot():
    bot = make_bot()
    assert bot.message_position == (1495.0, 1480.0)


def test_update_far_player_accumulates_time():
    bot = make_bot()
    talking = bot.update(0.1, (0.0, 0.0))
    assert talking is False
    assert bot.frame_left == 0
    assert bot.elapsed == pytest.approx(0.1)


def test_update_advances_frame_after_duration():
    bot = make_bot()
    bot.update(0.2, (0.0, 0.0))
    assert bot.frame_left == 32
    assert bot.elapsed == 0.0


def test_frames_cycle_back_to_start():
    bot = make_bot()
    seen = []
    for _ in range(4):
        bot.update(0.5, (0.0, 0.0))
        seen.append(bot.frame_left)
    assert seen[-1] == 0
    assert max(seen) < 128
    assert len(set(seen)) == 4


def test_near_player_shows_message_and_freezes_animation():
    bot = make_bot()
    talking = bot.update(1.0, bot.position)
    assert talking is True
    assert bot.talking is True
    assert bot.frame_left == 0
    assert bot.elapsed == 0.0


def test_texture_rect_follows_frame():
    bot = make_bot()
    bot.update(0.2, (0.0, 0.0))
    assert bot.texture_rect[0] == bot.frame_left