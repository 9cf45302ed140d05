from fallen_kingdom.transition import Fade


def test_idle_fade_does_nothing():
    fade = Fade()
    assert fade.update(1.0) is False
    assert fade.transparency == 0
    assert fade.active is False
    assert fade.is_opaque() is False


def test_first_step_darkens_by_ten():
    fade = Fade()
    fade.start()
    assert fade.update(0.01) is True
    assert fade.transparency == 10
    assert fade.active is True


def test_too_little_time_takes_no_step():
    fade = Fade()
    fade.start()
    assert fade.update(0.0005) is False
    assert fade.transparency == 0


def test_full_cycle_reaches_opaque_and_returns():
    fade = Fade()
    fade.start()
    saw_opaque = False
    for _ in range(200):
        fade.update(0.01)
        saw_opaque = saw_opaque or fade.is_opaque()
        if not fade.active:
            break
    assert saw_opaque
    assert fade.active is False
    assert fade.transparency == 0


def test_alpha_stays_drawable():
    fade = Fade()
    fade.start()
    alphas = []
    for _ in range(200):
        fade.update(0.01)
        alphas.append(fade.alpha)
        if not fade.active:
            break
    assert min(alphas) >= 0
    assert max(alphas) == 255


def test_transparency_rises_then_falls():
    fade = Fade()
    fade.start()
    values = []
    for _ in range(200):
        fade.update(0.01)
        values.append(fade.transparency)
        if not fade.active:
            break
    peak = values.index(max(values))
    rising = values[: peak + 1]
    falling = values[peak:]
    assert rising == sorted(rising)
    assert falling == sorted(falling, reverse=True)