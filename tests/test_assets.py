import pygame
import pytest

from fallen_kingdom.assets import FONT_ZELDA, MENU_MUSIC, Assets


@pytest.fixture
def root(tmp_path):
    img_dir = tmp_path / "assets" / "img"
    img_dir.mkdir(parents=True)
    pygame.image.save(pygame.Surface((4, 3)), str(img_dir / "tile.bmp"))
    sounds = tmp_path / "assets" / "sounds"
    sounds.mkdir()
    (sounds / "music.ogg").write_bytes(b"not really audio")
    return tmp_path


def test_image_loads_with_its_size(root):
    assets = Assets(root)
    assert assets.image("assets/img/tile.bmp").get_size() == (4, 3)


def test_image_is_cached(root):
    assets = Assets(root)
    first = assets.image("assets/img/tile.bmp")
    assert assets.image("assets/img/tile.bmp") is first


def test_missing_image_raises(root):
    with pytest.raises(FileNotFoundError):
        Assets(root).image("assets/img/ground.png")


def test_default_font_is_cached_per_size(root):
    assets = Assets(root)
    small = assets.font(None, 20)
    assert assets.font(None, 20) is small
    assert assets.font(None, 40) is not small
    assert assets.font(None, 40).size("A")[1] > small.size("A")[1]


def test_missing_font_raises(root):
    with pytest.raises(FileNotFoundError):
        Assets(root).font(FONT_ZELDA, 48)


def test_font_size_must_be_positive(root):
    with pytest.raises(ValueError):
        Assets(root).font(None, 0)


def test_music_path_resolves_under_root(root):
    assert Assets(root).music_path(MENU_MUSIC) == root / "assets" / "sounds" / "music.ogg"


def test_missing_music_path_raises(root):
    with pytest.raises(FileNotFoundError):
        Assets(root).music_path("assets/sounds/village.ogg")


def test_play_missing_music_returns_false(root):
    assert Assets(root).play_music("assets/sounds/village.ogg") is False