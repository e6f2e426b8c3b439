import pygame
import pytest

from tilequest.app import TEXTURE_FILES, draw, load_textures, main
from tilequest.game import PIXEL, Direction, Game
from tilequest.mapfile import ASSET_NAMES, MapError

COLOURS = {
    "wall": (10, 20, 30),
    "background": (40, 50, 60),
    "player": (200, 0, 0),
    "collectible": (0, 200, 0),
    "exit": (0, 0, 200),
}


def _textures():
    result = {}
    for role, colour in COLOURS.items():
        surface = pygame.Surface((PIXEL, PIXEL))
        surface.fill(colour)
        result[role] = surface
    return result


def _colour(surface, x, y):
    return tuple(surface.get_at((x * PIXEL + PIXEL // 2, y * PIXEL + PIXEL // 2)))[:3]


def _game(rows):
    return Game.from_rows(rows)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _make_assets(directory):
    images = directory / "images"
    images.mkdir()
    for name in ASSET_NAMES:
        (images / name).write_text("not an image")
    return images


def test_draw_places_each_tile():
    rows = ["11111", "1PCE1", "11111"]
    game = _game(rows)
    surface = pygame.Surface((5 * PIXEL, 3 * PIXEL))
    draw(surface, game, _textures())
    assert _colour(surface, 0, 0) == COLOURS["wall"]
    assert _colour(surface, 4, 2) == COLOURS["wall"]
    assert _colour(surface, 1, 1) == COLOURS["player"]
    assert _colour(surface, 2, 1) == COLOURS["collectible"]
    assert _colour(surface, 3, 1) == COLOURS["exit"]


def test_draw_floor_uses_background():
    rows = ["11111", "1P0C1", "1E001", "11111"]
    game = _game(rows)
    surface = pygame.Surface((5 * PIXEL, 4 * PIXEL))
    draw(surface, game, _textures())
    assert _colour(surface, 2, 1) == COLOURS["background"]
    assert _colour(surface, 3, 2) == COLOURS["background"]


def test_draw_after_collecting_shows_floor(capsys):
    rows = ["111111", "1PC0E1", "111111"]
    game = _game(rows)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    surface = pygame.Surface((6 * PIXEL, 3 * PIXEL))
    draw(surface, game, _textures())
    assert _colour(surface, 2, 1) == COLOURS["background"]
    assert _colour(surface, 1, 1) == COLOURS["background"]
    assert _colour(surface, 3, 1) == COLOURS["player"]


def test_draw_player_over_exit():
    rows = ["1111", "1PE1", "1C01", "1111"]
    game = _game(rows)
    game.x, game.y = 2, 1
    surface = pygame.Surface((4 * PIXEL, 4 * PIXEL))
    draw(surface, game, _textures())
    assert _colour(surface, 2, 1) == COLOURS["player"]
    assert _colour(surface, 1, 1) == COLOURS["background"]


def test_texture_roles_cover_all_assets():
    assert sorted(TEXTURE_FILES.values()) == sorted(ASSET_NAMES)


def test_load_textures_missing_directory(tmp_path):
    with pytest.raises(MapError, match="Textures not loaded!"):
        load_textures(tmp_path / "absent")


def test_load_textures_unreadable_images(tmp_path):
    images = _make_assets(tmp_path)
    with pytest.raises(MapError, match="Textures not loaded!"):
        load_textures(images)


def test_main_without_arguments(workdir, capsys):
    assert main([]) == 1
    assert "Accessibility Error" in capsys.readouterr().err


def test_main_with_too_many_arguments(workdir, capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert "Accessibility Error" in capsys.readouterr().err


def test_main_missing_assets(workdir, capsys):
    (workdir / "level.ber").write_text("111\n")
    assert main(["level.ber"]) == 1
    assert "Missing XPM File" in capsys.readouterr().err


def test_main_missing_map(workdir, capsys):
    _make_assets(workdir)
    assert main(["nowhere.ber"]) == 1
    assert "Wrong File Path" in capsys.readouterr().err


def test_main_wrong_extension(workdir, capsys):
    _make_assets(workdir)
    (workdir / "level.txt").write_text("11111\n1PCE1\n11111\n")
    assert main(["level.txt"]) == 1
    assert "Wrong File Extension" in capsys.readouterr().err


def test_main_invalid_map(workdir, capsys):
    _make_assets(workdir)
    (workdir / "level.ber").write_text("11111\n1PXE1\n11111\n")
    assert main(["level.ber"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error\n")
    assert "Invalid Map" in err


def test_main_unreachable_map(workdir, capsys):
    _make_assets(workdir)
    (workdir / "level.ber").write_text("111111\n1P1CE1\n111111\n")
    assert main(["level.ber"]) == 1
    assert "Map is not accessible" in capsys.readouterr().err


def test_main_empty_map(workdir, capsys):
    _make_assets(workdir)
    (workdir / "level.ber").write_text("")
    assert main(["level.ber"]) == 1
    assert "NULL Map" in capsys.readouterr().err