"""The windowed game: loading tile images, drawing the map and the main loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from tilequest.game import KEY_ESC, PIXEL, COLLECTIBLE, EXIT, WALL, Game, Outcome  # noqa: E402
from tilequest.mapfile import MapError, check_arguments  # noqa: E402
from tilequest.validate import load_map  # noqa: E402

DEFAULT_IMAGE_DIR = "images"
WINDOW_TITLE = "tilequest"
FRAME_RATE = 60

TEXTURE_FILES = {
    "player": "player.xpm",
    "collectible": "collectibe.xpm",
    "exit": "exit.xpm",
    "wall": "wall.xpm",
    "background": "background.xpm",
}


def load_textures(image_dir: str | os.PathLike[str]) -> dict[str, pygame.Surface]:
    """Load every tile image from ``image_dir``, keyed by tile role."""
    base = Path(image_dir)
    textures: dict[str, pygame.Surface] = {}
    for role, name in TEXTURE_FILES.items():
        try:
            image = pygame.image.load(os.fspath(base / name))
        except (pygame.error, OSError, ValueError) as exc:
            raise MapError("Textures not loaded!") from exc
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        textures[role] = image
    return textures


def draw(
    surface: pygame.Surface, game: Game, textures: Mapping[str, pygame.Surface]
) -> None:
    """Draw the whole map, then the player on top of it."""
    for y, row in enumerate(game.rows):
        for x, tile in enumerate(row):
            position = (x * PIXEL, y * PIXEL)
            base = textures["wall"] if tile == WALL else textures["background"]
            surface.blit(base, position)
            if tile == EXIT:
                surface.blit(textures["exit"], position)
            elif tile == COLLECTIBLE:
                surface.blit(textures["collectible"], position)
    surface.blit(textures["player"], (game.x * PIXEL, game.y * PIXEL))


def _key_code(key: int) -> int:
    # Escape is reported by the windowing layer under its own code.
    return KEY_ESC if key == pygame.K_ESCAPE else key


def run(game: Game, image_dir: str | os.PathLike[str] = DEFAULT_IMAGE_DIR) -> Outcome:
    """Open a window and play until the player wins, quits or closes it."""
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((game.width * PIXEL, game.height * PIXEL))
        except pygame.error as exc:
            raise MapError("Mlx not initialize") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        textures = load_textures(image_dir)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.finished = True
                    return Outcome.CLOSED
                if event.type == pygame.KEYDOWN:
                    outcome = game.press(_key_code(event.key))
                    if outcome.ends_game:
                        return outcome
            draw(screen, game, textures)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Check the arguments, load the map and play it; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    image_dir = DEFAULT_IMAGE_DIR
    try:
        path = check_arguments(args, image_dir)
    except MapError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    try:
        info = load_map(path)
        game = Game(info.rows, info.player, info.collectibles)
        outcome = run(game, image_dir)
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    sys.stdout.write(outcome.message)
    sys.stdout.flush()
    # Every way of leaving the game ends with status 1.
    return 1