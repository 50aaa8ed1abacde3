"""Command-line entry point that opens the game window."""

from __future__ import annotations

import sys
from pathlib import Path

from solong.controls import Game, GameOver, Key
from solong.game_map import MapLoadError, load_map
from solong.render import (
    WINDOW_SIZE,
    WINDOW_TITLE,
    AssetError,
    Renderer,
    load_images,
    pygame,
)

ASSET_DIR = Path("assets")


def _error(message: str) -> None:
    sys.stderr.write(message + "\n")


def _keycode(event) -> int:
    if event.key == pygame.K_ESCAPE:
        return int(Key.ESCAPE)
    return event.key


def _run(game: Game, renderer: Renderer) -> None:
    renderer.draw(game.map)
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return
        if event.type == pygame.KEYDOWN and game.handle_key(_keycode(event)):
            renderer.draw(game.map)
            pygame.display.flip()


def main(argv=None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        _error("Usage: solong <map.ber>")
        return 1
    try:
        game = Game(load_map(args[0]))
    except MapLoadError:
        _error("Failed to load map.")
        return 1
    try:
        images = load_images(ASSET_DIR)
    except AssetError as exc:
        _error("Failed to initialize game.")
        for name in exc.missing:
            _error(f"Missing {name}.xpm")
        return 1
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE)
        except pygame.error:
            _error("Failed to initialize game.")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            _run(game, Renderer(screen, images))
        except GameOver:
            pass
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())