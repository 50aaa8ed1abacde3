"""Player movement and key handling."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

from solong.game_map import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    GameMap,
    MapLoadError,
)


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESCAPE = 65307
    W = 119
    S = 115
    A = 97
    D = 100


_DIRECTIONS = {
    Key.W: (0, -1),
    Key.S: (0, 1),
    Key.A: (-1, 0),
    Key.D: (1, 0),
}


class GameOver(Exception):
    """Raised when the game ends, either won or abandoned."""

    def __init__(self, won: bool, moves: int) -> None:
        self.won = won
        self.moves = moves
        outcome = "won" if won else "quit"
        super().__init__(f"game {outcome} after {moves} moves")


class Game:
    """A running game: the map, the player's position and the move count."""

    def __init__(self, game_map: GameMap, out: TextIO | None = None) -> None:
        position = game_map.find_player()
        if position is None:
            raise MapLoadError("map has no player start")
        self.map = game_map
        self.player_x, self.player_y = position
        self.move_count = 0
        self._out = out

    def _say(self, text: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        stream.write(text + "\n")
        stream.flush()

    def move(self, dx: int, dy: int) -> bool:
        """Step the player by (dx, dy); return whether the player moved.

        Reaching the exit with no collectibles left raises GameOver.
        """
        new_x = self.player_x + dx
        new_y = self.player_y + dy
        try:
            tile = self.map.tile_at(new_x, new_y)
        except IndexError:
            return False
        if tile == WALL:
            return False
        if tile == EXIT:
            if self.map.has_collectibles():
                return False
            self.move_count += 1
            self._say(f"You win in {self.move_count} moves!")
            raise GameOver(won=True, moves=self.move_count)
        if tile == COLLECTIBLE:
            self.map.set_tile(new_x, new_y, FLOOR)
        self.map.set_tile(self.player_x, self.player_y, FLOOR)
        self.map.set_tile(new_x, new_y, PLAYER)
        self.player_x, self.player_y = new_x, new_y
        self.move_count += 1
        self._say(f"Move: {self.move_count}")
        return True

    def handle_key(self, keycode: int) -> bool:
        """React to a key; return whether the player moved.

        Escape raises GameOver; keys without a binding are ignored.
        """
        if keycode == Key.ESCAPE:
            raise GameOver(won=False, moves=self.move_count)
        try:
            direction = _DIRECTIONS[Key(keycode)]
        except (ValueError, KeyError):
            return False
        return self.move(*direction)