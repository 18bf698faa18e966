"""Turn order and bookkeeping of a Coup game."""

from __future__ import annotations

from typing import TYPE_CHECKING

from coupgame.player import GameError

if TYPE_CHECKING:
    from coupgame.player import Player

MAX_PLAYERS = 6


class Game:
    """Holds the players, whose turn it is and who was last arrested."""

    def __init__(self) -> None:
        self._players: list[Player] = []
        self.last_arrested: Player | None = None
        self._current = 0
        self._started = False
        self._active_count = 0

    @property
    def has_started(self) -> bool:
        return self._started

    @property
    def active_count(self) -> int:
        return self._active_count

    def add_player(self, player: Player) -> None:
        """Register a player; only allowed before the first turn ends."""
        if self._started:
            raise GameError("Cant add a player after game has started")
        if len(self._players) >= MAX_PLAYERS:
            raise GameError("Maximum 6 players allowed")
        if any(existing is player for existing in self._players):
            raise GameError("Player already added")
        self._players.append(player)
        player.active = True
        self._active_count += 1

    def eliminate_player(self, player: Player) -> None:
        player.eliminate()
        self._active_count -= 1

    def players(self) -> list[str]:
        """Names of the players still in the game, in seating order."""
        return [p.name for p in self._players if p.active]

    def turn(self) -> str:
        """Name of the player whose turn it is."""
        if not self._players:
            raise GameError("No players in game")
        current = self._players[self._current]
        if not current.active:
            raise GameError("Current player is not active")
        return current.name

    def next_turn(self) -> None:
        """Pass the turn to the next active player."""
        if not self._started:
            if self._active_count < 2:
                raise GameError("Need at least two players to start the game")
            self._started = True
        elif self._active_count == 1:
            return

        if not self._players:
            raise GameError("No players in game")

        current = self._players[self._current]
        if current.extra_turn:
            current.extra_turn = False
            return

        count = len(self._players)
        for step in range(1, count + 1):
            candidate = (self._current + step) % count
            if self._players[candidate].active:
                self._current = candidate
                break

        current.end_turn()

        upcoming = self._players[self._current]
        upcoming.must_coup = upcoming.coins >= 10

    def winner(self) -> str:
        """Name of the last remaining player."""
        if self._active_count != 1:
            raise GameError("There is not a Winner yet.")
        for p in self._players:
            if p.active:
                return p.name
        raise GameError("Internal error: active_players out of sync")