"""Players of a Coup game and the actions every role shares."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from coupgame.game import Game


class GameError(RuntimeError):
    """Raised when an action breaks the rules of the game."""


class ActionType(Enum):
    """The kinds of action a player can take."""

    NONE = auto()
    GATHER = auto()
    TAX = auto()
    BRIBE = auto()
    ARREST = auto()
    SANCTION = auto()
    COUP = auto()
    INVEST = auto()
    BLOCK_TAX = auto()
    BLOCK_ARREST = auto()


class Player:
    """A participant in a game; joins the game on creation."""

    def __init__(self, game: Game, name: str) -> None:
        self.game = game
        self.name = name
        self.coins = 0
        self.active = True
        self.extra_turn = False
        self.sanctioned = False
        self.must_coup = False
        self.cant_arrest = False
        self.last_action = ActionType.NONE
        game.add_player(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, coins={self.coins})"

    def role(self) -> str:
        """Name of the player's role."""
        return type(self).__name__

    def _require_turn(self) -> None:
        if self.game.turn() != self.name:
            raise GameError("Not your turn")

    def _require_no_forced_coup(self) -> None:
        if self.must_coup:
            raise GameError("Player must perform coup when holding 10 or more coins")

    @staticmethod
    def _require_active(target: Player) -> None:
        if not target.active:
            raise GameError("Target is not active")

    def gather(self) -> None:
        """Take one coin from the bank."""
        self._require_turn()
        if self.sanctioned:
            raise GameError("Player cant use Gather while being sanctioned")
        self._require_no_forced_coup()
        self.coins += 1
        self.last_action = ActionType.GATHER
        self.game.next_turn()

    def tax(self) -> None:
        """Take two coins from the bank."""
        self._require_turn()
        if self.sanctioned:
            raise GameError("Player cant use Tax while being sanctioned")
        self._require_no_forced_coup()
        self.coins += 2
        self.last_action = ActionType.TAX
        self.game.next_turn()

    def bribe(self) -> None:
        """Pay four coins for an extra action this turn."""
        self._require_turn()
        self._require_no_forced_coup()
        if self.coins < 4:
            raise GameError("Not enough coins to bribe")
        self.coins -= 4
        self.last_action = ActionType.BRIBE
        self.extra_turn = True

    def arrest(self, target: Player) -> None:
        """Take one coin from another player."""
        self._require_turn()
        self._require_no_forced_coup()
        if self.cant_arrest:
            raise GameError("Spy has prevented you from using Arrest")
        self._require_active(target)
        if self.game.last_arrested is target:
            raise GameError("Cannot arrest the same player twice in a row")
        if target.coins == 0:
            raise GameError("Cannot arrest a Player With 0 coins.")
        target.coins -= 1
        self.coins += 1
        self.game.last_arrested = target
        self.last_action = ActionType.ARREST
        self.game.next_turn()

    def sanction(self, target: Player) -> None:
        """Pay three coins to block the target's economic actions."""
        self._require_turn()
        self._require_no_forced_coup()
        self._require_active(target)
        if self.coins < 3:
            raise GameError("Not enough coins to sanction")
        if target.sanctioned:
            raise GameError("Target already under Sanction")
        self.coins -= 3
        target.apply_sanction()
        self.last_action = ActionType.SANCTION
        self.game.next_turn()

    def coup(self, target: Player) -> None:
        """Pay seven coins to eliminate the target; needs at least ten coins."""
        self._require_turn()
        self._require_active(target)
        if self.coins < 10:
            raise GameError("Not enough coins to Coup")
        self.coins -= 7
        self.game.eliminate_player(target)
        self.last_action = ActionType.COUP
        self.game.next_turn()

    def undo(self, target: Player) -> None:
        """Reverse the target's last action; only some roles may."""
        raise GameError("This role cannot undo actions")

    def apply_sanction(self) -> None:
        self.sanctioned = True

    def remove_sanction(self) -> None:
        self.sanctioned = False

    def eliminate(self) -> None:
        """Mark the player as out of the game."""
        self.active = False

    def end_turn(self) -> None:
        """Clear the restrictions that last until the end of this player's turn."""
        self.remove_sanction()
        self.cant_arrest = False