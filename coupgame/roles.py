"""The roles a player can take, each bending the shared rules in its own way."""

from __future__ import annotations

from typing import TYPE_CHECKING

from coupgame.player import ActionType, GameError, Player

if TYPE_CHECKING:
    from coupgame.game import Game


class Governor(Player):
    """Collects three coins on tax and may cancel another player's tax."""

    def __init__(self, game: Game, name: str) -> None:
        self.blocked_tax = False
        super().__init__(game, name)

    def tax(self) -> None:
        """Take three coins from the bank."""
        self._require_turn()
        if self.sanctioned:
            raise GameError("Player cant use Tax while being sanctioned")
        self._require_no_forced_coup()
        self.coins += 3
        self.last_action = ActionType.TAX
        self.game.next_turn()

    def undo(self, target: Player) -> None:
        """Take back the two coins the target gained by its last tax."""
        self._require_turn()
        self._require_active(target)
        self._require_no_forced_coup()
        if self.blocked_tax:
            raise GameError("Already used undo this turn")
        if target.last_action is not ActionType.TAX:
            raise GameError("Can only undo if target just performed Tax")
        if target.coins < 2:
            raise GameError("Target doesn't have enough coins to reverse Tax")
        target.coins -= 2
        target.last_action = ActionType.BLOCK_TAX
        self.blocked_tax = True

    def end_turn(self) -> None:
        super().end_turn()
        self.blocked_tax = False


class Spy(Player):
    """May look at other players' coins and stop one of them from arresting."""

    def __init__(self, game: Game, name: str) -> None:
        self.prevented_arrest = False
        super().__init__(game, name)

    def inspect_coins(self, target: Player) -> int:
        """Coins held by the target; does not use up the turn."""
        self._require_turn()
        self._require_no_forced_coup()
        self._require_active(target)
        return target.coins

    def prevent_arrest(self, target: Player) -> None:
        """Forbid the target from arresting during its next turn."""
        self._require_turn()
        self._require_no_forced_coup()
        self._require_active(target)
        if self.prevented_arrest:
            raise GameError("Player cant Prevent arrest twice.")
        if target is self:
            raise GameError("Cannot prevent your own arrest")
        if target.cant_arrest:
            raise GameError(
                "Another player has already blocked arrest for this player this round."
            )
        target.cant_arrest = True
        self.prevented_arrest = True

    def end_turn(self) -> None:
        super().end_turn()
        self.prevented_arrest = False


class Baron(Player):
    """May invest three coins for six, and is paid a coin when sanctioned."""

    def invest(self) -> None:
        """Trade three coins for six."""
        self._require_turn()
        self._require_no_forced_coup()
        if self.coins < 3:
            raise GameError("Player cannot invest because it doesnt have 3 coins.")
        self.coins += 3
        self.last_action = ActionType.INVEST
        self.game.next_turn()

    def apply_sanction(self) -> None:
        self.sanctioned = True
        self.coins += 1


class General(Player):
    """A general; plays by the shared rules."""


class Merchant(Player):
    """A merchant; plays by the shared rules."""