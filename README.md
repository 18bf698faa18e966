# coupgame

A small rules engine for the Coup card game. It tracks the players in a game, whose turn it is, each player's coins, and the actions each role may take. A move that breaks the rules raises `coupgame.player.GameError`, which is a subclass of `RuntimeError`.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Playing a game

Create a `coupgame.game.Game`, then create players with it. A player joins the game when it is constructed. A game holds at most six players. Nobody can join after play has started. The first action that ends a turn starts the game, and it needs at least two players.

```python
from coupgame.game import Game
from coupgame.player import GameError
from coupgame.roles import Governor, Spy, Baron, General

game = Game()
governor = Governor(game, "Moshe")
spy = Spy(game, "Yossi")
baron = Baron(game, "Meirav")
general = General(game, "Reut")

print(game.players())   # ['Moshe', 'Yossi', 'Meirav', 'Reut']
print(game.turn())      # 'Moshe'

governor.gather()       # +1 coin, and the turn passes to Yossi
try:
    governor.gather()   # it is no longer Moshe's turn
except GameError as err:
    print(err)          # Not your turn
```

A player can act only on their own turn. `player.coins`, `player.active`, `player.sanctioned` and `player.last_action` (an `ActionType`) show a player's state. `player.role()` returns the name of the player's class.

## Actions open to every player

| Action | Cost | Effect |
|---|---|---|
| `gather()` | none | Gives +1 coin. Not allowed while sanctioned. |
| `tax()` | none | Gives +2 coins. Not allowed while sanctioned. |
| `bribe()` | 4 coins | The player acts again before the turn passes. |
| `arrest(target)` | none | Takes 1 coin from the target. The target must have a coin, and the same player cannot be arrested twice in a row. |
| `sanction(target)` | 3 coins | The target cannot gather or tax until the end of its own next turn. A target that is already sanctioned cannot be sanctioned again. |
| `coup(target)` | 7 coins | Eliminates the target. The player must hold at least 10 coins. |

A player who starts a turn with 10 or more coins must coup. Any other action raises `GameError`. Calling `undo(target)` on a role that cannot undo also raises `GameError`.

## Roles

These are in `coupgame.roles`:

- **Governor**: `tax()` gives 3 coins. `undo(target)` takes 2 coins back from a player whose last action was a tax. The Governor can use it once per turn, only on its own turn, and it does not end the turn.
- **Spy**: `inspect_coins(target)` returns another player's coins. `prevent_arrest(target)` stops another player from arresting until the end of that player's next turn. The Spy can use `prevent_arrest` once per turn. Both actions are free and work only on the Spy's own turn, and neither ends the turn.
- **Baron**: `invest()` turns 3 coins into 6 and ends the turn. A sanctioned Baron receives 1 coin.
- **General** and **Merchant** have no abilities of their own and use the shared actions.

## Ending the game

`game.players()` lists the names of the players still in the game, in seating order. Once only one player is left, turns stop moving, and `game.winner()` returns that player's name. Before then it raises `GameError`.

## What this package does not do

This package is only a library. It has no command to start a game, no interactive or graphical interface, and no way to save a game. Players cannot challenge or block a coup.