"""
engine.py
Implements KnockOutGame, which owns the die and the roster, runs the turn loop, records events
and notifies an optional observer.
Related modules:
- config.py: GameConfig is validated and used to build the roster.
- state.py: GameState and TurnResult hold all progress.
- dice.py / random_source.py: Every random value comes from the injected source.
- rules.py: Knockout and winning checks.
- observers/base.py: GameObserver receives start, turn and end notifications.
"""

from typing import Dict, List, Optional

from .config import GameConfig
from .dice import Die, roll_n
from .errors import GameStateError, RandomSourceFailure
from .player import Player
from .random_source import OneThroughTen, RandomSource
from .rules import DIE_SIDES, ROLLS_PER_TURN, count_active, has_won, is_knockout
from .state import (
    END_ALL_KNOCKED_OUT,
    END_SCORE,
    FINISHED,
    NOT_STARTED,
    RUNNING,
    GameState,
    TurnResult,
)


class KnockOutGame:
    """
    State machine for a game of Knock Out!: NOT_STARTED -> RUNNING -> FINISHED.
    Each turn the current active player throws both dice. Rolling their knockout number
    eliminates them; otherwise the sum is added to their score. The game ends as soon as a
    score reaches the winning score or no player is left standing.
    The game can be driven one player-turn at a time with start()/step(), or run to
    completion with play().
    """
    def __init__(self, config: Optional[GameConfig] = None, source: Optional[RandomSource] = None, observer=None):
        """
        Initialize a new game.
        Args:
            config (GameConfig|None): Game configuration; defaults to GameConfig().
            source (RandomSource|None): Source for knockout numbers and dice. Defaults to a
                OneThroughTen seeded with config.rng_seed.
            observer (GameObserver|None): Optional observer; the game is silent without one.
        Raises:
            InvalidConfigurationError: If the configuration is invalid.
            RandomSourceFailure: If the source fails while drawing knockout numbers.
        """
        self.config = config if config is not None else GameConfig()
        self.config.validate()
        self.source = source if source is not None else OneThroughTen(seed=self.config.rng_seed)
        self.die = Die(sides=DIE_SIDES, source=self.source)
        self.players = tuple(Player.create(i, self.source) for i in range(1, self.config.num_players + 1))
        self.observer = observer
        self.state = GameState()
        self._events = []
        # one JSON-friendly snapshot per turn, plus one at game start
        self.turn_log = []

    def _emit(self, event: Dict):
        self._events.append(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all events emitted so far (does not clear).
        """
        return list(self._events)

    def _snapshot(self, turn: Optional[TurnResult] = None):
        """
        Internal: Append a snapshot of the roster and progress to turn_log.
        Args:
            turn (TurnResult|None): Turn that produced this state; None for the opening snapshot.
        Returns:
            dict: The snapshot.
        """
        snap = {
            "round_index": self.state.round_index,
            "turn_index": self.state.turn_index,
            "status": self.state.status,
            "turn": None if turn is None else {
                "player_id": turn.player_id,
                "faces": list(turn.faces),
                "roll": turn.roll,
                "knocked_out": turn.knocked_out,
            },
            "players": [
                {
                    "player_id": p.player_id,
                    "knockout_number": p.knockout_number,
                    "score": p.score,
                    "eliminated": p.eliminated,
                }
                for p in self.players
            ],
        }
        self.turn_log.append(snap)
        return snap

    def active_players(self) -> List[Player]:
        return [p for p in self.players if p.active]

    def player(self, player_id: int) -> Player:
        """
        Look up a player by id.
        Raises:
            KeyError: If no player has that id.
        """
        for p in self.players:
            if p.player_id == player_id:
                return p
        raise KeyError(player_id)

    @property
    def turn_player(self) -> Optional[Player]:
        """The player taking the current turn (or the last one taken), None before the first turn."""
        if self.state.current_player is None:
            return None
        return self.player(self.state.current_player)

    @property
    def winner(self) -> Optional[Player]:
        if self.state.winner is None:
            return None
        return self.player(self.state.winner)

    def is_terminal(self) -> bool:
        return self.state.status == FINISHED

    def start(self) -> None:
        """
        Move the game from NOT_STARTED to RUNNING and notify the observer.
        Raises:
            GameStateError: If the game has already been started.
        """
        if self.state.status != NOT_STARTED:
            raise GameStateError(f"game cannot be started from state {self.state.status}")
        self.state.status = RUNNING
        self.state.round_index = 1
        self.state.cursor = 0
        self._emit({"type": "GameStarted", "players": len(self.players), "die_sides": self.die.sides})
        self._snapshot()
        if self.observer is not None:
            self.observer.on_game_start(self)

    def _next_active_player(self) -> Optional[Player]:
        """
        Internal: Advance the cursor to the next active player in roster order, wrapping
        into a new round at the end of the roster.
        Returns:
            Player|None: The player whose turn it is, or None if nobody is active.
        """
        n = len(self.players)
        for _ in range(n + 1):
            if self.state.cursor >= n:
                self.state.cursor = 0
                self.state.round_index += 1
            candidate = self.players[self.state.cursor]
            if candidate.active:
                return candidate
            self.state.cursor += 1
        return None

    def step(self) -> Optional[TurnResult]:
        """
        Play a single player-turn.
        Returns:
            TurnResult|None: The turn taken, or None if no active player was left (the game
            is finished in that case).
        Raises:
            GameStateError: If the game is not running or was aborted.
            RandomSourceFailure: If the source fails; the game is aborted and stays RUNNING.
        """
        if self.state.aborted:
            raise GameStateError("game was aborted by a random source failure")
        if self.state.status != RUNNING:
            raise GameStateError(f"game cannot step from state {self.state.status}")

        player = self._next_active_player()
        if player is None:
            # only reachable when the roster was edited from outside the engine
            self._finish(END_ALL_KNOCKED_OUT)
            return None

        try:
            faces = roll_n(ROLLS_PER_TURN, self.die)
        except RandomSourceFailure as e:
            self.state.aborted = True
            self._emit({"type": "GameAborted", "player": player.player_id, "error": str(e)})
            raise
        roll = sum(faces)
        self.state.turn_index += 1
        self.state.current_player = player.player_id
        # observer sees the roll before it is resolved
        if self.observer is not None:
            self.observer.on_turn(self, roll)

        end_reason = None
        knocked_out = is_knockout(roll, player.knockout_number)
        if knocked_out:
            player.eliminated = True
            if count_active(self.players) == 0:
                end_reason = END_ALL_KNOCKED_OUT
        elif count_active(self.players) == 0:
            # active count is checked before the roll is credited
            end_reason = END_ALL_KNOCKED_OUT
        else:
            player.score += roll
            if has_won(player.score):
                end_reason = END_SCORE

        turn = TurnResult(
            round_index=self.state.round_index,
            turn_index=self.state.turn_index,
            player_id=player.player_id,
            faces=tuple(faces),
            roll=roll,
            knocked_out=knocked_out,
            score=player.score,
            game_over=end_reason is not None,
        )
        self.state.last_turn = turn
        self._emit({"type": "TurnTaken", "round": turn.round_index, "turn": turn.turn_index,
                    "player": player.player_id, "faces": list(faces), "roll": roll, "score": player.score})
        if knocked_out:
            self._emit({"type": "PlayerKnockedOut", "player": player.player_id,
                        "knockout_number": player.knockout_number, "score": player.score})
        self._snapshot(turn)

        if end_reason is not None:
            self._finish(end_reason, winner=player.player_id if end_reason == END_SCORE else None)
        else:
            self.state.cursor += 1
        return turn

    def _finish(self, end_reason: str, winner: Optional[int] = None) -> None:
        self.state.status = FINISHED
        self.state.end_reason = end_reason
        self.state.winner = winner
        self._emit({"type": "GameEnded", "reason": end_reason, "winner": winner,
                    "turns": self.state.turn_index, "rounds": self.state.round_index,
                    "remaining": count_active(self.players)})
        if self.observer is not None:
            self.observer.on_game_end(self)

    def play(self) -> GameState:
        """
        Run the whole game: start, then take turns until it finishes.
        Returns:
            GameState: The final state.
        Raises:
            GameStateError: If the game was already started.
            RandomSourceFailure: Propagated from the source; the game is left aborted.
        """
        self.start()
        while not self.is_terminal():
            self.step()
        return self.state
