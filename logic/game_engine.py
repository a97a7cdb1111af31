"""
Game engine for the tic-tac-toe widget.

Ties together the game state, move validation, win checking and the AI
opponent. The views (Tk window, console) only call the operations here and
redraw when a GameEvent arrives.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import GameState, GameStatus, Mark
from .move_validator import MoveValidator, as_cell_index
from .scheduler import ManualScheduler, ScheduledTask, Scheduler
from .win_checker import WinChecker

log = logging.getLogger("game_engine")


@dataclass
class GameEvent:
    """Something the view should redraw for."""
    kind: str                       # "move", "reset" or "game_over"
    index: Optional[int] = None     # Cell that changed (for "move")
    mark: Optional[Mark] = None     # Who moved / who won


GameListener = Callable[[GameEvent], None]


class GameEngine:
    """
    Human (X) vs computer (O) tic-tac-toe.

    Game flow:
    1. The human clicks a cell -> apply_move()
    2. The engine checks for a win, then for a draw
    3. If the game goes on, the opponent's reply is scheduled and human
       moves are refused until it has been played
    4. The scheduled task calls play_opponent_move()
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        config: Optional[GameConfig] = None
    ):
        self.config = config or GameConfig()
        self.scheduler = scheduler or ManualScheduler()

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Mark.OPPONENT, self.config)

        self.game_state = GameState()
        self.pending_reply: Optional[ScheduledTask] = None
        self.listeners: List[GameListener] = []

    # ==================== QUERIES ====================

    @property
    def awaiting_opponent(self) -> bool:
        """True between an accepted human move and the opponent's reply."""
        return self.pending_reply is not None and self.pending_reply.pending

    @property
    def status(self) -> GameStatus:
        return self.game_state.status

    @property
    def current_player(self) -> Mark:
        return self.game_state.current_player

    @property
    def board(self) -> List[Mark]:
        return [self.game_state.cell(i) for i in range(self.config.CELL_COUNT)]

    def check_winner(self) -> Optional[Mark]:
        """The mark holding a complete line, or None."""
        return self.win_checker.check_winner(self.game_state)

    def is_board_full(self) -> bool:
        return self.win_checker.is_board_full(self.game_state)

    def get_winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.game_state)

    def select_opponent_move(self) -> Optional[int]:
        """The cell the opponent would take now (win, block, position)."""
        return self.ai.get_best_move(self.game_state)

    def status_text(self) -> str:
        """One-line status for the view."""
        if self.status == GameStatus.WON:
            if self.game_state.winner == Mark.PLAYER:
                return "You win!"
            return "The computer wins!"
        if self.status == GameStatus.DRAW:
            return "It's a draw!"
        if self.awaiting_opponent:
            return "Computer is thinking..."
        return f"Your turn ({self.config.PLAYER_SYMBOL})"

    # ==================== OPERATIONS ====================

    def subscribe(self, listener: GameListener):
        """Register a callback for GameEvents."""
        self.listeners.append(listener)

    def apply_move(self, index: int) -> bool:
        """
        Play the human's move.

        Rejected moves (occupied cell, bad index, finished game, opponent
        reply pending) leave the state untouched and return False.

        Returns:
            True if the move was accepted.
        """
        result = self.validator.validate_move(
            self.game_state, index, Mark.PLAYER, self.awaiting_opponent
        )
        if not result.is_valid:
            log.debug("Rejected move %r: %s", index, result.error_message)
            return False

        events = self._place(as_cell_index(index))

        # Raise the guard before the view hears about the move
        if not self.game_state.is_game_over:
            self.pending_reply = self.scheduler.call_later(
                self.config.OPPONENT_DELAY_MS, self.play_opponent_move
            )

        for event in events:
            self._emit(event)
        return True

    def play_opponent_move(self) -> Optional[int]:
        """
        Play the opponent's reply. Called by the scheduled task.

        Returns:
            The cell played, or None if there was nothing to play.
        """
        self.pending_reply = None

        if self.game_state.is_game_over or self.current_player != Mark.OPPONENT:
            return None

        index = self.select_opponent_move()
        if index is None:
            return None

        for event in self._place(index):
            self._emit(event)
        return index

    def reset(self):
        """Start over: empty board, X to move, game in progress."""
        if self.pending_reply is not None:
            self.pending_reply.cancel()
            self.pending_reply = None

        self.game_state = GameState()
        log.info("Game reset")
        self._emit(GameEvent("reset"))

    # ==================== INTERNALS ====================

    def _place(self, index: int) -> List[GameEvent]:
        """Mark the cell for whoever is to move and settle the status."""
        mark = self.current_player
        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)

        log.debug("%s played cell %s", mark.symbol, index)
        events = [GameEvent("move", index=index, mark=mark)]

        if self.game_state.is_game_over:
            if self.game_state.winner is not None:
                log.info("Game over: %s wins", self.game_state.winner.symbol)
            else:
                log.info("Game over: draw")
            events.append(GameEvent("game_over", mark=self.game_state.winner))

        return events

    def _emit(self, event: GameEvent):
        for listener in list(self.listeners):
            listener(event)
