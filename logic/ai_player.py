"""
AI player for the tic-tac-toe widget.
Picks a move with a fixed priority: win, block, then position.
"""

import logging
from typing import Optional

from .config import GameConfig
from .game_state import GameState, Mark
from .win_checker import WinChecker

log = logging.getLogger("ai_player")


class AIPlayer:
    """
    A rule-based tic-tac-toe opponent.

    Each tier looks at every empty cell (lowest index first) before
    falling through to the next one:
    1. Win now - complete a line of our own
    2. Block - fill the cell that would complete the human's line
    3. Position - center, then corners, then sides

    The choice depends only on the board, so the same position always
    gets the same answer.
    """

    def __init__(self, player: Mark = Mark.OPPONENT, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI controls (default: OPPONENT)
            config: Game configuration. Uses defaults if not provided.
        """
        self.player = player
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            Cell index of the chosen move, or None if no cell is empty.
        """
        empty_cells = game_state.get_empty_cells()

        if not empty_cells:
            return None

        move = self.find_completing_move(game_state, self.player)
        if move is not None:
            log.debug("Tier 1 (win) -> %s", move)
            return move

        move = self.find_completing_move(game_state, self.player.opposite())
        if move is not None:
            log.debug("Tier 2 (block) -> %s", move)
            return move

        for index in self.config.POSITIONAL_ORDER:
            if index in empty_cells:
                log.debug("Tier 3 (position) -> %s", index)
                return index

        return None

    def find_completing_move(self, game_state: GameState, mark: Mark) -> Optional[int]:
        """
        Find the first empty cell that gives `mark` three in a row.

        Args:
            game_state: Current game state (not modified).
            mark: The mark to try in each empty cell.

        Returns:
            Cell index, or None if no single move completes a line.
        """
        for index in game_state.get_empty_cells():
            board = game_state.board.copy()
            board[index] = mark
            if self.win_checker.winner_of(board) == mark:
                return index
        return None
