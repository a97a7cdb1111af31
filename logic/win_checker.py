"""
Win checker for the tic-tac-toe widget.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

import numpy as np

from .game_state import GameState, GameStatus, Mark


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines as cell index triples (row-major)
    WINNING_LINES = np.array([
        # Rows
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        # Columns
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
        # Diagonals
        [0, 4, 8],
        [2, 4, 6],
    ])

    def _complete_lines(self, board: np.ndarray) -> np.ndarray:
        """
        Indices into WINNING_LINES of every line filled by a single player.
        """
        lines = board[self.WINNING_LINES]  # shape (8, 3)
        same = (lines == lines[:, :1]).all(axis=1)
        filled = lines[:, 0] != Mark.EMPTY
        return np.flatnonzero(same & filled)

    def winner_of(self, board: np.ndarray) -> Optional[Mark]:
        """
        Check a raw board for a winner.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        complete = self._complete_lines(board)
        if complete.size == 0:
            return None
        first_line = self.WINNING_LINES[complete[0]]
        return Mark(int(board[first_line[0]]))

    def check_winner(self, game_state: GameState) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return self.winner_of(game_state.board)

    def is_board_full(self, game_state: GameState) -> bool:
        """True if no cell is empty."""
        return not bool((game_state.board == Mark.EMPTY).any())

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw.

        A full board only counts as a draw when nobody has won, so the
        winner is always checked first.
        """
        if self.check_winner(game_state) is not None:
            return False

        return self.is_board_full(game_state)

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Only moves the status forward: a finished game is left untouched.
        """
        if game_state.is_game_over:
            return game_state

        winner = self.check_winner(game_state)

        if winner is not None:
            game_state.winner = winner
            game_state.status = GameStatus.WON
        elif self.check_draw(game_state):
            game_state.status = GameStatus.DRAW

        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of 3 cell indices, or None.
        """
        complete = self._complete_lines(game_state.board)
        if complete.size == 0:
            return None
        a, b, c = self.WINNING_LINES[complete[0]]
        return int(a), int(b), int(c)
