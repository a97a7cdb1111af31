"""
Move validator for the tic-tac-toe widget.
Validates that a human move follows the rules before it is applied.
"""

import operator
from typing import Optional, List
from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .game_state import GameState, Mark


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def as_cell_index(index) -> Optional[int]:
    """
    Turn an integer-like value (int, numpy integer) into a plain int.

    Returns None for anything else, bools included.
    """
    if isinstance(index, (bool, np.bool_)):
        return None
    try:
        return operator.index(index)
    except TypeError:
        return None


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Index must be a cell on the board (0-8)
    2. Can only place on empty cells
    3. Game must not be over
    4. Must be the mover's turn, and the opponent must not have a reply pending
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        mark: Mark = Mark.PLAYER,
        awaiting_opponent: bool = False
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to mark (0-8).
            mark: Who is trying to move.
            awaiting_opponent: True while the opponent's reply is scheduled.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        cell = as_cell_index(index)
        if cell is None or not 0 <= cell < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        if not game_state.is_empty(cell):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already taken by {game_state.cell(cell).symbol}"
            )

        if mark == Mark.PLAYER and awaiting_opponent:
            return ValidationResult(
                is_valid=False,
                error_message="Wait for the opponent to play!"
            )

        if game_state.current_player != mark:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {mark.symbol}'s turn!"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid cells for the player to move.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
