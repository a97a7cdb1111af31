"""
Game state management for the tic-tac-toe widget.
Tracks the board, whose turn it is, the move list and the game status.
"""

import logging
from enum import Enum, IntEnum
from typing import Optional, List, Sequence
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig

log = logging.getLogger("game_state")


class Mark(IntEnum):
    """What a board cell can hold."""
    EMPTY = 0
    PLAYER = 1      # The human
    OPPONENT = 2    # The computer

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            return Mark.EMPTY
        return Mark.OPPONENT if self == Mark.PLAYER else Mark.PLAYER

    @property
    def symbol(self) -> str:
        """Printable symbol ("X", "O" or "")."""
        if self == Mark.PLAYER:
            return GameConfig.PLAYER_SYMBOL
        if self == Mark.OPPONENT:
            return GameConfig.OPPONENT_SYMBOL
        return ""

    @classmethod
    def from_symbol(cls, symbol: Optional[str]) -> "Mark":
        """Parse "X" / "O" / blank into a Mark."""
        if not symbol or not symbol.strip():
            return cls.EMPTY
        symbol = symbol.strip().upper()
        if symbol == GameConfig.PLAYER_SYMBOL:
            return cls.PLAYER
        if symbol == GameConfig.OPPONENT_SYMBOL:
            return cls.OPPONENT
        raise ValueError(f"Unknown mark symbol: {symbol!r}")


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark          # Who made the move
    index: int          # Cell index (0-8, row-major)
    move_number: int    # Position in the game (0-8)


@dataclass(eq=False)
class GameState:
    """
    The complete state of a tic-tac-toe game.

    Tracks:
    - The 3x3 board as a flat array of 9 cells (row-major)
    - Whose turn it is
    - Move history
    - Game status (in progress, won, draw) and the winner
    """

    # Flat board - Mark.EMPTY (0) means empty
    board: np.ndarray = field(
        default_factory=lambda: np.zeros(GameConfig.CELL_COUNT, dtype=np.int8)
    )

    # Human always moves first
    current_player: Mark = Mark.PLAYER

    moves: List[Move] = field(default_factory=list)

    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Mark] = None

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    def cell(self, index: int) -> Mark:
        """Get the mark at a cell."""
        return Mark(int(self.board[index]))

    def is_empty(self, index: int) -> bool:
        return bool(self.board[index] == Mark.EMPTY)

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at the given cell.

        Does not evaluate win/draw; WinChecker.update_game_state does that.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the mark was placed, False otherwise.
        """
        if self.is_game_over:
            log.debug("Move at %s ignored: game is already over", index)
            return False

        if not 0 <= index < GameConfig.CELL_COUNT:
            log.debug("Move at %s ignored: out of range", index)
            return False

        if not self.is_empty(index):
            log.debug("Move at %s ignored: cell is occupied", index)
            return False

        self.board[index] = self.current_player
        self.moves.append(Move(
            mark=self.current_player,
            index=index,
            move_number=len(self.moves),
        ))

        self.current_player = self.current_player.opposite()
        return True

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board, lowest index first.
        """
        return [int(i) for i in np.flatnonzero(self.board == Mark.EMPTY)]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            moves=list(self.moves),
            status=self.status,
            winner=self.winner,
        )

    def symbols(self) -> List[str]:
        """The board as 9 display symbols ("X", "O" or "")."""
        return [Mark(int(value)).symbol for value in self.board]

    @classmethod
    def from_symbols(
        cls,
        cells: Sequence[Optional[str]],
        current_player: Mark = Mark.PLAYER
    ) -> "GameState":
        """
        Build a state from 9 symbols, e.g. ["X", "X", "", "O", ...].
        Handy for setting up positions in tests and the console.
        """
        if len(cells) != GameConfig.CELL_COUNT:
            raise ValueError(f"Expected {GameConfig.CELL_COUNT} cells, got {len(cells)}")
        board = np.array([Mark.from_symbol(c) for c in cells], dtype=np.int8)
        return cls(board=board, current_player=current_player)

    def render(self) -> str:
        """Text drawing of the board, empty cells show their index."""
        lines = []
        for row in range(GameConfig.BOARD_SIZE):
            cells = []
            for col in range(GameConfig.BOARD_SIZE):
                index = row * GameConfig.BOARD_SIZE + col
                cells.append(self.cell(index).symbol or str(index))
            lines.append(" " + " | ".join(cells))
        return "\n---+---+---\n".join(lines)
