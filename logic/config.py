"""
Game configuration for the tic-tac-toe widget.
All the settings for marks, opponent timing and move preferences.
"""


class GameConfig:
    """
    Configuration class for the tic-tac-toe engine.
    Change these values to tune how the opponent behaves.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # ==================== MARK SETTINGS ====================
    PLAYER_SYMBOL = "X"     # Human always plays X and moves first
    OPPONENT_SYMBOL = "O"

    # ==================== OPPONENT SETTINGS ====================
    # Delay before the opponent answers (milliseconds).
    # Purely presentational, the decision itself is instant.
    OPPONENT_DELAY_MS = 500

    # Fallback preference when there is nothing to win or block:
    # center first, then corners, then sides
    POSITIONAL_ORDER = (4, 0, 2, 6, 8, 1, 3, 5, 7)
