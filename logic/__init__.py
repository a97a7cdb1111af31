"""
Logic module for the tic-tac-toe widget.
Handles game state, rules, the AI opponent and the engine that ties them.
"""

from .config import GameConfig
from .game_state import GameState, GameStatus, Mark
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .scheduler import ManualScheduler, Scheduler, TkScheduler
from .game_engine import GameEngine, GameEvent
