"""
Widgets module for the menu.
Small self-contained tools: greetings, calculators, converters and games.
"""

from .config import WidgetConfig
from .errors import WidgetInputError
from .parsing import parse_int, parse_number
from .basics import hello_world, greet, arithmetic, calculate_age, is_prime, prime_message
from .bmi import BMIResult, calculate_bmi, classify_bmi
from .temperature import convert, convert_by_code
from .ascii_table import AsciiRow, ascii_table, format_ascii_table
from .hangman import HangmanGame, HangmanStatus, GuessResult
from .todo import TodoItem, TodoList
from .notifications import Notification, NotificationQueue
from .theme import ThemePreference
