"""
Menu table shared by the Tk window and the console.

Each option has a number (what the user types or clicks) and a key (what
the views switch on). The long-lived objects every view needs (store,
calculator, to-do list, theme) are built once here.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from calculator import Calculator
from logic import GameEngine, Scheduler
from storage import KeyValueStore
from widgets import NotificationQueue, ThemePreference, TodoList

log = logging.getLogger("menu")


@dataclass
class MenuOption:
    number: int
    title: str
    key: str


MENU_OPTIONS: List[MenuOption] = [
    MenuOption(1, "Hello World", "hello"),
    MenuOption(2, "Greet me", "greet"),
    MenuOption(3, "Arithmetic", "arithmetic"),
    MenuOption(4, "Age calculator", "age"),
    MenuOption(5, "Prime checker", "prime"),
    MenuOption(6, "BMI calculator", "bmi"),
    MenuOption(7, "Temperature converter", "temperature"),
    MenuOption(8, "ASCII table", "ascii"),
    MenuOption(9, "Calculator", "calculator"),
    MenuOption(10, "Hangman", "hangman"),
    MenuOption(11, "Tic-tac-toe", "tictactoe"),
    MenuOption(12, "To-do list", "todo"),
    MenuOption(0, "Exit", "exit"),
]

EXIT_MESSAGE = "Exiting... See you soon!"
INVALID_OPTION_MESSAGE = "Invalid option. Try again."


def find_option(choice) -> Optional[MenuOption]:
    """
    Look up a menu option by number (int or typed text).

    Returns:
        The option, or None for anything that isn't on the menu.
    """
    try:
        number = int(str(choice).strip())
    except ValueError:
        return None

    for option in MENU_OPTIONS:
        if option.number == number:
            return option
    return None


class MenuServices:
    """
    Objects that live as long as the application.

    The tic-tac-toe engine is created by each view, since only the view
    knows how to schedule the opponent's reply.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.calculator = Calculator(store)
        self.todo_list = TodoList(store)
        self.todo_list.load()
        self.theme = ThemePreference(store)
        self.theme.load()
        self.notifications = NotificationQueue()
        log.debug(
            "Loaded %d history entries, %d tasks, dark mode=%s",
            len(self.calculator.history), len(self.todo_list.items), self.theme.dark_mode,
        )

    def new_game(self, scheduler: Optional[Scheduler] = None) -> GameEngine:
        return GameEngine(scheduler=scheduler)
