"""
Main entry point for the widget menu.

By default this opens the Tk window (ui.py). With --no-ui the same menu
runs in the terminal, asking for each input in turn.

Run this script to try the widgets!
"""

import logging
import sys
from typing import Callable, Optional

from calculator import CalculatorError, format_result
from logic import GameStatus, ManualScheduler, Mark
from menu import (
    EXIT_MESSAGE, INVALID_OPTION_MESSAGE, MENU_OPTIONS, MenuServices, find_option,
)
from storage import JsonFileStore
from widgets import (
    HangmanGame, HangmanStatus, GuessResult, WidgetInputError, arithmetic,
    ascii_table, calculate_age, calculate_bmi, convert_by_code, format_ascii_table,
    greet, hello_world, prime_message,
)
from widgets.temperature import CONVERSIONS, UNIT_SYMBOLS

log = logging.getLogger("main")


class ConsoleMenu:
    """
    Terminal version of the menu.

    Every widget reads its inputs with input_func and writes with
    output_func, so the whole flow can be driven from tests.
    """

    def __init__(
        self,
        services: MenuServices,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        self.services = services
        self.ask = input_func
        self.say = output_func
        self.is_running = False

        self.handlers = {
            "hello": self._hello,
            "greet": self._greet,
            "arithmetic": self._arithmetic,
            "age": self._age,
            "prime": self._prime,
            "bmi": self._bmi,
            "temperature": self._temperature,
            "ascii": self._ascii,
            "calculator": self._calculator,
            "hangman": self._hangman,
            "tictactoe": self._tictactoe,
            "todo": self._todo,
        }

    def run(self):
        """Show the menu until the user picks Exit (or input runs out)."""
        self.is_running = True
        while self.is_running:
            self._print_menu()
            try:
                self.dispatch(self.ask("Choose an option: "))
            except EOFError:
                break

    def dispatch(self, choice) -> bool:
        """
        Run the widget for a menu choice.

        Returns:
            False if the choice was not on the menu.
        """
        option = find_option(choice)
        if option is None:
            self.say(INVALID_OPTION_MESSAGE)
            return False

        if option.key == "exit":
            self.say(EXIT_MESSAGE)
            self.is_running = False
            return True

        try:
            self.handlers[option.key]()
        except WidgetInputError as e:
            self.say(f"Error: {e}")
        return True

    def _print_menu(self):
        self.say("\n" + "=" * 40)
        self.say("   Widget Menu")
        self.say("=" * 40)
        for option in MENU_OPTIONS:
            self.say(f"  {option.number:>2}. {option.title}")

    # ==================== SIMPLE WIDGETS ====================

    def _hello(self):
        self.say(hello_world())

    def _greet(self):
        self.say(greet(self.ask("Enter your name: ")))

    def _arithmetic(self):
        first = self.ask("Enter the first number: ")
        second = self.ask("Enter the second number: ")
        operation = self.ask("Choose the operation (1: +, 2: -, 3: *, 4: /): ")
        self.say(f"Result: {format_result(arithmetic(first, second, operation))}")

    def _age(self):
        birth_year = self.ask("Enter your birth year: ")
        current_year = self.ask("Enter the current year (blank for this year): ")
        self.say(f"You are {calculate_age(birth_year, current_year)} years old")

    def _prime(self):
        self.say(prime_message(self.ask("Enter a positive whole number: ")))

    def _bmi(self):
        weight = self.ask("Enter your weight (kg): ")
        height = self.ask("Enter your height (m, e.g. 1.75): ")
        self.say(str(calculate_bmi(weight, height)))

    def _temperature(self):
        self.say("Conversions:")
        for code, (src, dst) in CONVERSIONS.items():
            self.say(f"  {code}. {UNIT_SYMBOLS[src]} -> {UNIT_SYMBOLS[dst]}")
        self.say("  7. Back to the menu")
        code = self.ask("Choose a conversion: ")
        if code.strip() == "7":
            return
        self.say(convert_by_code(code, self.ask("Enter the temperature: ")))

    def _ascii(self):
        self.say(format_ascii_table(ascii_table()))

    # ==================== CALCULATOR ====================

    def _calculator(self):
        calculator = self.services.calculator
        self.say("Type an expression, 'history', 'clear' or a blank line to go back.")
        while True:
            try:
                text = self.ask("calc> ").strip()
            except EOFError:
                return
            if not text:
                return
            if text.lower() == "history":
                entries = calculator.history.entries
                if not entries:
                    self.say("No calculations yet.")
                for entry in entries:
                    stamp = entry.timestamp.strftime("%H:%M:%S")
                    self.say(f"  [{stamp}] {entry.expression} = {format_result(entry.result)}")
                continue
            if text.lower() == "clear":
                calculator.clear_history()
                self.say("History cleared.")
                continue
            try:
                self.say(f"= {format_result(calculator.calculate(text))}")
            except CalculatorError as e:
                self.say(f"Error: {e}")

    # ==================== GAMES ====================

    def _hangman(self):
        game = HangmanGame()
        while game.status == HangmanStatus.PLAYING:
            self.say(f"\n{game.masked_word}   ({game.status_text()})")
            if game.wrong_letters:
                self.say(f"Wrong letters: {game.wrong_letters}")
            try:
                result = game.guess(self.ask("Guess a letter: "))
            except EOFError:
                return
            if result == GuessResult.INVALID:
                self.say("Please type a single letter.")
            elif result == GuessResult.REPEATED:
                self.say("You already tried that letter.")
        self.say(game.status_text())

    def _tictactoe(self):
        scheduler = ManualScheduler()
        engine = self.services.new_game(scheduler)
        self.say(f"You are {Mark.PLAYER.symbol}. Pick a cell 0-8.")

        while engine.status == GameStatus.IN_PROGRESS:
            self.say("\n" + engine.game_state.render())
            try:
                text = self.ask("Your move: ")
            except EOFError:
                return
            try:
                index = int(text.strip())
            except ValueError:
                self.say("Type a cell number from 0 to 8.")
                continue

            if not engine.apply_move(index):
                self.say("You can't play there.")
                continue

            # No UI to animate, so the reply is played straight away
            scheduler.run_pending()

        self.say("\n" + engine.game_state.render())
        self.say(engine.status_text())

    # ==================== TO-DO ====================

    def _todo(self):
        todo = self.services.todo_list
        self.say("Commands: add <text>, done <id>, remove <id>, clean, blank line to go back")
        while True:
            for item in todo.items:
                self.say(f"  [{'x' if item.done else ' '}] {item.id}. {item.text}")
            try:
                text = self.ask("todo> ").strip()
            except EOFError:
                return
            if not text:
                return

            command, _, argument = text.partition(" ")
            command = command.lower()
            if command == "add":
                todo.add(argument)
            elif command in ("done", "remove"):
                try:
                    item_id = int(argument)
                except ValueError:
                    self.say("Give the task number.")
                    continue
                found = todo.toggle(item_id) if command == "done" else todo.remove(item_id)
                if not found:
                    self.say(f"No task {item_id}.")
            elif command == "clean":
                self.say(f"Removed {todo.clear_completed()} finished task(s).")
            else:
                self.say("Unknown command.")


def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[list] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Widget Menu")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run the menu in the terminal instead of a window"
    )
    parser.add_argument(
        "--storage",
        default=None,
        help="Path of the JSON file used to remember history, tasks and theme"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    store = JsonFileStore(args.storage)
    log.info("Using storage file %s", store.path)

    # Launch UI by default
    if not args.no_ui:
        from ui import WidgetMenuUI
        print("\n" + "=" * 60)
        print("   Widget Menu UI")
        print("=" * 60 + "\n")
        ui = WidgetMenuUI(store)
        ui.run()
        return 0

    services = MenuServices(store)
    console = ConsoleMenu(services)

    try:
        console.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
