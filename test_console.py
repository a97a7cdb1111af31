import unittest

from main import ConsoleMenu
from menu import EXIT_MESSAGE, INVALID_OPTION_MESSAGE, MENU_OPTIONS, MenuServices, find_option
from storage import MemoryStore


class ScriptedInput:
    """Feeds prepared answers to input(); EOFError when they run out."""

    def __init__(self, *answers):
        self.answers = list(answers)

    def __call__(self, prompt=""):
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class MenuTableTests(unittest.TestCase):
    def test_numbers_are_unique(self):
        numbers = [option.number for option in MENU_OPTIONS]
        self.assertEqual(len(numbers), len(set(numbers)))

    def test_find_option(self):
        self.assertEqual(find_option("1").key, "hello")
        self.assertEqual(find_option(" 11 ").key, "tictactoe")
        self.assertEqual(find_option(0).key, "exit")
        self.assertIsNone(find_option("42"))
        self.assertIsNone(find_option("abc"))


class ConsoleMenuTests(unittest.TestCase):
    def setUp(self):
        self.store = MemoryStore()
        self.output = []

    def run_menu(self, *answers):
        console = ConsoleMenu(
            MenuServices(self.store),
            input_func=ScriptedInput(*answers),
            output_func=self.output.append,
        )
        console.run()
        return console

    def test_exit(self):
        console = self.run_menu("0")
        self.assertIn(EXIT_MESSAGE, self.output)
        self.assertFalse(console.is_running)

    def test_invalid_option(self):
        self.run_menu("99", "0")
        self.assertIn(INVALID_OPTION_MESSAGE, self.output)

    def test_arithmetic_and_errors(self):
        self.run_menu("3", "6", "7", "3", "3", "1", "0", "4", "0")
        self.assertIn("Result: 42", self.output)
        self.assertIn("Error: Division by zero is not allowed.", self.output)

    def test_calculator_history_persists(self):
        self.run_menu("9", "2+3", "1/0", "history", "", "0")
        self.assertIn("= 5", self.output)
        self.assertIn("Error: Division by zero is not allowed.", self.output)

        services = MenuServices(self.store)
        entries = services.calculator.history.entries
        self.assertEqual([(e.expression, e.result) for e in entries], [("2+3", 5)])

    def test_tictactoe_plays_until_the_end(self):
        # Human: 4, 2, 3, 7, 8 -> draw against the positional opponent
        self.run_menu("11", "4", "4", "2", "3", "7", "8", "0")
        self.assertIn("You can't play there.", self.output)
        self.assertIn("It's a draw!", self.output)

    def test_todo(self):
        self.run_menu("12", "add write tests", "done 1", "", "0")
        services = MenuServices(self.store)
        self.assertEqual([(i.text, i.done) for i in services.todo_list.items], [("write tests", True)])


if __name__ == "__main__":
    unittest.main()
