import json
import random
import unittest
from unittest.mock import patch

from storage import MemoryStore, PersistenceUnavailable
from widgets import (
    GuessResult, HangmanGame, HangmanStatus, NotificationQueue, ThemePreference,
    TodoList, WidgetConfig, WidgetInputError, arithmetic, ascii_table, calculate_age,
    calculate_bmi, classify_bmi, convert, convert_by_code, greet, hello_world, is_prime,
    parse_number, prime_message,
)


class BasicsTests(unittest.TestCase):
    def test_greetings(self):
        self.assertEqual(hello_world(), "Hello World!")
        self.assertEqual(greet("Ana"), "Hello, Ana! Welcome!")
        self.assertEqual(greet("   "), "Hello, stranger! Welcome!")
        self.assertEqual(greet(None), "Hello, stranger! Welcome!")

    def test_arithmetic(self):
        self.assertEqual(arithmetic("2", "3", 1), 5)
        self.assertEqual(arithmetic("2", "3", "2"), -1)
        self.assertEqual(arithmetic("2,5", "2", 3), 5)
        self.assertEqual(arithmetic(9, 3, "/"), 3)

    def test_arithmetic_errors(self):
        with self.assertRaisesRegex(WidgetInputError, "Division by zero"):
            arithmetic("1", "0", 4)
        with self.assertRaisesRegex(WidgetInputError, "Invalid operation"):
            arithmetic("1", "2", 5)
        with self.assertRaises(WidgetInputError):
            arithmetic("one", "2", 1)

    def test_age(self):
        self.assertEqual(calculate_age("1990", "2024"), 34)
        self.assertEqual(calculate_age(2000, 2000), 0)
        with self.assertRaises(WidgetInputError):
            calculate_age("2030", "2024")
        with self.assertRaises(WidgetInputError):
            calculate_age("nineteen", "2024")

    def test_primes(self):
        primes = [n for n in range(-3, 30) if is_prime(n)]
        self.assertEqual(primes, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29])
        self.assertEqual(prime_message("7"), "7 is a prime number.")
        self.assertEqual(prime_message("1"), "1 is not a prime number.")

    def test_parse_number_rejects_junk(self):
        for text in ("", "abc", "nan", "inf"):
            with self.subTest(text=text):
                with self.assertRaises(WidgetInputError):
                    parse_number(text)


class BMITests(unittest.TestCase):
    def test_value_and_class(self):
        result = calculate_bmi("70", "1,75")
        self.assertAlmostEqual(result.value, 22.857, places=3)
        self.assertEqual(result.classification, "Normal weight")
        self.assertEqual(str(result), "Your BMI is 22.86 (Normal weight)")

    def test_class_boundaries(self):
        cases = {
            18.4: "Underweight",
            18.5: "Normal weight",
            25.0: "Overweight",
            30.0: "Obesity class I",
            35.0: "Obesity class II",
            40.0: "Obesity class III",
        }
        for value, label in cases.items():
            with self.subTest(value=value):
                self.assertEqual(classify_bmi(value), label)

    def test_rejects_non_positive(self):
        with self.assertRaises(WidgetInputError):
            calculate_bmi("70", "0")
        with self.assertRaises(WidgetInputError):
            calculate_bmi("-1", "1.8")


class TemperatureTests(unittest.TestCase):
    def test_conversions(self):
        self.assertAlmostEqual(convert(100, "C", "F"), 212)
        self.assertAlmostEqual(convert(0, "C", "K"), 273.15)
        self.assertAlmostEqual(convert(212, "F", "C"), 100)
        self.assertAlmostEqual(convert(32, "F", "K"), 273.15)
        self.assertAlmostEqual(convert(0, "K", "C"), -273.15)
        self.assertAlmostEqual(convert(273.15, "K", "F"), 32)

    def test_menu_codes(self):
        self.assertEqual(convert_by_code(1, "100"), "100.0°C equals 212.0°F")
        self.assertEqual(convert_by_code("5", "300"), "300.0K equals 26.9°C")
        with self.assertRaises(WidgetInputError):
            convert_by_code(8, "1")


class AsciiTableTests(unittest.TestCase):
    def test_table(self):
        rows = ascii_table()
        self.assertEqual(len(rows), 128)
        self.assertEqual(rows[0].character, "NUL")
        self.assertEqual(rows[32].character, "SPACE")
        self.assertEqual(rows[65].character, "A")
        self.assertEqual(rows[65].hexadecimal, "41")
        self.assertEqual(rows[65].octal, "101")
        self.assertEqual(rows[127].character, "DEL")


class HangmanTests(unittest.TestCase):
    def test_win(self):
        game = HangmanGame(word="noon")
        self.assertEqual(game.masked_word, "_ _ _ _")
        self.assertEqual(game.guess("n"), GuessResult.HIT)
        self.assertEqual(game.masked_word, "n _ _ n")
        self.assertEqual(game.guess("O"), GuessResult.HIT)
        self.assertEqual(game.status, HangmanStatus.WON)
        self.assertEqual(game.guess("x"), GuessResult.GAME_OVER)

    def test_lose(self):
        game = HangmanGame(word="cat")
        for letter in "bdefgh":
            self.assertEqual(game.guess(letter), GuessResult.MISS)
        self.assertEqual(game.status, HangmanStatus.LOST)
        self.assertIn("cat", game.status_text())

    def test_repeated_and_invalid_guesses_are_free(self):
        game = HangmanGame(word="cat")
        game.guess("z")
        self.assertEqual(game.guess("z"), GuessResult.REPEATED)
        self.assertEqual(game.guess("ab"), GuessResult.INVALID)
        self.assertEqual(game.guess("1"), GuessResult.INVALID)
        self.assertEqual(game.misses, 1)
        self.assertEqual(game.wrong_letters, "z")

    def test_random_word_comes_from_the_list(self):
        game = HangmanGame(rng=random.Random(1))
        self.assertIn(game.word, WidgetConfig.HANGMAN_WORDS)


class TodoListTests(unittest.TestCase):
    def setUp(self):
        self.store = MemoryStore()
        self.todo = TodoList(self.store)

    def test_add_toggle_remove_persist(self):
        first = self.todo.add("buy milk")
        second = self.todo.add("  call mom ")
        self.assertEqual(second.text, "call mom")
        self.assertTrue(self.todo.toggle(first.id))
        self.assertFalse(self.todo.toggle(99))

        restored = TodoList(self.store).load()
        self.assertEqual([(i.text, i.done) for i in restored], [("buy milk", True), ("call mom", False)])

        self.assertEqual(self.todo.clear_completed(), 1)
        self.assertTrue(self.todo.remove(second.id))
        self.assertEqual(TodoList(self.store).load(), [])

    def test_blank_task_rejected(self):
        with self.assertRaises(WidgetInputError):
            self.todo.add("   ")

    def test_ids_keep_increasing(self):
        a = self.todo.add("a")
        self.todo.remove(a.id)
        b = self.todo.add("b")
        c = self.todo.add("c")
        self.assertEqual((b.id, c.id), (1, 2))

    def test_malformed_storage_is_empty(self):
        for raw in ("{", json.dumps({"a": 1}), json.dumps([1, 2]), json.dumps([{"id": "x", "text": "t"}])):
            with self.subTest(raw=raw):
                store = MemoryStore({WidgetConfig.TODO_STORAGE_KEY: raw})
                with self.assertLogs("todo", level="WARNING"):
                    self.assertEqual(TodoList(store).load(), [])

    def test_unavailable_storage_is_empty(self):
        with patch.object(self.store, "get", side_effect=PersistenceUnavailable("gone")):
            with self.assertLogs("todo", level="WARNING"):
                self.assertEqual(self.todo.load(), [])


class NotificationQueueTests(unittest.TestCase):
    def test_one_at_a_time_in_order(self):
        queue = NotificationQueue()
        queue.push("first")
        queue.push("second", "error")
        queue.push("third", "bogus")

        self.assertEqual(queue.show_next().message, "first")
        self.assertIsNone(queue.show_next())
        queue.dismiss()

        second = queue.show_next()
        self.assertEqual((second.message, second.level), ("second", "error"))
        queue.dismiss()

        third = queue.show_next()
        self.assertEqual(third.level, "info")
        queue.dismiss()
        self.assertIsNone(queue.show_next())


class ThemePreferenceTests(unittest.TestCase):
    def test_toggle_is_remembered(self):
        store = MemoryStore()
        theme = ThemePreference(store)
        self.assertFalse(theme.load())
        self.assertTrue(theme.toggle())
        self.assertTrue(ThemePreference(store).load())
        self.assertFalse(theme.toggle())
        self.assertFalse(ThemePreference(store).load())

    def test_unavailable_storage_means_light(self):
        store = MemoryStore({WidgetConfig.DARK_MODE_STORAGE_KEY: "true"})
        theme = ThemePreference(store)
        with patch.object(store, "get", side_effect=PersistenceUnavailable("gone")):
            with self.assertLogs("theme", level="WARNING"):
                self.assertFalse(theme.load())


if __name__ == "__main__":
    unittest.main()
