import json
import tempfile
import unittest
from datetime import datetime, timedelta
from pathlib import Path
from unittest.mock import patch

from calculator import (
    CalculationHistory, Calculator, CalculatorConfig, CalculatorError, ExpressionEvaluator,
    HistoryEntry, format_result,
)
from storage import JsonFileStore, MemoryStore, PersistenceUnavailable

KEY = CalculatorConfig.HISTORY_STORAGE_KEY


class FakeClock:
    def __init__(self):
        self.now = datetime(2024, 1, 1, 12, 0, 0)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


class CalculationHistoryTests(unittest.TestCase):
    def setUp(self):
        self.store = MemoryStore()
        self.history = CalculationHistory(self.store, clock=FakeClock())

    def stored(self):
        return json.loads(self.store.get(KEY))

    def test_three_appends_newest_first(self):
        self.history.append("1+1", 2)
        self.history.append("2*3", 6)
        self.history.append("10/4", 2.5)

        expressions = [entry.expression for entry in self.history.entries]
        self.assertEqual(expressions, ["10/4", "2*3", "1+1"])
        self.assertEqual(len(self.history), 3)

    def test_append_on_full_log_drops_the_oldest(self):
        for i in range(10):
            self.history.append(f"{i}+0", i)
        oldest = self.history.entries[-1]
        self.assertEqual(oldest.expression, "0+0")

        self.history.append("new", 99)

        entries = self.history.entries
        self.assertEqual(len(entries), 10)
        self.assertEqual(entries[0].expression, "new")
        self.assertNotIn("0+0", [e.expression for e in entries])
        self.assertEqual(entries[-1].expression, "1+0")

    def test_never_exceeds_the_cap(self):
        for i in range(25):
            self.history.append(str(i), i)
            self.assertLessEqual(len(self.history), 10)
            self.assertLessEqual(len(self.stored()), 10)

    def test_every_append_is_saved(self):
        self.history.append("1+2", 3)
        self.assertEqual(self.stored()[0]["expression"], "1+2")
        self.assertEqual(self.stored()[0]["result"], 3)
        self.assertIn("timestamp", self.stored()[0])

        self.history.append("2+2", 4)
        self.assertEqual([e["expression"] for e in self.stored()], ["2+2", "1+2"])

    def test_timestamps_follow_insertion(self):
        self.history.append("a", 1)
        self.history.append("b", 2)
        newer, older = self.history.entries
        self.assertGreater(newer.timestamp, older.timestamp)

    def test_clear_then_load_sees_empty_log(self):
        self.history.append("1+1", 2)
        self.history.append("2+2", 4)
        self.history.clear()

        self.assertEqual(self.history.entries, [])
        self.assertEqual(self.stored(), [])

        restarted = CalculationHistory(self.store)
        self.assertEqual(restarted.load(), [])

    def test_load_restores_the_same_log(self):
        for i in range(4):
            self.history.append(f"{i}*2", i * 2)

        restarted = CalculationHistory(self.store)
        restored = restarted.load()

        self.assertEqual(
            [(e.expression, e.result, e.timestamp) for e in restored],
            [(e.expression, e.result, e.timestamp) for e in self.history.entries],
        )

    def test_load_missing_key_is_empty(self):
        self.assertEqual(self.history.load(), [])

    def test_load_malformed_data_is_empty(self):
        bad_values = [
            "not json",
            json.dumps({"expression": "1+1"}),
            json.dumps([{"expression": "1+1", "result": "two", "timestamp": "2024-01-01T00:00:00"}]),
            json.dumps([{"expression": "1+1", "result": 2}]),
            json.dumps([{"expression": "1+1", "result": 2, "timestamp": "yesterday"}]),
            json.dumps(["1+1=2"]),
        ]
        for raw in bad_values:
            with self.subTest(raw=raw):
                store = MemoryStore({KEY: raw})
                history = CalculationHistory(store)
                with self.assertLogs("history", level="WARNING"):
                    self.assertEqual(history.load(), [])

    def test_load_trims_oversized_stored_log(self):
        entries = [
            HistoryEntry(str(i), i, datetime(2024, 1, 1)).to_dict() for i in range(15)
        ]
        store = MemoryStore({KEY: json.dumps(entries)})
        history = CalculationHistory(store)
        self.assertEqual(len(history.load()), 10)

    def test_store_read_failure_degrades_to_empty(self):
        with patch.object(self.store, "get", side_effect=PersistenceUnavailable("disk gone")):
            with self.assertLogs("history", level="WARNING"):
                self.assertEqual(self.history.load(), [])

    def test_store_write_failure_keeps_memory_log(self):
        with patch.object(self.store, "set", side_effect=PersistenceUnavailable("read-only")):
            with self.assertLogs("history", level="WARNING"):
                self.history.append("1+1", 2)
        self.assertEqual(len(self.history), 1)

    def test_listeners_get_the_new_log(self):
        seen = []
        self.history.subscribe(seen.append)
        self.history.append("1+1", 2)
        self.history.clear()
        self.assertEqual([len(entries) for entries in seen], [1, 0])


class JsonFileStoreTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "nested" / "storage.json"

    def tearDown(self):
        self.tmp.cleanup()

    def test_history_survives_restart(self):
        history = CalculationHistory(JsonFileStore(self.path))
        history.append("6*7", 42)

        restarted = CalculationHistory(JsonFileStore(self.path))
        restored = restarted.load()
        self.assertEqual(len(restored), 1)
        self.assertEqual(restored[0].expression, "6*7")
        self.assertEqual(restored[0].result, 42)

    def test_missing_file_reads_as_empty(self):
        store = JsonFileStore(self.path)
        self.assertIsNone(store.get(KEY))

    def test_corrupt_file_raises_then_recovers_on_write(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{broken", encoding="utf-8")
        store = JsonFileStore(self.path)

        with self.assertRaises(PersistenceUnavailable):
            store.get(KEY)

        history = CalculationHistory(store)
        with self.assertLogs("history", level="WARNING"):
            self.assertEqual(history.load(), [])

        history.append("1+1", 2)
        self.assertEqual(CalculationHistory(JsonFileStore(self.path)).load()[0].result, 2)

    def test_undecodable_file_degrades_to_empty(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_bytes(b'{"calculatorHistory": "\xff\xfe"}')
        store = JsonFileStore(self.path)

        with self.assertRaises(PersistenceUnavailable):
            store.get(KEY)

        with self.assertLogs("history", level="WARNING"):
            self.assertEqual(CalculationHistory(store).load(), [])

        self.path.write_bytes(b"\xff\xfe garbage")
        calculator = Calculator(JsonFileStore(self.path))
        self.assertEqual(calculator.history.entries, [])
        calculator.calculate("2+2")
        self.assertEqual(CalculationHistory(JsonFileStore(self.path)).load()[0].result, 4)

    def test_keys_are_independent(self):
        store = JsonFileStore(self.path)
        store.set("a", "1")
        store.set("b", "2")
        store.remove("a")
        self.assertIsNone(store.get("a"))
        self.assertEqual(store.get("b"), "2")

    def test_environment_override(self):
        with patch.dict("os.environ", {"WIDGET_MENU_STORAGE": str(self.path)}):
            self.assertEqual(JsonFileStore().path, self.path)


class ExpressionEvaluatorTests(unittest.TestCase):
    def setUp(self):
        self.evaluator = ExpressionEvaluator()

    def test_arithmetic(self):
        self.assertEqual(self.evaluator.evaluate("1 + 2 * 3"), 7)
        self.assertEqual(self.evaluator.evaluate("(1 + 2) * 3"), 9)
        self.assertEqual(self.evaluator.evaluate("10 / 4"), 2.5)
        self.assertEqual(self.evaluator.evaluate("10 / 2"), 5)
        self.assertEqual(self.evaluator.evaluate("7 // 2"), 3)
        self.assertEqual(self.evaluator.evaluate("7 % 4"), 3)
        self.assertEqual(self.evaluator.evaluate("-2 ** 2"), -4)
        self.assertEqual(self.evaluator.evaluate("2 ^ 10"), 1024)
        self.assertEqual(self.evaluator.evaluate("3 x 4"), 12)
        self.assertEqual(self.evaluator.evaluate("9 ÷ 3"), 3)
        self.assertEqual(self.evaluator.evaluate("1,5 + 1"), 2.5)

    def test_rejects_anything_else(self):
        for expression in ("", "   ", "1 +", "__import__('os')", "abs(-1)", "a + 1", "'a' * 3", "1 / 0", "2 ** 5000"):
            with self.subTest(expression=expression):
                with self.assertRaises(CalculatorError):
                    self.evaluator.evaluate(expression)

    def test_format_result(self):
        self.assertEqual(format_result(0.1 + 0.2), "0.3")
        self.assertEqual(format_result(42), "42")


class CalculatorTests(unittest.TestCase):
    def test_only_successful_results_are_recorded(self):
        store = MemoryStore()
        calculator = Calculator(store)

        self.assertEqual(calculator.calculate("2 + 2"), 4)
        with self.assertRaises(CalculatorError):
            calculator.calculate("2 / 0")

        entries = calculator.history.entries
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].expression, "2 + 2")

        calculator.clear_history()
        self.assertEqual(Calculator(store).history.entries, [])

    def test_huge_result_is_refused_and_not_recorded(self):
        store = MemoryStore()
        calculator = Calculator(store)
        calculator.calculate("1 + 1")

        for expression in ("(10**1000)**5", "10**100", "9" * 150):
            with self.subTest(expression=expression):
                with self.assertRaisesRegex(CalculatorError, "too large"):
                    calculator.calculate(expression)

        self.assertEqual(len(calculator.history.entries), 1)
        self.assertEqual(calculator.calculate("2 * 3"), 6)
        self.assertEqual([e.result for e in Calculator(store).history.entries], [6, 2])

    def test_loads_history_on_start(self):
        store = MemoryStore()
        Calculator(store).calculate("3 * 3")
        self.assertEqual(Calculator(store).history.entries[0].result, 9)


if __name__ == "__main__":
    unittest.main()
