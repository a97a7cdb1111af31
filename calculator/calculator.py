"""
Calculator widget: evaluate an expression and log it.
"""

import logging
from typing import Optional

from storage import KeyValueStore

from .config import CalculatorConfig
from .evaluator import ExpressionEvaluator, Number
from .history import CalculationHistory

log = logging.getLogger("calculator")


class Calculator:
    """
    The "=" and "clear history" actions of the calculator.

    Only successful evaluations reach the history; a CalculatorError
    propagates to the view untouched.
    """

    def __init__(
        self,
        store: KeyValueStore,
        config: Optional[CalculatorConfig] = None,
        history: Optional[CalculationHistory] = None
    ):
        self.config = config or CalculatorConfig()
        self.evaluator = ExpressionEvaluator(self.config)
        self.history = history or CalculationHistory(store, self.config)
        self.history.load()

    def calculate(self, expression: str) -> Number:
        """
        Evaluate the expression and record it.

        Raises:
            CalculatorError: if the expression can't be evaluated.
        """
        result = self.evaluator.evaluate(expression)
        self.history.append(expression.strip(), result)
        log.debug("%s = %s", expression.strip(), result)
        return result

    def clear_history(self):
        self.history.clear()
