"""
Calculator module for the widget menu.
Evaluates typed expressions and keeps a short history of results.
"""

from .config import CalculatorConfig
from .evaluator import CalculatorError, ExpressionEvaluator, format_result
from .history import CalculationHistory, HistoryEntry
from .calculator import Calculator
