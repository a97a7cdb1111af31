"""
Arithmetic expression evaluator for the calculator widget.

Parses the expression with ast and walks the tree by hand, so only
numbers, + - * / // % ** and parentheses ever get evaluated.
"""

import ast
import operator
from typing import Optional, Union

from widgets.errors import WidgetInputError

from .config import CalculatorConfig

Number = Union[int, float]


class CalculatorError(WidgetInputError):
    """The expression could not be evaluated."""


class ExpressionEvaluator:
    """Safe evaluator for simple arithmetic."""

    _BINOPS = {
        ast.Add: operator.add,
        ast.Sub: operator.sub,
        ast.Mult: operator.mul,
        ast.Div: operator.truediv,
        ast.FloorDiv: operator.floordiv,
        ast.Mod: operator.mod,
        ast.Pow: operator.pow,
    }
    _UNARYOPS = {
        ast.UAdd: operator.pos,
        ast.USub: operator.neg,
    }

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()
        self._int_limit = 10 ** self.config.MAX_RESULT_DIGITS

    def normalize(self, expression: str) -> str:
        """Swap the operator aliases for Python operators."""
        text = expression.strip()
        for alias, python_op in self.config.OPERATOR_ALIASES.items():
            text = text.replace(alias, python_op)
        return text.replace(",", ".")

    def evaluate(self, expression: str) -> Number:
        """
        Evaluate an arithmetic expression.

        Raises:
            CalculatorError: empty, malformed or unsupported expression,
                division by zero, or a result too large to show.
        """
        if not expression or not expression.strip():
            raise CalculatorError("Type an expression first.")
        if len(expression) > self.config.MAX_EXPRESSION_LENGTH:
            raise CalculatorError("Expression is too long.")

        try:
            tree = ast.parse(self.normalize(expression), mode="eval")
        except SyntaxError:
            raise CalculatorError(f"Invalid expression: {expression}") from None

        result = self._eval(tree.body)
        if isinstance(result, int) and abs(result) >= self._int_limit:
            raise CalculatorError("Result is too large.")
        if isinstance(result, float) and result.is_integer() and abs(result) < 1e15:
            return int(result)
        return result

    def _eval(self, node: ast.AST) -> Number:
        if isinstance(node, ast.Constant):
            if isinstance(node.value, (int, float)) and not isinstance(node.value, bool):
                return node.value
            raise CalculatorError(f"Unsupported value: {node.value!r}")

        if isinstance(node, ast.UnaryOp) and type(node.op) in self._UNARYOPS:
            return self._UNARYOPS[type(node.op)](self._eval(node.operand))

        if isinstance(node, ast.BinOp) and type(node.op) in self._BINOPS:
            left = self._eval(node.left)
            right = self._eval(node.right)
            if isinstance(node.op, ast.Pow) and abs(right) > self.config.MAX_EXPONENT:
                raise CalculatorError("Exponent is too large.")
            try:
                result = self._BINOPS[type(node.op)](left, right)
            except ZeroDivisionError:
                raise CalculatorError("Division by zero is not allowed.") from None
            except OverflowError:
                raise CalculatorError("Result is too large.") from None
            if isinstance(result, complex):
                raise CalculatorError("Result is not a real number.")
            if isinstance(result, int) and abs(result) >= self._int_limit:
                raise CalculatorError("Result is too large.")
            return result

        raise CalculatorError(f"Unsupported syntax: {type(node).__name__}")


def format_result(value: Number) -> str:
    """Display a result without float noise (0.1+0.2 -> 0.3)."""
    if isinstance(value, float):
        return f"{value:.10g}"
    return str(value)
