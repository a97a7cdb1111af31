"""
Calculator configuration.
History size and the storage key it is saved under.
"""


class CalculatorConfig:
    """
    Configuration class for the calculator widget.
    """

    # ==================== HISTORY SETTINGS ====================
    HISTORY_MAX_ENTRIES = 10
    HISTORY_STORAGE_KEY = "calculatorHistory"

    # ==================== EVALUATOR SETTINGS ====================
    # Symbols people type that Python spells differently
    OPERATOR_ALIASES = {
        "x": "*",
        "×": "*",
        "÷": "/",
        "^": "**",
    }

    # Refuse huge exponents instead of hanging on 9**9**9
    MAX_EXPONENT = 1000
    MAX_EXPRESSION_LENGTH = 200

    # Results past this many digits cannot be shown or saved as JSON
    MAX_RESULT_DIGITS = 100
