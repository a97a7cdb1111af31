"""
Input parsing shared by the widgets.
Turns text typed in a form or at a prompt into numbers.
"""

from .errors import WidgetInputError


def parse_number(text, field_name: str = "value") -> float:
    """
    Parse a decimal number. Accepts "," as the decimal separator.

    Raises:
        WidgetInputError: if the text is not a finite number.
    """
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        cleaned = str(text or "").strip().replace(",", ".")
        if not cleaned:
            raise WidgetInputError(f"Please enter the {field_name}.")
        try:
            value = float(cleaned)
        except ValueError:
            raise WidgetInputError(f"'{text}' is not a valid {field_name}.") from None

    if value != value or value in (float("inf"), float("-inf")):
        raise WidgetInputError(f"'{text}' is not a valid {field_name}.")
    return value


def parse_int(text, field_name: str = "value") -> int:
    """
    Parse a whole number.

    Raises:
        WidgetInputError: if the text is not an integer.
    """
    if isinstance(text, int) and not isinstance(text, bool):
        return text

    cleaned = str(text or "").strip()
    if not cleaned:
        raise WidgetInputError(f"Please enter the {field_name}.")
    try:
        return int(cleaned)
    except ValueError:
        raise WidgetInputError(f"'{text}' is not a whole number ({field_name}).") from None
