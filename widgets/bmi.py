"""
Body mass index calculator.
"""

from dataclasses import dataclass

from .errors import WidgetInputError
from .parsing import parse_number

# Upper bound (exclusive) -> classification
BMI_CLASSES = (
    (18.5, "Underweight"),
    (25.0, "Normal weight"),
    (30.0, "Overweight"),
    (35.0, "Obesity class I"),
    (40.0, "Obesity class II"),
)
BMI_TOP_CLASS = "Obesity class III"


@dataclass
class BMIResult:
    value: float
    classification: str

    def __str__(self) -> str:
        return f"Your BMI is {self.value:.2f} ({self.classification})"


def classify_bmi(value: float) -> str:
    for upper, label in BMI_CLASSES:
        if value < upper:
            return label
    return BMI_TOP_CLASS


def calculate_bmi(weight, height) -> BMIResult:
    """
    BMI = weight (kg) / height (m) squared.

    Raises:
        WidgetInputError: non-numeric input, or weight/height not positive.
    """
    kg = parse_number(weight, "weight")
    meters = parse_number(height, "height")
    if kg <= 0:
        raise WidgetInputError("Weight must be greater than zero.")
    if meters <= 0:
        raise WidgetInputError("Height must be greater than zero.")

    value = kg / (meters * meters)
    return BMIResult(value=value, classification=classify_bmi(value))
