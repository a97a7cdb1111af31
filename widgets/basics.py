"""
The first menu entries: greetings, two-number arithmetic, age and primes.
"""

from datetime import date
from typing import Optional

from .errors import WidgetInputError
from .parsing import parse_int, parse_number

# Operation codes offered by the arithmetic prompt
OPERATIONS = {
    1: "+",
    2: "-",
    3: "*",
    4: "/",
}


def hello_world() -> str:
    return "Hello World!"


def greet(name: Optional[str]) -> str:
    """Welcome message for the given name."""
    name = (name or "").strip() or "stranger"
    return f"Hello, {name}! Welcome!"


def arithmetic(first, second, operation) -> float:
    """
    Apply one of the four basic operations to two numbers.

    Args:
        first, second: The operands (text or numbers).
        operation: 1 (+), 2 (-), 3 (*) or 4 (/), or the symbol itself.

    Raises:
        WidgetInputError: bad number, unknown operation or division by zero.
    """
    a = parse_number(first, "first number")
    b = parse_number(second, "second number")

    symbol = str(operation).strip()
    if symbol.isdigit():
        symbol = OPERATIONS.get(int(symbol), "")

    if symbol == "+":
        return a + b
    if symbol == "-":
        return a - b
    if symbol == "*":
        return a * b
    if symbol == "/":
        if b == 0:
            raise WidgetInputError("Division by zero is not allowed.")
        return a / b

    raise WidgetInputError("Invalid operation.")


def calculate_age(birth_year, current_year=None) -> int:
    """
    Age in years from the birth year.

    Raises:
        WidgetInputError: if the birth year is after the current year.
    """
    born = parse_int(birth_year, "birth year")
    now = date.today().year if current_year in (None, "") else parse_int(current_year, "current year")
    if born > now:
        raise WidgetInputError("Birth year can't be after the current year.")
    return now - born


def is_prime(number) -> bool:
    """Trial division up to n/2. Numbers <= 1 are not prime."""
    n = parse_int(number, "number")
    if n <= 1:
        return False
    i = 2
    while i <= n // 2:
        if n % i == 0:
            return False
        i += 1
    return True


def prime_message(number) -> str:
    n = parse_int(number, "number")
    if is_prime(n):
        return f"{n} is a prime number."
    return f"{n} is not a prime number."
