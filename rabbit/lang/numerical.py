"""Numbers in rabbit. Integer literals are Python ints (arbitrary precision) and division is exact, so a quotient is
either an int or a Fraction: floating point never appears.

Source: https://docs.python.org/3/library/fractions.html
"""

from fractions import Fraction
import string

from rabbit.lang.error import EvaluationError


DIGITS = string.digits


def is_digit(char):
    """Whether or not char can appear in an integer literal. Only ASCII digits are accepted."""
    return char in DIGITS


def number(literal):
    """Returns int given the text of an integer literal."""
    if not literal or not all(is_digit(char) for char in literal):
        raise ValueError(f"'{literal}' is not an integer literal")
    return int(literal)


def normalize(num):
    """Returns num as an int if it is a whole Fraction, else num unchanged."""
    if isinstance(num, Fraction) and num.denominator == 1:
        return num.numerator
    return num


def divide(dividend, divisor, node=None):
    """Exact division. Raises EvaluationError on division by zero, located at node if given."""
    if divisor == 0:
        line, column = (node.line, node.column) if node is not None else (None, None)
        raise EvaluationError("division by zero", "/", line, column)
    return normalize(Fraction(dividend) / divisor)


def display(num):
    """Returns str representation of num: '16', '5/2' or '-1/3'."""
    return str(normalize(num))
