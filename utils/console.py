"""
utils/console.py
----------------
Console input and number formatting helpers.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Callable, Optional, TextIO


def parse_decimal(text: Optional[str]) -> Optional[Decimal]:
    """Parse a decimal number, returning None for anything that isn't one."""
    if text is None:
        return None
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def prompt_decimal(prompt: str, read_line: Callable[[], str], out: TextIO) -> Decimal:
    """
    Ask for a number until a valid one is entered.
    Invalid input is not reported; the prompt is simply shown again.
    """
    while True:
        print(prompt, file=out)
        value = parse_decimal(read_line())
        if value is not None:
            return value


def whole_dollars(amount: Optional[Decimal]) -> str:
    """``$#`` style: dollar sign and the amount rounded to a whole number."""
    if amount is None:
        return ""
    return f"${Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP)}"


def dollars(amount: Optional[Decimal]) -> str:
    """``$#,##0.00`` style: thousands separators and two decimals."""
    if amount is None:
        return ""
    return f"${Decimal(amount).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):,}"
