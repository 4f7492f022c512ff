"""
Conversion between human readable token amounts and integer base units
"""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from .errors import AmountError

DEFAULT_DECIMALS = 18


def parse_units(value: Union[str, int, Decimal], decimals: int = DEFAULT_DECIMALS) -> int:
    """
    Convert a decimal amount to integer base units

    Args:
        value: Amount such as "1000" or "0.5"
        decimals: Number of decimals of the token

    Returns:
        Amount scaled by 10**decimals
    """
    if isinstance(value, float):
        # floats lose precision before we ever see them
        raise AmountError(f"Pass amounts as strings, not floats: {value!r}")
    if decimals < 0:
        raise AmountError(f"Decimals must be non-negative, got {decimals}")

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise AmountError(f"Invalid amount: {value!r}")

    if not amount.is_finite():
        raise AmountError(f"Invalid amount: {value!r}")
    if amount < 0:
        raise AmountError(f"Amount must not be negative: {value!r}")

    with localcontext() as ctx:
        ctx.prec = 100
        scaled = amount.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise AmountError(f"Amount {value!r} has more than {decimals} decimal places")
    return int(scaled)


def format_units(amount: int, decimals: int = DEFAULT_DECIMALS) -> str:
    """Convert integer base units back to a decimal string"""
    if decimals == 0:
        return str(amount)
    whole, fraction = divmod(abs(amount), 10 ** decimals)
    sign = "-" if amount < 0 else ""
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction_str}"
