"""Winston / AR unit conversion.

One AR is 10^12 winston. Amounts travel as decimal strings so that no
precision is lost to floats.
"""

from __future__ import annotations

from decimal import Decimal, localcontext

WINSTON_PER_AR = 10**12


def _to_decimal(value: str | int | Decimal) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def winston_to_ar(winston: str | int | Decimal, *, formatted: bool = False) -> str:
    """Convert a winston amount to AR.

    Args:
        winston: Amount in winston.
        formatted: If True, group thousands with commas.

    Returns:
        AR amount as a string with 12 decimal places.
    """
    with localcontext() as ctx:
        ctx.prec = 60
        ar = _to_decimal(winston) / WINSTON_PER_AR
        return f"{ar:,.12f}" if formatted else f"{ar:.12f}"


def ar_to_winston(ar: str | int | Decimal, *, formatted: bool = False) -> str:
    """Convert an AR amount to winston, truncating sub-winston fractions.

    Args:
        ar: Amount in AR.
        formatted: If True, group thousands with commas.

    Returns:
        Integer winston amount as a string.
    """
    with localcontext() as ctx:
        ctx.prec = 60
        winston = int(_to_decimal(ar) * WINSTON_PER_AR)
    return f"{winston:,}" if formatted else str(winston)
