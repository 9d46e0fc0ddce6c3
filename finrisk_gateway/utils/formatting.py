"""Number formatting for report text and exports"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP


def format_fixed(value: float, places: int) -> str:
    """
    Format a float with a fixed number of decimals, rounding half-up.

    Rounds the shortest decimal representation of the float rather than its
    binary expansion, so 0.45 formats as "0.5" and 2.5 as "3". Precision grows
    with the magnitude, so 1e40 keeps every integer digit; non-finite values
    come back as their repr.
    """
    if not math.isfinite(value):
        return repr(float(value))

    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-places)
    context = Context(prec=max(28, exact.adjusted() + places + 2), rounding=ROUND_HALF_UP)
    rounded = exact.quantize(quantum, context=context)
    if rounded == 0:
        rounded = abs(rounded)  # no "-0.0"
    return f"{rounded:.{places}f}"
