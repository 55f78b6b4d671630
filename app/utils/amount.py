import math


def is_valid_amount(amount: str | None) -> bool:
    """Return True when ``amount`` parses to a finite number strictly greater than zero.

    Overflowing literals such as ``"1e999"`` parse to infinity and are rejected.
    """
    if amount is None:
        return False
    # float() also takes digit grouping and non-ASCII digits; plain decimal literals only.
    if not amount.isascii() or "_" in amount:
        return False
    try:
        value = float(amount)
    except ValueError:
        return False
    return math.isfinite(value) and value > 0.0
