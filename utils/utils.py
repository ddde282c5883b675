from decimal import Decimal, ROUND_HALF_UP, InvalidOperation


def wei(value: int | float | str | Decimal, decimals: int = 18) -> int:
    """Scale a human amount to its smallest unit, rounding half up like parseUnits."""
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}")

    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")

    scaled = amount.scaleb(decimals).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(scaled)


def to_number(value: int | None, decimals: int | None) -> Decimal:
    if not value or decimals is None:
        return Decimal(0)

    return Decimal(value) / Decimal(10**decimals)
