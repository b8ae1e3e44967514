"""Formatting of time intervals."""


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def format_time(milliseconds: int) -> str:
    """Render a millisecond interval as seconds with two decimals."""
    seconds, rest = _trunc_divmod(int(milliseconds), 1000)
    hundredths, _ = _trunc_divmod(rest, 10)
    return f"{seconds}.{hundredths:02d} sec"