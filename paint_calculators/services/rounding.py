"""
Display rounding and degenerate-arithmetic helpers shared by the engines.

Rounding is half-up (1.25 → 1.3), not Python's banker's rounding, so
displayed figures match the calculators' published examples. Material
quantities round UP so a quote never under-orders; currency rounds to the
nearest cent.

Unguarded formulas divide by caller-supplied values. A zero denominator
yields ±inf / nan (IEEE semantics) instead of ``ZeroDivisionError`` and is
logged; non-finite values pass through the rounding helpers untouched.
"""
import logging
import math

logger = logging.getLogger("paintcalc-numeric")


def round_nearest(value: float, digits: int = 0) -> float:
    """Round half-up to ``digits`` decimal places."""
    if not math.isfinite(value):
        return value
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def round_up(value: float, digits: int = 1) -> float:
    """Round toward +inf at ``digits`` decimal places (ceiling)."""
    if not math.isfinite(value):
        return value
    scale = 10 ** digits
    return math.ceil(value * scale) / scale


def ceil_count(value: float):
    """Whole containers needed for ``value`` units; non-finite passes through."""
    if not math.isfinite(value):
        return value
    return math.ceil(value)


def safe_div(numerator: float, denominator: float, context: str = "") -> float:
    """``numerator / denominator`` with IEEE results for a zero denominator."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        result = math.nan
    else:
        # Signed zero decides the direction, as in IEEE 754
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        result = math.copysign(math.inf, sign)
    logger.warning(f"Division by zero in {context or 'calculation'}; result is {result}")
    return result


def safe_log(value: float, context: str = "") -> float:
    """Natural log that returns -inf for 0 and nan for negatives."""
    if value > 0:
        return math.log(value)
    result = -math.inf if value == 0 else math.nan
    logger.warning(f"Logarithm of {value} in {context or 'calculation'}; result is {result}")
    return result


def round_whole(value: float):
    """Nearest whole number as ``int``; non-finite passes through."""
    if not math.isfinite(value):
        return value
    return int(round_nearest(value))
