import math
import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def lenient_int(value, default: int, minimum: int = 0) -> int:
    """Coerce ``value`` to an int, falling back to ``default``.

    Mirrors how a browser form reads a number field: ``"12abc"`` gives 12,
    while ``None``, ``""``, booleans and anything non-numeric give the default.
    Results below ``minimum`` also give the default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return default
        result = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return default
        result = int(match.group(1))
    else:
        return default
    if result < minimum:
        return default
    return result
