import math


def fixed(v, digits: int = 2) -> str:
    if v is None:
        return 'undefined'
    try:
        if not math.isfinite(v):
            return 'undefined'
        return f"{v:.{digits}f}"
    except (TypeError, ValueError):
        return str(v)


def format_number(v) -> str:
    # integral floats print without a trailing ".0"
    if isinstance(v, float):
        if not math.isfinite(v):
            return 'undefined'
        if v.is_integer() and abs(v) < 1e21:
            return str(int(v))
        return repr(v)
    return str(v)
