from typing import Optional

_COUNT_UNITS = ((1_000_000, "M"), (1_000, "K"))


def format_elapsed(seconds: float) -> str:
    """Short duration for progress output, e.g. "850 ms", "12.3 s" or "2 min 5 s"."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f} s"
    minutes, rest = divmod(int(round(seconds)), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours} h {minutes} min"
    return f"{minutes} min {rest} s"


def format_count(n: int, noun: Optional[str] = None) -> str:
    """Abbreviate a count and optionally name what is counted.

    ``format_count(1, "circle")`` gives "1 circle" and
    ``format_count(2500, "circle")`` gives "2.5K circles".
    """
    text = str(n)
    for threshold, suffix in _COUNT_UNITS:
        if n >= threshold:
            text = f"{n / threshold:.1f}{suffix}"
            break
    if noun is None:
        return text
    return f"{text} {noun if n == 1 else noun + 's'}"
