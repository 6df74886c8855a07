"""Japanese numeral helpers."""

_DIGITS = {
    "〇": 0, "零": 0,
    "一": 1, "二": 2, "三": 3, "四": 4, "五": 5,
    "六": 6, "七": 7, "八": 8, "九": 9,
}
_UNITS = {"千": 1000, "百": 100, "十": 10}


def kanji_to_number(text: str) -> int | None:
    """Convert a native numeral (e.g. 十八, 二十四, 百五) to an int.

    Returns None for empty input or any character that is not a numeral,
    rather than guessing.
    """
    text = text.strip()
    if not text:
        return None

    total = 0
    pending: int | None = None
    last_unit = 10_000
    for ch in text:
        if ch in _DIGITS:
            if pending is not None:
                return None
            pending = _DIGITS[ch]
        elif ch in _UNITS:
            unit = _UNITS[ch]
            if unit >= last_unit:
                return None
            total += (1 if pending is None else pending) * unit
            pending = None
            last_unit = unit
        else:
            return None

    if pending is not None:
        total += pending
    return total
