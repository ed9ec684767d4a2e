"""Arbitrary-precision increment of decimal integers held as strings."""


def _increment_positive(value: str) -> str:
    head = value.rstrip("9")
    carried = len(value) - len(head)
    if not head:
        return "1" + "0" * len(value)
    return head[:-1] + chr(ord(head[-1]) + 1) + "0" * carried


def _decrement(value: str) -> str:
    head = value.rstrip("0")
    borrowed = len(value) - len(head)
    if head:
        result = head[:-1] + chr(ord(head[-1]) - 1) + "9" * borrowed
    else:
        result = "9" * len(value)
    return result.lstrip("0") or "0"


def increment(value: str) -> str:
    """Return the decimal string ``value`` plus one, with no size limit."""
    if value.startswith("-"):
        magnitude = value[1:]
        if magnitude in ("", "0"):
            return "1"
        lowered = _decrement(magnitude)
        if lowered == "0":
            return "0"
        return "-" + lowered
    return _increment_positive(value)