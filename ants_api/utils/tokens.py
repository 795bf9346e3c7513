"""Token helpers shared by the parameter and record parsers."""

import re
from typing import Optional

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")


def parse_integer(token: str, low: int, high: int) -> Optional[int]:
    """Parse a base-10 ASCII integer within ``[low, high]``.

    A sign is only accepted when ``low`` is negative. Returns ``None`` for
    anything else (including ``int()``-isms like ``"1_000"`` or non-ASCII
    digits) so callers decide whether that is fatal.
    """
    pattern = _SIGNED if low < 0 else _UNSIGNED
    if not pattern.fullmatch(token):
        return None
    value = int(token)
    if not low <= value <= high:
        return None
    return value
