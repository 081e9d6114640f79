"""
Lenient scalar coercion for spreadsheet cells.

Sheet cells mix typed numbers with display strings ("1,234,500원", "12.5%",
" 3.5 % "). Coercion never raises: anything unparsable becomes None.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_NON_NUMERIC = re.compile(r"[^\d.\-]", re.ASCII)


def parse_numeric(value: Any) -> Optional[float]:
    """
    Coerce a raw cell value into a finite number.

    - numbers are kept (non-finite -> None)
    - strings keep only digits, '.' and '-' and are then parsed
    - everything else (None, booleans, dicts, ...) -> None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    if not isinstance(value, str):
        return None

    normalized = _NON_NUMERIC.sub("", value)
    if not normalized:
        return None
    try:
        number = float(normalized)
    except ValueError:
        return None
    return number if math.isfinite(number) else None
