"""
Shared field types and helpers for post and comment schemas.
"""

import re
from datetime import datetime, timezone
from typing import Optional

# Ids are unsigned 64-bit integers.
UINT64_MAX = 2**64 - 1

# Value a timestamp field takes when the payload omits it.
UNSET_TIMESTAMP = datetime(1, 1, 1, tzinfo=timezone.utc)

_DIGITS = re.compile(r"[0-9]+")


def parse_uint64(raw: Optional[str]) -> Optional[int]:
    """Parse ``raw`` as an unsigned 64-bit decimal integer.

    Only ASCII digits are accepted (no sign, no whitespace).  Returns
    ``None`` when the value is missing, malformed or out of range.
    """
    if raw is None or not _DIGITS.fullmatch(raw):
        return None
    value = int(raw)
    if value > UINT64_MAX:
        return None
    return value
