"""
Path/query parameter parsing for the routing layer.

Identifiers arrive as strings and must fit a signed 64-bit column.
Malformed ids fail here with ValidationError, before any service or
database call. Page numbers are lenient: missing, junk or < 1 means
page 1; only a page too large to offset is rejected.
"""

import re
from typing import Optional

from alumni_portal.core.exceptions import ValidationError

MAX_ID = 2 ** 63 - 1
# Largest page whose OFFSET still fits a 64-bit integer
MAX_PAGE = MAX_ID // 10

_DIGITS = re.compile(r"^[0-9]+$")


def parse_id(value: str, message: str = "Invalid id") -> int:
    """Parse a decimal identifier string into an int in [0, 2**63 - 1]."""
    candidate = value.strip() if value is not None else ""
    if not _DIGITS.match(candidate) or len(candidate.lstrip("0")) > 19:
        raise ValidationError(message)
    ident = int(candidate)
    if ident > MAX_ID:
        raise ValidationError(message)
    return ident


def parse_page(value: Optional[str]) -> int:
    """parseInt-style page parsing: missing, junk or < 1 becomes 1."""
    if value is None:
        return 1
    match = re.match(r"^\s*([+-]?\d+)", value)
    if not match:
        return 1
    digits = match.group(1)
    if len(digits.lstrip("+-0")) > 19:
        raise ValidationError("Invalid page")
    page = int(digits)
    if page > MAX_PAGE:
        raise ValidationError("Invalid page")
    return page if page >= 1 else 1
