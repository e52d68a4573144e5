"""Domain Types: enums and bounded primitives shared by the core.

Invariants:
    - TicketStatus is the closed set of lifecycle states: Open, InProgress, Closed
    - Status values are compared exactly (case-sensitive), never normalized
    - U32 values live in [0, U32_MAX]

Design Decisions:
    - str Enum: TicketStatus.OPEN == "Open", so free-text and enum statuses interoperate
    - NewType for U32: zero runtime cost, documents intent at signatures
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

U32 = NewType("U32", int)           # 0..U32_MAX

U32_BITS = 32
U32_MODULUS = 1 << U32_BITS
U32_MAX = U32_MODULUS - 1

# Unicode White_Space property; str.strip() with no argument also drops U+001C..U+001F
UNICODE_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


# ─── Enums ───────────────────────────────────────────────────────

class TicketStatus(str, Enum):
    """Ticket lifecycle states. Values are the exact status literals."""
    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    CLOSED = "Closed"

    @classmethod
    def parse(cls, raw: str) -> "TicketStatus | None":
        """Exact lookup by value; None for anything outside the set."""
        try:
            return cls(raw)
        except ValueError:
            return None
