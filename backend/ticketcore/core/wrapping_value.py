"""Wrapping Value: unsigned 32-bit integer with wraparound addition.

Invariants:
    - value is always in [0, U32_MAX]
    - a + b == WrappingValue((a.value + b.value) mod 2**32), total over the domain
    - Equal iff the underlying integers are equal; hashable
    - Copies are independent and equal to the original

Design Decisions:
    - Frozen dataclass: a pure value type, nothing to alias or mutate
    - bool is rejected at construction even though it subclasses int
"""

from dataclasses import dataclass

from ticketcore.core.domain_types import U32, U32_MAX, U32_MODULUS
from ticketcore.core.errors import ValueOutOfRangeError


@dataclass(frozen=True, slots=True)
class WrappingValue:
    """Fixed-width unsigned integer. Addition wraps modulo 2**32."""

    value: U32

    def __post_init__(self):
        if (
            not isinstance(self.value, int)
            or isinstance(self.value, bool)
            or not 0 <= self.value <= U32_MAX
        ):
            raise ValueOutOfRangeError(self.value)

    @classmethod
    def new(cls, raw: int) -> "WrappingValue":
        return cls(U32(raw))

    @classmethod
    def wrapping(cls, raw: int) -> "WrappingValue":
        """Reduce any int modulo 2**32 (negatives wrap like two's complement)."""
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise ValueOutOfRangeError(raw)
        return cls(U32(raw % U32_MODULUS))

    def __add__(self, other: object) -> "WrappingValue":
        if not isinstance(other, WrappingValue):
            return NotImplemented
        return WrappingValue(U32((self.value + other.value) & U32_MAX))

    def __int__(self) -> int:
        return self.value

    def copy(self) -> "WrappingValue":
        return WrappingValue(self.value)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "WrappingValue":
        return self.copy()
