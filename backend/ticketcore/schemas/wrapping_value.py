"""Wrapping Value Schema: Pydantic model for the unsigned 32-bit value.

Invariants:
    - value is a strict int in [0, U32_MAX]; bools, floats and numeric strings rejected
"""

from pydantic import BaseModel, Field, StrictInt

from ticketcore.core.domain_types import U32_MAX
from ticketcore.core.wrapping_value import WrappingValue


class WrappingValuePayload(BaseModel):
    value: StrictInt = Field(ge=0, le=U32_MAX)

    def to_value(self) -> WrappingValue:
        return WrappingValue.new(self.value)

    @classmethod
    def from_value(cls, value: WrappingValue) -> "WrappingValuePayload":
        return cls(value=int(value))
