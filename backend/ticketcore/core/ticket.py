"""Ticket: immutable in-memory record for a unit of work with a lifecycle status.

Invariants:
    - title/description are returned stripped; the stored values are never mutated
    - is_open() is True iff status == "Open" (exact, case-sensitive)
    - Ticket.new() is total: any text is accepted for all three fields
    - Ticket.validated() raises only at construction (InvalidStatusError, EmptyFieldError)
    - A default ticket has empty fields and is not open

Design Decisions:
    - Normalize at read time, not write time: raw_* keep exactly what was supplied
    - Frozen dataclass: no mutation after construction, safe to share by reference
"""

from dataclasses import dataclass

from ticketcore.core.domain_types import UNICODE_WHITESPACE, TicketStatus
from ticketcore.core.errors import EmptyFieldError, InvalidStatusError


@dataclass(frozen=True, slots=True)
class Ticket:
    """A ticket record. Construct with Ticket.new() or Ticket.validated().

    Ticket(title, description, status) is Ticket.new() when called
    positionally; by keyword the fields are raw_title and raw_description.
    """

    raw_title: str
    raw_description: str
    status: str

    @classmethod
    def new(cls, title: str, description: str, status: str) -> "Ticket":
        return cls(title, description, status)

    @classmethod
    def default(cls) -> "Ticket":
        return cls("", "", "")

    @classmethod
    def validated(
        cls,
        title: str,
        description: str,
        status: str,
        *,
        allow_empty: bool = True,
    ) -> "Ticket":
        """Build a ticket whose status is a recognized TicketStatus.

        With allow_empty=False, a title or description that is empty after
        stripping raises EmptyFieldError. Status is checked first.
        """
        lifecycle = TicketStatus.parse(status)
        if lifecycle is None:
            raise InvalidStatusError(status)
        if not allow_empty:
            for name, value in (("title", title), ("description", description)):
                if not value.strip(UNICODE_WHITESPACE):
                    raise EmptyFieldError(name)
        return cls(title, description, lifecycle)

    @property
    def title(self) -> str:
        return self.raw_title.strip(UNICODE_WHITESPACE)

    @property
    def description(self) -> str:
        return self.raw_description.strip(UNICODE_WHITESPACE)

    @property
    def lifecycle(self) -> TicketStatus | None:
        """Status as a TicketStatus, or None when unrecognized."""
        return TicketStatus.parse(self.status)

    def is_open(self) -> bool:
        return self.status == TicketStatus.OPEN.value
