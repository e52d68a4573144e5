"""Ticket Schemas: Pydantic models for ticket input and output.

Invariants:
    - TicketCreate keeps text exactly as supplied (no stripping at the boundary)
    - TicketResponse carries normalized title/description and the is_open flag

Design Decisions:
    - to_ticket() uses the total Ticket.new(); strictness lives in services/
"""

from pydantic import BaseModel

from ticketcore.core.ticket import Ticket


class TicketCreate(BaseModel):
    """Ticket input: any text accepted for every field."""
    title: str = ""
    description: str = ""
    status: str = ""

    def to_ticket(self) -> Ticket:
        return Ticket.new(self.title, self.description, self.status)


class TicketResponse(BaseModel):
    """Ticket output: normalized, read-only projection."""
    title: str
    description: str
    status: str
    is_open: bool

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> "TicketResponse":
        lifecycle = ticket.lifecycle
        return cls(
            title=ticket.title,
            description=ticket.description,
            status=lifecycle.value if lifecycle is not None else ticket.status,
            is_open=ticket.is_open(),
        )
