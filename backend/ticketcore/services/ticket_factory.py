"""Ticket Factory: config-driven ticket construction with logging.

Invariants:
    - ticket_strict_status off: Ticket.new() (total, never raises)
    - ticket_strict_status on: Ticket.validated(); rejections logged then re-raised
    - Settings default to get_settings() when not injected
"""

import logging

from ticketcore.config import Settings, get_settings
from ticketcore.core.errors import TicketCoreError
from ticketcore.core.ticket import Ticket
from ticketcore.schemas.ticket import TicketCreate

logger = logging.getLogger(__name__)


def create_ticket(
    title: str,
    description: str,
    status: str,
    settings: Settings | None = None,
) -> Ticket:
    settings = settings or get_settings()
    if not settings.ticket_strict_status:
        ticket = Ticket.new(title, description, status)
    else:
        try:
            ticket = Ticket.validated(
                title, description, status,
                allow_empty=settings.ticket_allow_empty_fields,
            )
        except TicketCoreError as e:
            logger.warning(
                "Ticket rejected: %s", e.message,
                extra={"error_code": e.code, "field": e.context.field},
            )
            raise
    lifecycle = ticket.lifecycle
    logger.debug(
        "Ticket created (open=%s)", ticket.is_open(),
        extra={"ticket_status": lifecycle.value if lifecycle else ticket.status},
    )
    return ticket


def create_ticket_from_payload(
    payload: TicketCreate, settings: Settings | None = None,
) -> Ticket:
    return create_ticket(
        payload.title, payload.description, payload.status, settings,
    )
