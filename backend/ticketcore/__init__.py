"""Ticket Core: minimal domain-object kernel (tickets and wrapping integers).

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Explicit imports only, no star exports
"""
