"""Pydantic Schemas: serialization contracts for core value types.

Invariants:
    - Schemas validate at the system boundary (external dicts, JSON)
    - Domain objects from core/ are built through their own constructors

Design Decisions:
    - Separate from core: schemas are transport contracts, core types are the domain
"""
