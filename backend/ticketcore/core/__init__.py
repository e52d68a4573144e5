"""Core Layer: pure domain logic, no IO, no logging, no config.

Invariants:
    - No module in core/ imports from schemas/, services/, infrastructure/ or config
    - All operations are pure and deterministic
"""
