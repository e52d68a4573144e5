"""Services Layer: imperative shell around the pure core.

Invariants:
    - Services read configuration and log; core/ does neither
"""
