"""Core Layer — pure domain logic, no IO, no async, no DB, no logging.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure and deterministic for the same inputs (and `now`)
    - Only UnknownTierError and InvalidTransitionError are raised

Design Decisions:
    - Functional core separated from imperative shell: callers load counters
      from storage, ask the core for a decision, then persist the result
"""
