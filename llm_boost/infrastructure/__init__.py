"""Infrastructure Layer — logging setup and other process-level concerns.

Invariants:
    - Nothing in core/ imports from here
"""
