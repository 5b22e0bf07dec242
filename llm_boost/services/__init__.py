"""Service Layer — imperative shell that orchestrates core decisions.

Invariants:
    - Services may log and read settings; core/ may not
    - Services never touch storage: they take and return domain values
"""
