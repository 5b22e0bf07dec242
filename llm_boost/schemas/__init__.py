"""Pydantic Schemas — runtime validation of everything entering the core.

Invariants:
    - Schemas validate at system boundary (storage rows, request payloads)
    - Domain enums from core/ used for tier and status fields
    - to_domain() converts a validated schema into a frozen core value
"""
