"""Service Layer — data-access façades called by the HTTP routes.

Invariants:
    - Services receive an AsyncSession; they never create engines or sessions
"""
