"""Infrastructure Layer — database engine, seeding and logging setup.

Invariants:
    - All SQLAlchemy failures surfaced as DatabaseError (core/errors.py)
"""
