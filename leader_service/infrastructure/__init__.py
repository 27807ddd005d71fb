"""Infrastructure — database session management and logging setup.

Invariants:
    - Only this layer (and services) touches SQLAlchemy engines
"""
