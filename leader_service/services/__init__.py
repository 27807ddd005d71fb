"""Services Layer — persistence operations behind the HTTP routes.

Invariants:
    - Services raise typed errors from core/errors.py and never build HTTP responses
"""
