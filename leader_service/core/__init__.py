"""Core — pure functions and types: errors, classification, pagination.

Invariants:
    - Core NEVER imports from infrastructure, services or api
    - No IO in core modules
"""
