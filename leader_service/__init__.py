"""Leader Service — REST CRUD for leader records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
