"""Users API package: CRUD over a single relational `users` resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
