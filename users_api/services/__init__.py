"""Service Layer: storage access for route handlers.

Invariants:
    - Every public coroutine issues exactly one statement
    - Driver failures leave this layer as typed errors (core/errors.py)
"""
