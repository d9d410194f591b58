"""
Pydantic schema definitions for API payloads.

The ``User`` model doubles as the stored record: the graph store keeps
``User`` instances and hands out deep copies so callers never alias its
state.
"""
