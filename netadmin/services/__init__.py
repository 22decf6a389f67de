"""
High-level use cases for the network administration API.

Routers (FastAPI endpoints) call these services instead of touching the
store or the JSON file directly.
"""
