"""
Core utilities shared across the network administration API.

This package hosts configuration (env vars, paths), logging setup, the
reader/writer lock guarding the VLAN store and the JSON error responses
used by the HTTP layer.
"""
