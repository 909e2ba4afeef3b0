"""
Core infrastructure: configuration, logging, errors, security helpers
and the in‑memory record store.
"""
