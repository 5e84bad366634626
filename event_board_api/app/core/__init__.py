"""
Core infrastructure: configuration, logging, the in‑memory store, the
notification bus and the FastAPI dependencies wiring them together.
"""
