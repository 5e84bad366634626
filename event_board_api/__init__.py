"""
Top‑level package for the Event Board API.

All functionality lives in submodules under ``app``; run the server
with ``python run.py`` or ``uvicorn event_board_api.app.main:app``.
"""

__all__ = []
