"""
Top‑level package for the Jokes API.

This file makes ``jokes_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``jokes_api.app.main``.  The HTTP client for the service lives in
``jokes_api.client``; all server functionality lives in submodules
under ``app``.
"""

__all__ = []
