"""
Application package initializer.

This package contains the main entrypoint for the Jokes API and its
submodules: configuration and security helpers under ``core``, the
in‑memory joke store under ``services``, request/response models under
``schemas``, the built‑in seed list under ``data`` and the HTTP routes
under ``api/v1``.
"""

from .main import app  # noqa: F401
