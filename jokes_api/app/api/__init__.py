"""
API package containing versioned routes and global error handlers.

A version subpackage exposes a top‑level ``router`` which includes all
of its domain‑specific endpoints.  ``error_handlers`` converts domain
errors raised by the service layer into JSON responses.
"""
