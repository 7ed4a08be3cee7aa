"""
Version 1 of the API.

This subpackage bundles the joke endpoints.  They are mounted at the
application root (``/jokes``) to keep the public paths stable.
"""
