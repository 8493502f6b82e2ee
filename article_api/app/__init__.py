"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Domain objects live in ``models``, request and response
bodies in ``schemas``, persistence and business logic in ``services``
and HTTP routes under ``api/<version>/endpoints``.
"""

from .main import app  # noqa: F401
