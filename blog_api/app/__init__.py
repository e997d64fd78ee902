"""
Application package.

Laid out by concern: ``core`` (configuration and logging), ``schemas``
(pydantic models), ``repositories`` (in-memory storage) and
``api/<version>`` (HTTP routes).
"""

from .main import app, create_app  # noqa: F401
