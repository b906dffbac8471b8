"""
Local development notes API.

This module exposes the application factory so that scripts and tests
can import `create_app` without causing circular imports.
"""

from .app import create_app

__all__ = ["create_app"]
