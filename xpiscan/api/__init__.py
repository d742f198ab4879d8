"""xpiscan API package.

This module provides an optional FastAPI service layer around install.rdf
metadata extraction.
"""

from .server import create_app  # noqa: F401
