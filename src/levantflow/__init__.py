"""
LevantFlow status service.

A small Flask application exposing service identity and health metadata.
"""
__version__ = "1.0.0"

from .factory import create_app  # noqa: E402

__all__ = ["create_app", "__version__"]
