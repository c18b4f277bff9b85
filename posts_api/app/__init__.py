"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and storage in ``core``, request and
response models in ``schemas``, logic in ``services`` and the HTTP
routes under ``api/<version>/``.
"""

from .main import app  # noqa: F401
