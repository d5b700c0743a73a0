"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Blog records are managed by the service layer in
``services``, request and response bodies are described in
``schemas`` and the HTTP routes live in ``api/v1/endpoints``.
"""

from .main import app, create_app  # noqa: F401
