"""
Top‑level package for the Blog API.

This file makes ``blog_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``blog_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
