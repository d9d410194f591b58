"""
Top‑level package for the Social Graph API.

This file makes ``social_graph_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``social_graph_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
