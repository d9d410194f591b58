"""
Application package initializer.

The service is split into a handful of small pieces: the in‑memory
user graph lives in ``services``, request and response bodies in
``schemas``, HTTP routes under ``api/v1`` and the ambient setup
(configuration, logging, localized messages, locking) in ``core``.
"""

from .main import app  # noqa: F401
