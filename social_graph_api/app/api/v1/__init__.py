"""
Version 1 of the API.

This subpackage bundles the endpoints of the social graph service.
Breaking changes should be introduced in a new version subpackage
(e.g. ``v2``).
"""
