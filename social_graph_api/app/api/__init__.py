"""
HTTP API package.  Routes are grouped by version under ``api/<version>``.
"""
