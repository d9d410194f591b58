"""
Core infrastructure: configuration, logging, messages and locking.
"""
