# coworker/__init__.py

"""Coworker API: workforce members and users behind token authentication."""

__version__ = "0.0.1"
