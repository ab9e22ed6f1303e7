"""
Thai Agricultural Price API.

Read-only REST API over the Thai agricultural commodity catalog and
per-product price history files.
"""

__version__ = "1.0.0"
