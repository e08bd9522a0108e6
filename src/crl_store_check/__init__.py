"""Monitoring check for CRL freshness in a hashed certificate directory."""

__version__ = "0.1.0"
