"""Decoding of DNS wire-format messages, resource records and EDNS options."""

__version__ = "0.1.0"
__all__ = ["codes", "edns", "errors", "payload", "wire"]