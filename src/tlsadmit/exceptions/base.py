"""Base exception for tlsadmit."""

from __future__ import annotations


class TlsAdmitError(Exception):
    """Root of the tlsadmit exception hierarchy."""
