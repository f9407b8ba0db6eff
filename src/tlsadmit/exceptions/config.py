"""Configuration-related exceptions."""

from __future__ import annotations

from tlsadmit.exceptions.base import TlsAdmitError


class ConfigError(TlsAdmitError, ValueError):
    """Raised when an APIServer or Infrastructure document is unusable."""
