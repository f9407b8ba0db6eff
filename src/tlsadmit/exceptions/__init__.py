"""Shared exception hierarchy for tlsadmit."""

from __future__ import annotations

from .base import TlsAdmitError
from .config import ConfigError
from .lookup import InfrastructureLookupError

__all__ = [
    "ConfigError",
    "InfrastructureLookupError",
    "TlsAdmitError",
]
