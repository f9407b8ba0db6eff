"""tlsadmit: admission checks for API server TLS serving configuration."""

from __future__ import annotations

__version__ = "0.1.0"
