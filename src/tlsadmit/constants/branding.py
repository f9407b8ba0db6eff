"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "tlsadmit"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: validate API server TLS serving configuration before admission"
VALID_MESSAGE: str = "Configuration is valid."
