"""Admission checks for API server TLS configuration."""

from __future__ import annotations

from tlsadmit.checks.sni import name_matches_hostname, validate_sni_names
from tlsadmit.checks.tls_profile import (
    resolve_tls_profile,
    validate_cipher_suites,
    validate_tls_security_profile,
    validate_tls_security_profile_type,
)

__all__ = [
    "name_matches_hostname",
    "resolve_tls_profile",
    "validate_cipher_suites",
    "validate_sni_names",
    "validate_tls_security_profile",
    "validate_tls_security_profile_type",
]
