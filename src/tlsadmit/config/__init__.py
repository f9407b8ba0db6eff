"""Document loading and schema validation for tlsadmit."""

from __future__ import annotations

from tlsadmit.config.loader import (
    build_tls_profile,
    load_apiserver,
    load_infrastructure,
    parse_yaml,
    read_document_text,
    read_yaml,
)
from tlsadmit.config.validator import validate_apiserver_file

__all__ = [
    "build_tls_profile",
    "load_apiserver",
    "load_infrastructure",
    "parse_yaml",
    "read_document_text",
    "read_yaml",
    "validate_apiserver_file",
]
