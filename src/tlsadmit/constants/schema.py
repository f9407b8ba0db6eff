"""JSON Schema (Draft 2020-12) for the fields of an APIServer document we read."""

from __future__ import annotations

from typing import Any

from tlsadmit.constants.config import APISERVER_KIND
from tlsadmit.constants.tls import TLS_VERSIONS

_EMPTY_PRESET: dict[str, Any] = {"type": ["object", "null"], "additionalProperties": False}

_STRING_LIST: dict[str, Any] = {"type": ["array", "null"], "items": {"type": "string"}}

TLS_SECURITY_PROFILE_SCHEMA: dict[str, Any] = {
    "type": ["object", "null"],
    "properties": {
        "type": {"type": "string"},
        "old": _EMPTY_PRESET,
        "intermediate": _EMPTY_PRESET,
        "modern": _EMPTY_PRESET,
        "custom": {
            "type": ["object", "null"],
            "properties": {
                "ciphers": _STRING_LIST,
                "minTLSVersion": {"enum": list(TLS_VERSIONS)},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}

APISERVER_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "apiVersion": {"type": "string"},
        "kind": {"const": APISERVER_KIND},
        "metadata": {"type": ["object", "null"]},
        "spec": {
            "type": ["object", "null"],
            "properties": {
                "servingCerts": {
                    "type": ["object", "null"],
                    "properties": {
                        "namedCertificates": {
                            "type": ["array", "null"],
                            "items": {
                                "type": "object",
                                "properties": {
                                    "names": _STRING_LIST,
                                    "servingCertificate": {
                                        "type": ["object", "null"],
                                        "properties": {"name": {"type": "string"}},
                                    },
                                },
                            },
                        },
                    },
                },
                "tlsSecurityProfile": TLS_SECURITY_PROFILE_SCHEMA,
            },
        },
    },
}
