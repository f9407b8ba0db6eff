"""TLS protocol versions, cipher catalog and predefined profile presets."""

from __future__ import annotations

from types import MappingProxyType

PROFILE_OLD: str = "Old"
PROFILE_INTERMEDIATE: str = "Intermediate"
PROFILE_MODERN: str = "Modern"
PROFILE_CUSTOM: str = "Custom"

# Order is part of the "unknown type" message.
PROFILE_TYPES: tuple[str, ...] = (PROFILE_OLD, PROFILE_INTERMEDIATE, PROFILE_MODERN, PROFILE_CUSTOM)

# Used when no tlsSecurityProfile is configured.
DEFAULT_PROFILE_TYPE: str = PROFILE_INTERMEDIATE

VERSION_TLS10: str = "VersionTLS10"
VERSION_TLS11: str = "VersionTLS11"
VERSION_TLS12: str = "VersionTLS12"
VERSION_TLS13: str = "VersionTLS13"

TLS_VERSIONS: tuple[str, ...] = (VERSION_TLS10, VERSION_TLS11, VERSION_TLS12, VERSION_TLS13)

# OpenSSL-style name -> IANA name.  TLS 1.3 suites share both spellings.
TLS13_CIPHERS: MappingProxyType[str, str] = MappingProxyType(
    {
        "TLS_AES_128_GCM_SHA256": "TLS_AES_128_GCM_SHA256",
        "TLS_AES_256_GCM_SHA384": "TLS_AES_256_GCM_SHA384",
        "TLS_CHACHA20_POLY1305_SHA256": "TLS_CHACHA20_POLY1305_SHA256",
    }
)

# TLS 1.2 and earlier suites the serving stack can negotiate.
TLS12_CIPHERS: MappingProxyType[str, str] = MappingProxyType(
    {
        # TLS 1.2
        "ECDHE-ECDSA-AES128-GCM-SHA256": "TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256",
        "ECDHE-RSA-AES128-GCM-SHA256": "TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256",
        "ECDHE-ECDSA-AES256-GCM-SHA384": "TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384",
        "ECDHE-RSA-AES256-GCM-SHA384": "TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384",
        "ECDHE-ECDSA-CHACHA20-POLY1305": "TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256",
        "ECDHE-RSA-CHACHA20-POLY1305": "TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256",
        "ECDHE-ECDSA-AES128-SHA256": "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA256",
        "ECDHE-RSA-AES128-SHA256": "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA256",
        "AES128-GCM-SHA256": "TLS_RSA_WITH_AES_128_GCM_SHA256",
        "AES256-GCM-SHA384": "TLS_RSA_WITH_AES_256_GCM_SHA384",
        "AES128-SHA256": "TLS_RSA_WITH_AES_128_CBC_SHA256",
        # TLS 1.0
        "ECDHE-ECDSA-AES128-SHA": "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA",
        "ECDHE-RSA-AES128-SHA": "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA",
        "ECDHE-ECDSA-AES256-SHA": "TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA",
        "ECDHE-RSA-AES256-SHA": "TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA",
        # SSL 3.0
        "AES128-SHA": "TLS_RSA_WITH_AES_128_CBC_SHA",
        "AES256-SHA": "TLS_RSA_WITH_AES_256_CBC_SHA",
        "DES-CBC3-SHA": "TLS_RSA_WITH_3DES_EDE_CBC_SHA",
    }
)

_TLS13_SUITES: tuple[str, ...] = tuple(TLS13_CIPHERS)

_INTERMEDIATE_SUITES: tuple[str, ...] = (
    *_TLS13_SUITES,
    "ECDHE-ECDSA-AES128-GCM-SHA256",
    "ECDHE-RSA-AES128-GCM-SHA256",
    "ECDHE-ECDSA-AES256-GCM-SHA384",
    "ECDHE-RSA-AES256-GCM-SHA384",
    "ECDHE-ECDSA-CHACHA20-POLY1305",
    "ECDHE-RSA-CHACHA20-POLY1305",
    "DHE-RSA-AES128-GCM-SHA256",
    "DHE-RSA-AES256-GCM-SHA384",
)

_OLD_SUITES: tuple[str, ...] = (
    *_INTERMEDIATE_SUITES,
    "DHE-RSA-CHACHA20-POLY1305",
    "ECDHE-ECDSA-AES128-SHA256",
    "ECDHE-RSA-AES128-SHA256",
    "ECDHE-ECDSA-AES128-SHA",
    "ECDHE-RSA-AES128-SHA",
    "ECDHE-ECDSA-AES256-SHA384",
    "ECDHE-RSA-AES256-SHA384",
    "ECDHE-ECDSA-AES256-SHA",
    "ECDHE-RSA-AES256-SHA",
    "DHE-RSA-AES128-SHA256",
    "DHE-RSA-AES256-SHA256",
    "AES128-GCM-SHA256",
    "AES256-GCM-SHA384",
    "AES128-SHA256",
    "AES256-SHA256",
    "AES128-SHA",
    "AES256-SHA",
    "DES-CBC3-SHA",
)

# Preset type -> (cipher names, minimum TLS version).
PRESET_PROFILES: MappingProxyType[str, tuple[tuple[str, ...], str]] = MappingProxyType(
    {
        PROFILE_OLD: (_OLD_SUITES, VERSION_TLS10),
        PROFILE_INTERMEDIATE: (_INTERMEDIATE_SUITES, VERSION_TLS12),
        PROFILE_MODERN: (_TLS13_SUITES, VERSION_TLS13),
    }
)
